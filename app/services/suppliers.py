"""Supplier lookup by name over deterministically encrypted names."""
import logging
from typing import Optional

from sqlalchemy import Text, or_, type_coerce
from sqlalchemy.orm import Session

from app.models.supplier import Supplier

logger = logging.getLogger(__name__)


def find_supplier_by_name(db: Session, name: str) -> Optional[Supplier]:
    """
    Find a supplier by exact name.

    The name is encrypted deterministically by the column type and compared
    with the stored envelopes; rows written before encryption was enabled
    are matched on their plaintext.
    """
    name = (name or "").strip()
    if not name:
        return None
    return db.query(Supplier).filter(
        or_(
            Supplier.name == name,
            type_coerce(Supplier.name, Text) == name,
        )
    ).first()


def get_or_create_supplier(db: Session, name: str) -> Supplier:
    """Return the supplier with this name, creating it if missing."""
    name = (name or "").strip()
    if not name:
        raise ValueError("Supplier name is required")

    supplier = find_supplier_by_name(db, name)
    if supplier:
        return supplier

    supplier = Supplier(name=name)
    db.add(supplier)
    db.flush()
    logger.info("Created supplier id=%s", supplier.id)
    return supplier
