"""
Encrypt values stored before ENCRYPTION_KEY was configured.

Reads the raw column values (bypassing the encrypted column types) and
rewrites every plaintext one through its column type, which encrypts it.
Values that already have the shape of an envelope are left alone, whether
or not they decrypt under the current key, so the migration can be run
repeatedly and never wraps an envelope written under another key.
"""
import logging

from sqlalchemy import Text, select, type_coerce, update
from sqlalchemy.orm import Session

from app.models import CreditCard, Employee, GlAccount, Supplier
from app.services.encryption import is_enabled, is_encrypted, looks_like_envelope

logger = logging.getLogger(__name__)

ENCRYPTED_COLUMNS = [
    Employee.__table__.c.name,
    Supplier.__table__.c.name,
    GlAccount.__table__.c.name,
    CreditCard.__table__.c.card_number,
    CreditCard.__table__.c.csv,
]


def reencrypt_legacy_rows(db: Session) -> dict[str, int]:
    """
    Encrypt legacy plaintext values in every encrypted column.

    Returns the number of rewritten values per "table.column". Nothing is
    written when encryption is disabled. The caller commits.
    """
    counts = {f"{column.table.name}.{column.name}": 0 for column in ENCRYPTED_COLUMNS}
    if not is_enabled():
        logger.warning("ENCRYPTION_KEY not configured, skipping legacy row encryption")
        return counts

    for column in ENCRYPTED_COLUMNS:
        table = column.table
        label = f"{table.name}.{column.name}"
        rows = db.execute(
            select(table.c.id, type_coerce(column, Text).label("raw"))
        ).all()

        unreadable = 0
        for row_id, raw in rows:
            if not raw or is_encrypted(raw):
                continue
            if looks_like_envelope(raw):
                unreadable += 1
                continue
            db.execute(
                update(table).where(table.c.id == row_id).values({column.name: raw})
            )
            counts[label] += 1

        if counts[label]:
            logger.info("Encrypted %d legacy values in %s", counts[label], label)
        if unreadable:
            logger.warning(
                "Skipped %d values in %s that look encrypted under another key", unreadable, label
            )

    return counts
