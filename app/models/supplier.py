from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func

from .base import Base
from .types import DeterministicEncryptedText


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    # Deterministic so suppliers can be found by name (upsert-by-name)
    name = Column(DeterministicEncryptedText, unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
