from sqlalchemy import Column, Integer, String

from .base import Base
from .types import EncryptedText


class GlAccount(Base):
    """General-ledger account assigned to expenses by the accountant"""
    __tablename__ = "gl_accounts"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(20), nullable=False, index=True)
    name = Column(EncryptedText, nullable=False)
    company = Column(String(255), nullable=True)
