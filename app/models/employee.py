from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from .base import Base
from .types import EncryptedText


class Employee(Base):
    """Employee submitting card purchases"""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(EncryptedText, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    credit_cards = relationship("CreditCard", back_populates="employee")
