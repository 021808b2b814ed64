from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base
from .types import EncryptedText


class CreditCard(Base):
    __tablename__ = "credit_cards"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    card_number = Column(EncryptedText, nullable=True)
    type = Column(String(50), nullable=True)  # Visa, Mastercard, Amex
    expiration_month = Column(String(2), nullable=True)
    expiration_year = Column(String(4), nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    csv = Column(EncryptedText, nullable=True)
    email = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)

    employee = relationship("Employee", back_populates="credit_cards")
