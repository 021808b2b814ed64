# Database models
from .base import Base
from .types import EncryptedText, DeterministicEncryptedText
from .employee import Employee
from .supplier import Supplier
from .gl_account import GlAccount
from .credit_card import CreditCard

__all__ = [
    "Base",
    "EncryptedText",
    "DeterministicEncryptedText",
    "Employee",
    "Supplier",
    "GlAccount",
    "CreditCard",
]
