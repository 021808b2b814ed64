"""Read schemas for credit cards: card number and CSV never leave unmasked."""
from typing import Optional
from pydantic import BaseModel


def mask_card_number(number: Optional[str]) -> Optional[str]:
    """Keep only the last 4 digits: ****1234. Shorter values are returned as-is."""
    if number and len(number) >= 4:
        return "****" + number[-4:]
    return number


class EmployeeSummary(BaseModel):
    id: int
    name: str


class CreditCardResponse(BaseModel):
    """Schema for a credit card as returned to callers"""
    id: int
    name: str
    card_number: Optional[str] = None
    type: Optional[str] = None
    expiration_month: Optional[str] = None
    expiration_year: Optional[str] = None
    active: bool = True
    csv: Optional[str] = None
    email: Optional[str] = None
    description: Optional[str] = None
    employee_id: int
    employee: Optional[EmployeeSummary] = None


def sanitize_card(card) -> CreditCardResponse:
    """Build the masked response from a CreditCard row (values already decrypted)."""
    employee = None
    if card.employee is not None:
        employee = EmployeeSummary(id=card.employee.id, name=card.employee.name)

    return CreditCardResponse(
        id=card.id,
        name=card.name,
        card_number=mask_card_number(card.card_number),
        type=card.type,
        expiration_month=card.expiration_month,
        expiration_year=card.expiration_year,
        active=card.active,
        csv="***" if card.csv else None,
        email=card.email,
        description=card.description,
        employee_id=card.employee_id,
        employee=employee,
    )
