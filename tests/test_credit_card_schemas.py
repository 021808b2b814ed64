"""Tests for app.schemas.credit_cards module."""
import pytest
from unittest.mock import Mock

from app.models import CreditCard, Employee
from app.schemas.credit_cards import mask_card_number, sanitize_card


@pytest.mark.parametrize("number, expected", [
    ("4111111111111111", "****1111"),
    ("1234", "****1234"),
    ("123", "123"),
    ("", ""),
    (None, None),
])
def test_mask_card_number(number, expected):
    assert mask_card_number(number) == expected


def test_sanitize_card_masks_sensitive_fields():
    card = Mock(spec=CreditCard)
    card.id = 1
    card.name = "Visa Marie"
    card.card_number = "4111111111111111"
    card.type = "Visa"
    card.expiration_month = "04"
    card.expiration_year = "2028"
    card.active = True
    card.csv = "123"
    card.email = "marie@example.com"
    card.description = None
    card.employee_id = 1
    card.employee = Mock(spec=Employee)
    card.employee.id = 1
    card.employee.name = "Marie Tremblay"

    response = sanitize_card(card)

    assert response.card_number == "****1111"
    assert response.csv == "***"
    assert response.employee.name == "Marie Tremblay"
    assert response.expiration_year == "2028"


def test_sanitize_card_from_database(db, encryption_settings):
    employee = Employee(name="Jean Bouchard")
    db.add(employee)
    db.flush()
    db.add(CreditCard(name="Amex Jean", card_number="378282246310005", employee_id=employee.id))
    db.commit()
    db.expire_all()

    response = sanitize_card(db.query(CreditCard).first())

    assert response.card_number == "****0005"
    assert response.csv is None
    assert response.active is True
    assert response.employee.name == "Jean Bouchard"
