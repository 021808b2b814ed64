"""
Column types that encrypt on write and decrypt on read.

Stored values are opaque envelopes (see app.services.encryption); TEXT is
used because envelopes are longer than the plaintext.
"""
from sqlalchemy import Text, TypeDecorator

from app.services.encryption import decrypt, encrypt, encrypt_deterministic


class EncryptedText(TypeDecorator):
    """Randomized encryption: equal values are stored as different envelopes."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encrypt(value)

    def process_result_value(self, value, dialect):
        return decrypt(value)


class DeterministicEncryptedText(TypeDecorator):
    """
    Deterministic encryption for columns used as lookup keys.

    Comparison literals go through process_bind_param as well, so
    ``Supplier.name == "Costco"`` matches the stored envelope directly.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None or value == "":
            return value
        return encrypt_deterministic(value)

    def process_result_value(self, value, dialect):
        return decrypt(value)
