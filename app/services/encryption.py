"""
Field-level encryption for personal data stored in the database.

Envelopes are base64(IV ‖ TAG ‖ CIPHERTEXT) produced by AES-256-GCM with a
key derived from ENCRYPTION_KEY via SHA-256:

- encrypt(): random IV on every call.
- encrypt_deterministic(): IV = HMAC-SHA256(key, plaintext)[:16], output
  prefixed with "DET:" so equal plaintexts give equal envelopes and rows can
  be matched without decrypting them.

Without a usable key (missing or shorter than 16 characters) every function
returns its input unchanged. Values that cannot be decrypted are returned as
they are, so legacy plaintext rows keep reading during migration.
"""
import base64
import hashlib
import hmac
import logging
import secrets
from functools import lru_cache
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from app.config import settings, MIN_ENCRYPTION_KEY_LENGTH

logger = logging.getLogger(__name__)

IV_LENGTH = 16
TAG_LENGTH = 16
DETERMINISTIC_PREFIX = "DET:"


@lru_cache(maxsize=8)
def derive_key(master_key: str) -> bytes:
    """Derive the 32-byte AES-256 key from the master key via SHA-256."""
    return hashlib.sha256(master_key.encode("utf-8")).digest()


def _key_length(master_key: str) -> int:
    # Counted in UTF-16 code units: a character outside the BMP counts twice
    return len(master_key.encode("utf-16-le")) // 2


def _get_key() -> Optional[bytes]:
    """Current encryption key, or None when encryption is disabled."""
    master_key = settings.encryption_key
    if not master_key or _key_length(master_key) < MIN_ENCRYPTION_KEY_LENGTH:
        return None
    return derive_key(master_key)


def _deterministic_iv(key: bytes, plaintext: str) -> bytes:
    return hmac.new(key, plaintext.encode("utf-8"), hashlib.sha256).digest()[:IV_LENGTH]


def _seal(key: bytes, iv: bytes, plaintext: str) -> str:
    sealed = AESGCM(key).encrypt(iv, plaintext.encode("utf-8"), None)
    # AESGCM appends the tag; the envelope stores it right after the IV
    ciphertext, tag = sealed[:-TAG_LENGTH], sealed[-TAG_LENGTH:]
    return base64.b64encode(iv + tag + ciphertext).decode("ascii")


def _open(key: bytes, envelope: str) -> Optional[tuple[bytes, str]]:
    """Return (iv, plaintext), or None if the envelope does not decrypt."""
    try:
        raw = base64.b64decode(envelope, validate=True)
        if len(raw) < IV_LENGTH + TAG_LENGTH:
            return None
        iv = raw[:IV_LENGTH]
        tag = raw[IV_LENGTH:IV_LENGTH + TAG_LENGTH]
        ciphertext = raw[IV_LENGTH + TAG_LENGTH:]
        plaintext = AESGCM(key).decrypt(iv, ciphertext + tag, None)
        return iv, plaintext.decode("utf-8")
    except (ValueError, InvalidTag):
        # bad base64, non-ASCII input, tag mismatch or invalid UTF-8
        return None


def _open_deterministic(key: bytes, envelope: str) -> Optional[str]:
    opened = _open(key, envelope)
    if opened is None:
        return None
    iv, plaintext = opened
    # A randomized envelope decrypts too, but its IV is not the HMAC of its plaintext
    if not hmac.compare_digest(iv, _deterministic_iv(key, plaintext)):
        return None
    return plaintext


def encrypt(plaintext: Optional[str]) -> Optional[str]:
    """Encrypt with a random IV. None and "" are returned unchanged."""
    if plaintext is None or plaintext == "":
        return plaintext
    key = _get_key()
    if key is None:
        return plaintext
    return _seal(key, secrets.token_bytes(IV_LENGTH), plaintext)


def decrypt(ciphertext: Optional[str]) -> Optional[str]:
    """
    Decrypt a randomized or "DET:"-prefixed envelope.

    Anything that is not a valid envelope for the current key (legacy
    plaintext, truncated or tampered data) is returned unchanged.
    """
    if ciphertext is None or ciphertext == "":
        return ciphertext
    key = _get_key()
    if key is None:
        return ciphertext

    if ciphertext.startswith(DETERMINISTIC_PREFIX):
        plaintext = _open_deterministic(key, ciphertext[len(DETERMINISTIC_PREFIX):])
    else:
        opened = _open(key, ciphertext)
        plaintext = opened[1] if opened else None

    if plaintext is None:
        logger.debug("Value is not a readable envelope, returning it unchanged")
        return ciphertext
    return plaintext


def encrypt_deterministic(plaintext: str) -> str:
    """
    Encrypt so that the same plaintext always gives the same output.

    Equal values are detectable in storage; use it only for columns that
    are looked up by exact value (supplier names).
    """
    key = _get_key()
    if key is None:
        return plaintext
    return DETERMINISTIC_PREFIX + _seal(key, _deterministic_iv(key, plaintext), plaintext)


def decrypt_deterministic(ciphertext: str) -> str:
    """Inverse of encrypt_deterministic. Accepts the envelope with or without its "DET:" marker."""
    key = _get_key()
    if key is None:
        return ciphertext
    envelope = ciphertext
    if envelope.startswith(DETERMINISTIC_PREFIX):
        envelope = envelope[len(DETERMINISTIC_PREFIX):]
    plaintext = _open_deterministic(key, envelope)
    if plaintext is None:
        logger.debug("Value is not a readable deterministic envelope, returning it unchanged")
        return ciphertext
    return plaintext


def is_encrypted(value: Optional[str]) -> bool:
    """True if value is an envelope that decrypts under the current key."""
    if not value:
        return False
    key = _get_key()
    if key is None:
        return False
    if value.startswith(DETERMINISTIC_PREFIX):
        return _open_deterministic(key, value[len(DETERMINISTIC_PREFIX):]) is not None
    return _open(key, value) is not None


def looks_like_envelope(value: Optional[str]) -> bool:
    """
    True if value has the shape of an envelope, whichever key produced it.

    A "DET:" prefix, or strict base64 long enough to hold the IV and tag.
    """
    if not value:
        return False
    if value.startswith(DETERMINISTIC_PREFIX):
        return True
    try:
        raw = base64.b64decode(value, validate=True)
    except ValueError:
        return False
    return len(raw) >= IV_LENGTH + TAG_LENGTH


def generate_key() -> str:
    """New random master key for ENCRYPTION_KEY."""
    return secrets.token_urlsafe(32)


def is_enabled() -> bool:
    """True when a usable ENCRYPTION_KEY is configured."""
    return _get_key() is not None
