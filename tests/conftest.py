import pytest
from unittest.mock import patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base

TEST_ENCRYPTION_KEY = "a-valid-32-char-or-longer-secret"


@pytest.fixture
def encryption_settings():
    """Encryption enabled with a valid master key"""
    with patch("app.services.encryption.settings") as mock_settings:
        mock_settings.encryption_key = TEST_ENCRYPTION_KEY
        yield mock_settings


@pytest.fixture
def no_encryption_settings():
    """No master key configured: plaintext pass-through"""
    with patch("app.services.encryption.settings") as mock_settings:
        mock_settings.encryption_key = None
        yield mock_settings


@pytest.fixture
def db():
    """In-memory SQLite session with all tables created"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()
