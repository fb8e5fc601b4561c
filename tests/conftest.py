"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch
the real one. Tables are created before each test and
dropped after it, and each test's session rolls back.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from auditable.models.base import Base
from auditable.registry import EntityRegistry
from auditable.services.audit_service import AuditService
from auditable.services.identity import IdentityConfig

import sample_models  # noqa: F401  registers the tracked tables on Base


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """
    Create all tables before each test, drop them after.

    autouse=True means every test starts with a clean database.
    """
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def registry():
    return EntityRegistry.from_base(Base)


@pytest.fixture
def service(db_session, registry):
    """An AuditService that finds actors in the users table."""
    return AuditService(
        db_session, registry, IdentityConfig(actor_kind="User")
    )
