"""
Test Configuration and Fixtures

Architecture:
- Unit tests (test/**/unit/): no database, no app lifespan, fakes only
- Integration tests: real app through TestClient, each test on its own sqlite file
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (core_setting.settings, loguru sinks)
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    default_db = Path(tempfile.gettempdir()) / 'eventhub_test_default.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{default_db}'
    os.environ['EMAIL_BACKEND'] = 'mock'
    os.environ['DEBUG'] = 'false'
    os.environ['SECRET_KEY'] = 'eventhub_test_secret'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from eventhub.main import app  # noqa: E402
from eventhub.platform.config.core_setting import settings  # noqa: E402
from eventhub.platform.config.di import container  # noqa: E402
from eventhub.platform.database.orm_db_setting import (  # noqa: E402
    create_db_and_tables,
    dispose_engine,
    get_session_maker,
)
from eventhub.service.ticketing.driven_adapter.mailer.mock_email_service import (  # noqa: E402
    MockEmailService,
)


# =============================================================================
# Database Isolation
# =============================================================================
@pytest.fixture
def isolated_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Point the engine manager at a fresh sqlite file for this test only."""
    db_url = f'sqlite+aiosqlite:///{tmp_path / "eventhub_test.db"}'
    monkeypatch.setattr(settings, 'DATABASE_URL', db_url)
    return db_url


@pytest_asyncio.fixture
async def session_maker(
    isolated_database: str,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Schema-ready session maker for repository tests that skip the HTTP layer."""
    await create_db_and_tables()
    yield get_session_maker()
    await dispose_engine()


# =============================================================================
# App / Client
# =============================================================================
@pytest.fixture
def mock_email_service() -> Generator[MockEmailService, None, None]:
    service = container.email_service()
    assert isinstance(service, MockEmailService)
    service.clear_sent_emails()
    yield service
    service.clear_sent_emails()


@pytest.fixture
def client(isolated_database: str) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
