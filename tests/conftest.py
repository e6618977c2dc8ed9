"""Configuração do pytest para o conector de webhooks Firestore."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import clear_settings_cache  # noqa: E402

_SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "DEBUG",
    "GCP_PROJECT",
    "GOOGLE_CLOUD_PROJECT",
    "LOG_LEVEL",
    "WEBHOOK_URL",
    "WEBHOOK_ALLOWED_DOMAINS",
    "WEBHOOK_TIMEOUT_SECONDS",
    "WEBHOOK_USER_AGENT",
    "WEBHOOK_SOURCE_NAME",
    "ENABLE_CREATE_WEBHOOK",
    "ENABLE_UPDATE_WEBHOOK",
    "ENABLE_DELETE_WEBHOOK",
    "CREATE_COLLECTION_PATH",
    "UPDATE_COLLECTION_PATH",
    "DELETE_COLLECTION_PATH",
    "DATABASE_NAME",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Cada teste começa sem env de settings e sem cache."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def restore_root_logger():
    """Restaura handlers e nível do root logger após o teste."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
