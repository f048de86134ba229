"""Pytest configuration and fixtures."""
import pytest

from prodenv.config import get_settings


TEMPLATE_TEXT = """# Production settings
LIGHTRAG_API_KEY=CHANGE_ME
TOKEN_SECRET=CHANGE_ME

NEO4J_USERNAME=neo4j
NEO4J_PASSWORD=CHANGE_ME
LLM_BINDING_API_KEY=
   # indented comment with KEY=value
not an assignment
"""


@pytest.fixture(autouse=True)
def settings_env(tmp_path, monkeypatch):
    """Point the settings at a temporary root directory."""
    monkeypatch.setenv("PRODENV_ROOT_DIR", str(tmp_path))
    for name in (
        "TEMPLATE_FILENAME", "OUTPUT_FILENAME", "PLACEHOLDER",
        "API_KEY_BYTES", "PASSWORD_BYTES", "OUTPUT_FILE_MODE", "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"PRODENV_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def template_path(tmp_path):
    """Write the sample template into the temporary root."""
    path = tmp_path / ".prod.env"
    path.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / ".prod.secrets.env"


def parse_env(text: str) -> dict[str, str]:
    """Return key/value pairs of assignment lines in ``text``."""
    values = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value
    return values
