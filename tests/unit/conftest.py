"""Unit test configuration - isolate tests from the developer's environment"""

import pytest

# Variables read by Settings.from_env()
SETTINGS_ENV_VARS = [
    "SEARCH_ROOT",
    "DOCUMENT_EXTENSIONS",
    "MIN_RESULTS",
    "SCORE_THRESHOLD",
    "PHRASE_BONUS",
    "MIN_PHRASE_LENGTH",
    "DISPLAY_LIMIT",
    "SNIPPET_WIDTH",
    "SEARCH_PROVIDER",
    "SEARCH_TIMEOUT",
    "EXTRACT_WORKERS",
    "LOG_LEVEL",
    "LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """
    Remove configuration variables for each unit test.

    Also stops Settings.from_env() from loading a local .env.local / .env,
    so unit tests never depend on the developer's configuration.
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("pdf_organizer.config.load_env_files", lambda *args, **kwargs: None)
