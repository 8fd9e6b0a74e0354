"""
Pytest configuration and fixtures for the locale validator tests.
"""

import io
import json
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest

from locale_validator.config import Settings
from locale_validator.reporting import GitHubReporter, LogReporter

REFERENCE_LOCALE = {"localeCode": "en", "messages": {"greeting": "hi", "farewell": "bye"}}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_locale(temp_dir: Path) -> Callable[..., Path]:
    """Write a locale file into the temporary directory."""
    def _write(name: str, content: Any, indent: int = 2) -> Path:
        path = temp_dir / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, indent=indent, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reference_locale() -> Dict[str, Any]:
    return json.loads(json.dumps(REFERENCE_LOCALE))


@pytest.fixture
def locale_dir(temp_dir: Path, write_locale, reference_locale) -> Path:
    """Temporary directory holding a valid en.json reference."""
    write_locale("en.json", reference_locale)
    return temp_dir


@pytest.fixture
def settings(locale_dir: Path) -> Settings:
    """Settings pointing at the temporary locale directory, annotations off."""
    return Settings(
        ci=False,
        github_actions=False,
        locale_dir=locale_dir,
        main_language="en.json",
        locale_pattern="*.json",
        annotations=False,
    )


@pytest.fixture
def annotated_settings(settings: Settings) -> Settings:
    return settings.model_copy(update={"annotations": True})


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def github_reporter(output: io.StringIO) -> GitHubReporter:
    """Reporter writing workflow commands into a buffer."""
    return GitHubReporter(stream=output)


@pytest.fixture
def log_reporter() -> LogReporter:
    return LogReporter()
