"""Pytest fixtures for josa tests."""

from collections.abc import Generator

import pytest

from josa.categories import JongseongClass
from josa.core.config import Settings, get_settings
from josa.selector import JosaSelector


@pytest.fixture
def selector() -> JosaSelector:
    """Create a selector with the default Hangul classifier."""
    return JosaSelector()


@pytest.fixture
def class_samples() -> dict[JongseongClass, str]:
    """One synthetic noun per syllable class."""
    return {
        JongseongClass.OPEN: "나",
        JongseongClass.RIEUL: "칼",
        JongseongClass.CLOSED: "책",
    }


@pytest.fixture
def non_hangul_nouns() -> list[str]:
    """Nouns whose last character is outside the Hangul Syllables block."""
    return [
        "curry",
        "버전2",
        "<span>고양이</span>",
        "ㄱ",
        "고양이!",
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings with a text log format and debug level."""
    monkeypatch.setenv("JOSA_LOG_FORMAT", "text")
    monkeypatch.setenv("JOSA_LOG_LEVEL", "DEBUG")
    return get_settings()
