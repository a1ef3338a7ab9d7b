"""
Pytest configuration and fixtures for fastapi-lang tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from fastapi_lang.i18n.catalog import LangCode  # noqa: E402
from fastapi_lang.negotiation import LanguageConfig  # noqa: E402
from utils.mock_utils import build_test_app  # noqa: E402


@pytest.fixture
def configured():
    """Factory: a TestClient for an app using the given LanguageConfig."""

    def _configured(config: LanguageConfig) -> TestClient:
        return TestClient(build_test_app(config))

    return _configured


@pytest.fixture
def not_configured() -> TestClient:
    """TestClient for an app without the language middleware."""
    return TestClient(build_test_app())


@pytest.fixture
def weighted_config() -> LanguageConfig:
    """En and De half supported, Es fully supported."""
    config = LanguageConfig()
    config[LangCode.EN] = 0.5
    config[LangCode.DE] = 0.5
    config[LangCode.ES] = 1.0
    return config


@pytest.fixture
def fully_supported_config() -> LanguageConfig:
    """Every known language fully supported."""
    config = LanguageConfig()
    for lang in LangCode:
        config[lang] = 1.0
    return config
