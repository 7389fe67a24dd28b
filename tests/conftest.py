"""
Pytest configuration and fixtures for OS font resolution tests.
"""

import os
import tempfile
from pathlib import Path

import pytest

from osfont.fonts import FontResolver, StaticFontCatalog, iter_rules


@pytest.fixture(autouse=True)
def clean_osfont_env(monkeypatch):
    """Keep OSFONT_ settings from the developer environment out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("OSFONT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def rule_font_names():
    """Every font name that appears in the rule table."""
    return sorted({rule.font_name for _, rule in iter_rules()})


@pytest.fixture
def full_catalog(rule_font_names):
    """Catalog containing every rule font."""
    return StaticFontCatalog(rule_font_names)


@pytest.fixture
def empty_catalog():
    """Catalog containing no fonts."""
    return StaticFontCatalog()


@pytest.fixture
def resolver(full_catalog):
    """Resolver whose catalog has every rule font installed."""
    return FontResolver(full_catalog)


@pytest.fixture
def temp_dir():
    """Create temporary directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)
