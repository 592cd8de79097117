"""Shared pytest configuration and marker assignment."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Drop stderr handlers the CLI attaches so they do not outlive a test."""
    package_logger = logging.getLogger("helm_converter")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


FAKE_PLUGIN_SOURCE = '''
"""Toy notation: anything not starting with BAD converts to its lower case."""


class _Parser:
    def parse(self, notation):
        if notation.startswith("BAD"):
            raise ValueError("unsupported construct")
        return notation


class _Renderer:
    def render(self, document):
        return "canonical:" + document.lower()


class FakePlugin:
    name = "fake"
    description = "toy notation for tests"

    def create_parser(self):
        return _Parser()

    def create_renderer(self):
        return _Renderer()


PLUGIN = FakePlugin()
'''


@pytest.fixture
def fake_plugin_module(tmp_path: Path) -> Path:
    """Write a plugin module registering the toy ``fake`` notation."""
    path = tmp_path / "fake_notation_plugin.py"
    path.write_text(FAKE_PLUGIN_SOURCE, encoding="utf-8")
    return path
