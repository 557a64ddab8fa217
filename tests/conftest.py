"""Test setup for doxtree."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo handlers and levels installed by configure_logging."""
    logger = logging.getLogger("doxtree")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def hierarchy_js_path() -> Path:
    """Doxygen-generated hierarchy.js for a small C++ library."""
    return FIXTURES / "hierarchy.js"


@pytest.fixture
def hierarchy_js(hierarchy_js_path: Path) -> str:
    return hierarchy_js_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_raw() -> list[Any]:
    """A small hierarchy with a grouping entry and a shared child."""
    return [
        ["Base", "class_base.html", [
            ["Left", "class_left.html", [["Shared", "class_shared.html", None]]],
            ["Right", "class_right.html", [["Shared", "class_shared.html", None]]],
        ]],
        ["Interface", None, [["Impl", "class_impl.html", None]]],
        ["Standalone", "class_standalone.html", None],
    ]
