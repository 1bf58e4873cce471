"""Test setup for docs2index."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    Tests that start worker processes can be skipped with:
        pytest -m "not multiprocess"
    """
    config.addinivalue_line(
        "markers",
        "multiprocess: marks tests that start worker processes",
    )


@pytest.fixture
def make_page() -> Callable[..., str]:
    """Build a rendered documentation page around a markdown body."""

    def _make_page(
        body: str,
        *,
        title: str = "Page Title",
        head: str = "",
        markdown_class: str = "markdown",
    ) -> str:
        return (
            "<html>"
            f"<head>{head}</head>"
            "<body>"
            "<nav><h2>Navigation</h2></nav>"
            "<article>"
            f"<header><h1>{title}</h1></header>"
            f'<div class="{markdown_class}">{body}</div>'
            "</article>"
            "</body>"
            "</html>"
        )

    return _make_page


@pytest.fixture
def write_page(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write markup to a file under ``tmp_path`` and return its path."""

    def _write(relative: str, html: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path

    return _write
