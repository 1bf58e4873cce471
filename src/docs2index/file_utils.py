"""File utilities for reading rendered pages."""

from __future__ import annotations

import asyncio
from pathlib import Path

from docs2index.config import DOCS2INDEX_ENCODING


async def read_text_async(path: Path, encoding: str = DOCS2INDEX_ENCODING) -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)
