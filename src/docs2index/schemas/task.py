"""Task and message models exchanged with workers."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel

from docs2index.schemas.records import PageRecord, SectionRecord


class PageTask(BaseModel):
    """A rendered page to index.

    Attributes:
        path: Location of the HTML file on disk.
        url: Canonical URL of the page, used as the base of every record URL.
    """

    path: Path
    url: str


# (True, record) for each produced record, then (None, 0 | 1) once per task.
WorkerMessage = tuple[Union[bool, None], Union[PageRecord, SectionRecord, int]]
