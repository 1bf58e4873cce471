"""Shared schemas for docs2index."""

from docs2index.schemas.records import (
    PageRecord,
    SearchIndex,
    SearchRecord,
    SectionRecord,
)
from docs2index.schemas.task import PageTask, WorkerMessage

__all__ = [
    "PageRecord",
    "PageTask",
    "SearchIndex",
    "SearchRecord",
    "SectionRecord",
    "WorkerMessage",
]
