"""docs2index: extract search-index records from rendered documentation pages."""

from docs2index.exceptions import ConfigError, Docs2indexError, IndexingError
from docs2index.extractor import extract_page, scan_document
from docs2index.pool import IndexPool, IndexResult
from docs2index.schemas import PageRecord, PageTask, SearchIndex, SearchRecord, SectionRecord
from docs2index.worker import process_task

__all__ = [
    "ConfigError",
    "Docs2indexError",
    "IndexPool",
    "IndexResult",
    "IndexingError",
    "PageRecord",
    "PageTask",
    "SearchIndex",
    "SearchRecord",
    "SectionRecord",
    "extract_page",
    "process_task",
    "scan_document",
]
