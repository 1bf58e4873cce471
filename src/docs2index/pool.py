"""Run the task loop across a pool of worker processes."""

from __future__ import annotations

import logging
import multiprocessing
import queue
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from docs2index.config import (
    DOCS2INDEX_JOIN_TIMEOUT_S,
    DOCS2INDEX_RESULT_POLL_S,
    DOCS2INDEX_WORKERS,
)
from docs2index.exceptions import IndexingError
from docs2index.schemas import PageTask, SearchRecord
from docs2index.worker import run_worker

logger = logging.getLogger(__name__)


@dataclass
class IndexResult:
    """Outcome of indexing a set of pages.

    Attributes:
        records: Every produced record. Records of one page keep document
            order; pages may interleave in completion order.
        indexed_pages: Number of pages that produced at least one record.
        total_pages: Number of tasks dispatched.
    """

    records: list[SearchRecord] = field(default_factory=list)
    indexed_pages: int = 0
    total_pages: int = 0


class IndexPool:
    """Dispatch page tasks to worker processes and gather their records."""

    def __init__(
        self,
        *,
        workers: int | None = None,
        versions: Mapping[str, str] | None = None,
        poll_interval: float | None = None,
    ) -> None:
        self.workers = max(1, workers or DOCS2INDEX_WORKERS)
        self.versions = dict(versions) if versions is not None else None
        self.poll_interval = poll_interval or DOCS2INDEX_RESULT_POLL_S

    def run(self, tasks: Sequence[PageTask]) -> IndexResult:
        """Index every task and return once each one has reported completion.

        Raises:
            IndexingError: If all workers exit before every task completed.
        """
        result = IndexResult(total_pages=len(tasks))
        if not tasks:
            return result

        context = multiprocessing.get_context()
        task_queue = context.Queue()
        result_queue = context.Queue()
        processes = [
            context.Process(
                target=run_worker,
                args=(task_queue, result_queue, self.versions),
                daemon=True,
            )
            for _ in range(min(self.workers, len(tasks)))
        ]
        for process in processes:
            process.start()
        logger.debug("Started %d index workers", len(processes))

        for task in tasks:
            task_queue.put(task.model_dump())
        # One shutdown sentinel per worker, queued behind the tasks.
        for _ in processes:
            task_queue.put(None)

        completed = 0
        try:
            while completed < len(tasks):
                try:
                    ok, payload = result_queue.get(timeout=self.poll_interval)
                except queue.Empty:
                    if not any(process.is_alive() for process in processes):
                        raise IndexingError(
                            f"Workers exited after {completed} of {len(tasks)} pages"
                        ) from None
                    continue
                if ok:
                    result.records.append(payload)
                else:
                    completed += 1
                    result.indexed_pages += payload
        finally:
            _shutdown(processes)

        logger.debug(
            "Indexed %d of %d pages (%d records)",
            result.indexed_pages,
            result.total_pages,
            len(result.records),
        )
        return result


def _shutdown(processes: list[multiprocessing.process.BaseProcess]) -> None:
    for process in processes:
        process.join(timeout=DOCS2INDEX_JOIN_TIMEOUT_S)
        if process.is_alive():
            logger.warning("Terminating unresponsive worker pid=%s", process.pid)
            process.terminate()
            process.join()
