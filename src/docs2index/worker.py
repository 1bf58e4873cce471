"""Per-worker task loop: read a page, extract records, stream them back."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, AsyncIterator, Callable, Mapping

from docs2index.extractor import extract_page
from docs2index.file_utils import read_text_async
from docs2index.schemas import PageTask, WorkerMessage

if TYPE_CHECKING:
    from multiprocessing.queues import Queue
    from pathlib import Path

logger = logging.getLogger(__name__)


async def process_task(
    task: PageTask, versions: Mapping[str, str] | None = None
) -> AsyncIterator[WorkerMessage]:
    """Yield ``(True, record)`` per extracted record, then ``(None, 0 | 1)``.

    The terminal flag is 1 when at least one record was produced. Unreadable
    and non-indexable pages still complete with the terminal message.
    """
    produced = 0
    html = await _read_page(task.path)
    if html is not None:
        try:
            for record in extract_page(html, task.url, versions):
                produced = 1
                yield True, record
        except Exception:
            # A page that breaks extraction is skipped, never the worker.
            logger.exception("Unable to extract records from %s", task.path)
    yield None, produced


async def serve(
    receive: Callable[[], Any],
    send: Callable[[WorkerMessage], None],
    versions: Mapping[str, str] | None = None,
) -> None:
    """Process tasks one at a time until a falsy shutdown message arrives.

    Args:
        receive: Blocking callable returning the next task message, either a
            ``PageTask`` or a mapping with ``path`` and ``url``.
        send: Callable receiving every produced message in order.
        versions: Read-only version table shared by every task.
    """
    while True:
        message = await asyncio.to_thread(receive)
        if not message:
            break
        task = message if isinstance(message, PageTask) else PageTask.model_validate(message)
        async for result in process_task(task, versions):
            send(result)


def run_worker(
    task_queue: Queue, result_queue: Queue, versions: Mapping[str, str] | None = None
) -> None:
    """Process entry point for a pool worker."""
    asyncio.run(serve(task_queue.get, result_queue.put, versions))


async def _read_page(path: Path) -> str | None:
    try:
        return await read_text_async(path)
    except FileNotFoundError:
        # Pages may be intentionally absent from the build.
        return None
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Unable to read file %s: %s", path, exc)
        return None
