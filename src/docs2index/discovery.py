"""Map a built documentation site to page tasks."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable

from docs2index.schemas import PageTask

_INDEX_FILE = "index.html"
_HTML_SUFFIX = ".html"


def discover_pages(
    build_dir: Path, base_url: str = "/", exclude: Iterable[str] = ()
) -> list[PageTask]:
    """List every HTML page under ``build_dir`` with the URL it is served at.

    ``docs/intro/index.html`` is served at ``<base_url>docs/intro`` and
    ``blog.html`` at ``<base_url>blog``. Routes matching one of the ``exclude``
    glob patterns are skipped.
    """
    patterns = [pattern.strip("/") for pattern in exclude if pattern.strip()]
    prefix = base_url if base_url.endswith("/") else f"{base_url}/"

    tasks: list[PageTask] = []
    for path in sorted(build_dir.rglob(f"*{_HTML_SUFFIX}")):
        if not path.is_file():
            continue
        route = route_for(path.relative_to(build_dir).as_posix())
        if any(fnmatch(route, pattern) for pattern in patterns):
            continue
        tasks.append(PageTask(path=path, url=f"{prefix}{route}"))
    return tasks


def route_for(relative_path: str) -> str:
    """Return the route of a page given its POSIX path inside the build."""
    if relative_path == _INDEX_FILE or relative_path.endswith(f"/{_INDEX_FILE}"):
        route = relative_path[: -len(_INDEX_FILE)]
    else:
        route = relative_path[: -len(_HTML_SUFFIX)]
    return route.rstrip("/")
