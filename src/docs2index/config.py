"""Local configuration for docs2index."""

from __future__ import annotations

import os


DEFAULT_WORKERS = os.cpu_count() or 1
DEFAULT_ENCODING = "utf-8"
DEFAULT_HTML_PARSER = "lxml"
DEFAULT_RESULT_POLL_S = 1.0
DEFAULT_JOIN_TIMEOUT_S = 5.0

DOCS2INDEX_WORKERS = int(os.getenv("DOCS2INDEX_WORKERS", str(DEFAULT_WORKERS)))
DOCS2INDEX_ENCODING = os.getenv("DOCS2INDEX_ENCODING", DEFAULT_ENCODING)
# Any BeautifulSoup tree builder name ("lxml", "html.parser", "html5lib").
DOCS2INDEX_HTML_PARSER = os.getenv("DOCS2INDEX_HTML_PARSER", DEFAULT_HTML_PARSER)
DOCS2INDEX_RESULT_POLL_S = float(os.getenv("DOCS2INDEX_RESULT_POLL_S", str(DEFAULT_RESULT_POLL_S)))
DOCS2INDEX_JOIN_TIMEOUT_S = float(os.getenv("DOCS2INDEX_JOIN_TIMEOUT_S", str(DEFAULT_JOIN_TIMEOUT_S)))
