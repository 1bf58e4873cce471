"""Custom exceptions for docs2index."""


class Docs2indexError(Exception):
    """Base exception for docs2index operations."""


class ConfigError(Docs2indexError):
    """Invalid user-supplied configuration, such as a malformed version table."""


class IndexingError(Docs2indexError):
    """The worker pool stopped before every page was processed."""
