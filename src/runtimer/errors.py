"""Exceptions raised by runtimer."""


class RuntimerError(Exception):
    """Base exception for runtimer errors."""
    pass


class InvalidRunsError(RuntimerError, ValueError):
    """Raised when a session is asked for fewer than one run."""
    pass
