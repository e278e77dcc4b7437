"""
Error taxonomy for the data-access layer.

Backend errors (``sqlalchemy.exc.SQLAlchemyError``) raised while running a
statement are passed through untouched. Only the pool boundary and the
single-row read path raise the types defined here.
"""

from typing import Any, Optional

from cms.core.constants import CheckoutErrorKind


class CMSError(Exception):
    """Root of every error raised by this package."""


# ========================================
# Pool
# ========================================

class PoolError(CMSError):
    """The pool could not be built (bad URI or unreachable backend)."""


class CheckoutError(CMSError):
    """
    A connection could not be checked out.

    ``kind`` keeps the refined cause; ``public_kind`` is what the HTTP
    boundary reports and is always ``unknown``.
    """

    kind: CheckoutErrorKind = CheckoutErrorKind.UNKNOWN
    public_kind: CheckoutErrorKind = CheckoutErrorKind.UNKNOWN

    def __init__(self, message: str = "Could not check out a database connection"):
        super().__init__(message)


class PoolExhaustedError(CheckoutError):
    kind = CheckoutErrorKind.EXHAUSTED


class BackendUnavailableError(CheckoutError):
    kind = CheckoutErrorKind.UNAVAILABLE


# ========================================
# Records
# ========================================

class RecordNotFoundError(CMSError):
    """A single-row read matched nothing."""

    def __init__(self, entity: str, key: Any, message: Optional[str] = None):
        self.entity = entity
        self.key = key
        super().__init__(message or f"{entity} not found: {key!r}")
