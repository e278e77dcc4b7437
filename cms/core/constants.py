"""
Application-wide constants.

Centralize magic strings and default values here.
"""

from enum import Enum


# ========================================
# Pool Defaults
# ========================================

DEFAULT_POOL_SIZE = 2
"""Maximum live connections; sized for a low-traffic service."""

DEFAULT_POOL_TIMEOUT = 30.0
"""Seconds a checkout waits for a free connection."""

DEFAULT_DB_SCHEME = "mysql+pymysql"


# ========================================
# Checkout Failures
# ========================================

class CheckoutErrorKind(str, Enum):
    """
    Why a connection could not be checked out of the pool.

    Inherits from str so the value can be logged or serialized directly.
    """

    EXHAUSTED = "exhausted"
    """Every connection was in use until the pool timeout elapsed."""

    UNAVAILABLE = "unavailable"
    """The backend refused or dropped the connection."""

    UNKNOWN = "unknown"
    """Anything else; also the only kind reported past the HTTP boundary."""


# ========================================
# Table Names
# ========================================

PAGES_TABLE = "pages"
MODULES_TABLE = "modules"

# ========================================
# Column Sizes
# ========================================

NAME_LENGTH = 255
URL_LENGTH = 2048
TITLE_LENGTH = 255
