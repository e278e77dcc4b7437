"""
Database models package.

Contains the SQLAlchemy tables the record models run against.
"""

from cms.models.base import Base
from cms.models.page import PageEntity
from cms.models.module import ModuleEntity

__all__ = [
    "Base",
    "PageEntity",
    "ModuleEntity",
]
