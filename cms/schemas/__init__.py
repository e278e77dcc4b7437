"""
Typed records exchanged with callers.

Tables live in ``cms.models``; these pydantic models are what the record
models accept and return.
"""

from cms.schemas.module import Module, MutModule
from cms.schemas.page import MutPage, Page, PageBase, PageModuleRelation

__all__ = [
    "Module",
    "MutModule",
    "MutPage",
    "Page",
    "PageBase",
    "PageModuleRelation",
]
