"""
Data access layer.

Record models translate typed records into SQL and back, isolating
callers from the schema.
"""

from cms.repositories.base import DTO, Joinable, Model
from cms.repositories.modules import ModuleModel
from cms.repositories.pages import PageModel
from cms.repositories.relations import build_page_module_relation, read_page_with_modules

__all__ = [
    "DTO",
    "Joinable",
    "Model",
    "ModuleModel",
    "PageModel",
    "build_page_module_relation",
    "read_page_with_modules",
]
