"""
Aggregate views built from join results.

A join yields one row per related record; these helpers fold that flat
result back into a single nested record.
"""

from typing import Dict, Optional, Sequence, Tuple

from sqlalchemy.engine import Connection

from cms.repositories.pages import PageModel
from cms.schemas import Module, Page, PageModuleRelation


def build_page_module_relation(
    rows: Sequence[Tuple[Page, Module]],
) -> Optional[PageModuleRelation]:
    """
    Fold ``(page, module)`` tuples into one PageModuleRelation.

    Page fields come from the first tuple. Modules are keyed by title;
    a later module with the same title replaces an earlier one.

    Returns:
        The relation, or None for an empty input. An empty join does not
        say whether the page is missing or just has no modules.
    """
    if not rows:
        return None

    page = rows[0][0]
    fields: Dict[str, Module] = {}
    for _, module in rows:
        fields[module.title] = module

    return PageModuleRelation(**page.model_dump(), fields=fields)


def read_page_with_modules(page_name: str, db: Connection) -> PageModuleRelation:
    """
    Load a page and all of its modules.

    Raises:
        RecordNotFoundError: No page has that name
    """
    model = PageModel()
    relation = build_page_module_relation(model.read_one_join_on(page_name, db))
    if relation is not None:
        return relation

    page = model.read_one(page_name, db)
    return PageModuleRelation(**page.model_dump())
