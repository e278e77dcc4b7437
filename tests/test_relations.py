from datetime import datetime

import pytest

from cms.core.errors import RecordNotFoundError
from cms.repositories import build_page_module_relation, read_page_with_modules
from cms.schemas import Module, Page, PageModuleRelation


def _page():
    return Page(page_name="home", page_url="/", page_title="Home", time_created=datetime(2024, 1, 1))


def _module(module_id, title):
    return Module(module_id=module_id, page_name="home", title=title, content=f"#{module_id}")


class TestReadOneJoinOn:
    def test_page_without_modules(self, db, page_model, page_factory):
        page_factory("home")
        assert page_model.read_one_join_on("home", db) == []

    def test_missing_page(self, db, page_model):
        assert page_model.read_one_join_on("ghost", db) == []

    def test_one_tuple_per_module(self, db, page_model, page_factory, module_factory):
        page_factory("home")
        page_factory("about")
        a = module_factory("home", "A")
        b = module_factory("home", "B")
        module_factory("about", "C")

        rows = page_model.read_one_join_on("home", db)

        assert len(rows) == 2
        assert rows[0][0] == rows[1][0]
        assert rows[0][0] == page_model.read_one("home", db)
        assert [module for _, module in rows] == [a, b]


class TestBuildPageModuleRelation:
    def test_empty_input(self):
        assert build_page_module_relation([]) is None

    def test_fields_keyed_by_title(self):
        page = _page()
        relation = build_page_module_relation([(page, _module(1, "A")), (page, _module(2, "B"))])

        assert isinstance(relation, PageModuleRelation)
        assert relation.page_name == "home"
        assert relation.time_created == page.time_created
        assert set(relation.fields) == {"A", "B"}
        assert relation.fields["B"].module_id == 2

    def test_duplicate_titles_last_wins(self):
        page = _page()
        relation = build_page_module_relation([(page, _module(1, "A")), (page, _module(2, "A"))])

        assert list(relation.fields) == ["A"]
        assert relation.fields["A"].module_id == 2


class TestReadPageWithModules:
    def test_with_modules(self, db, page_factory, module_factory):
        page_factory("home")
        module_factory("home", "A")
        module_factory("home", "B")

        relation = read_page_with_modules("home", db)
        assert set(relation.fields) == {"A", "B"}

    def test_without_modules(self, db, page_factory):
        page_factory("home")
        relation = read_page_with_modules("home", db)
        assert relation.page_name == "home"
        assert relation.fields == {}

    def test_missing_page(self, db):
        with pytest.raises(RecordNotFoundError):
            read_page_with_modules("ghost", db)
