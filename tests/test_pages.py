from datetime import datetime

import pytest
from pydantic import ValidationError

from cms.core.errors import RecordNotFoundError
from cms.schemas import MutPage, Page


class TestCreateAndRead:
    def test_create_then_read_one(self, db, page_model):
        new = MutPage(page_name="home", page_url="/", page_title="Home")

        assert page_model.create(new, db) == 1

        page = page_model.read_one("home", db)
        assert isinstance(page, Page)
        assert page.writable() == new
        assert isinstance(page.time_created, datetime)

    def test_create_ignores_duplicate_key(self, db, page_model):
        first = MutPage(page_name="home", page_url="/", page_title="Home")
        second = MutPage(page_name="home", page_url="/other", page_title="Other")

        assert page_model.create(first, db) == 1
        assert page_model.create(second, db) == 0

        assert page_model.read_one("home", db).writable() == first
        assert len(page_model.read_all(db)) == 1

    def test_read_one_missing(self, db, page_model):
        with pytest.raises(RecordNotFoundError) as exc_info:
            page_model.read_one("nope", db)
        assert exc_info.value.entity == "Page"
        assert exc_info.value.key == "nope"

    def test_read_all_empty(self, db, page_model):
        assert page_model.read_all(db) == []

    def test_read_all_returns_each_page_once(self, db, page_model, page_factory):
        for name in ("home", "about", "contact"):
            page_factory(name)

        pages = page_model.read_all(db)
        assert len(pages) == 3
        assert {p.page_name for p in pages} == {"home", "about", "contact"}

    def test_urls_need_not_be_unique(self, db, page_model, page_factory):
        page_factory("home", page_url="/")
        page_factory("index", page_url="/")
        assert len(page_model.read_all(db)) == 2


class TestUpdateAndDelete:
    def test_update_overwrites_writable_fields(self, db, page_model, page_factory):
        page_factory("home", page_url="/", page_title="Home")
        original = page_model.read_one("home", db)

        new = MutPage(page_name="home", page_url="/index", page_title="Home Page")
        assert page_model.update("home", new, db) == 1

        page = page_model.read_one("home", db)
        assert page.writable() == new
        assert page.time_created == original.time_created

    def test_update_missing_reports_zero(self, db, page_model):
        new = MutPage(page_name="ghost", page_url="/ghost", page_title="Ghost")
        assert page_model.update("ghost", new, db) == 0

    def test_update_cannot_rename(self, db, page_model, page_factory):
        page_factory("home")
        new = MutPage(page_name="start", page_url="/", page_title="Start")

        with pytest.raises(ValueError):
            page_model.update("home", new, db)
        assert page_model.read_one("home", db).page_name == "home"

    def test_update_missing_with_other_name_reports_zero(self, db, page_model):
        new = MutPage(page_name="other", page_url="/x", page_title="X")
        assert page_model.update("ghost", new, db) == 0
        assert page_model.read_all(db) == []

    def test_delete(self, db, page_model, page_factory):
        page_factory("home")
        assert page_model.delete("home", db) == 1
        with pytest.raises(RecordNotFoundError):
            page_model.read_one("home", db)

    def test_delete_missing_reports_zero(self, db, page_model):
        assert page_model.delete("ghost", db) == 0

    def test_delete_cascades_to_modules(self, db, page_model, module_model, page_factory, module_factory):
        page_factory("home")
        module_factory("home", "hero")

        page_model.delete("home", db)
        assert module_model.read_all(db) == []


def test_home_page_lifecycle(db, page_model):
    assert page_model.create(MutPage(page_name="home", page_url="/", page_title="Home"), db) == 1

    page = page_model.read_one("home", db)
    assert (page.page_name, page.page_url, page.page_title) == ("home", "/", "Home")
    created = page.time_created

    updated = MutPage(page_name="home", page_url="/index", page_title="Home Page")
    assert page_model.update("home", updated, db) == 1

    page = page_model.read_one("home", db)
    assert page.page_url == "/index"
    assert page.page_title == "Home Page"
    assert page.time_created == created

    assert page_model.delete("home", db) == 1
    with pytest.raises(RecordNotFoundError):
        page_model.read_one("home", db)


def test_mut_page_rejects_blank_name():
    with pytest.raises(ValidationError):
        MutPage(page_name="  ", page_url="/", page_title="Blank")


def test_columns_match_record_fields(page_model):
    assert [c.key for c in page_model.columns()] == list(Page.model_fields)
