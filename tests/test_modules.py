import pytest

from cms.core.errors import RecordNotFoundError
from cms.schemas import Module, MutModule


def test_module_crud(db, module_model, page_factory):
    page_factory("home")
    assert module_model.create(MutModule(page_name="home", title="hero", content="Hi"), db) == 1

    [module] = module_model.read_all(db)
    assert isinstance(module, Module)
    assert module_model.read_one(module.module_id, db) == module

    changed = MutModule(page_name="home", title="hero", content="Hello")
    assert module_model.update(module.module_id, changed, db) == 1
    assert module_model.read_one(module.module_id, db).content == "Hello"

    assert module_model.delete(module.module_id, db) == 1
    with pytest.raises(RecordNotFoundError):
        module_model.read_one(module.module_id, db)


def test_missing_module_writes_report_zero(db, module_model, page_factory):
    page_factory("home")
    new = MutModule(page_name="home", title="hero")
    assert module_model.update(999, new, db) == 0
    assert module_model.delete(999, db) == 0


def test_read_all_for_page(db, module_model, page_factory, module_factory):
    page_factory("home")
    page_factory("about")
    module_factory("home", "hero")
    module_factory("home", "footer")
    module_factory("about", "body")

    titles = [m.title for m in module_model.read_all_for_page("home", db)]
    assert titles == ["hero", "footer"]


def test_columns_match_record_fields(module_model):
    assert {c.key for c in module_model.columns()} == set(Module.model_fields)
