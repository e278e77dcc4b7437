import pytest

from cms.database import connection_scope, create_all_tables, dispose_pool, init_pool
from cms.repositories import ModuleModel, PageModel
from cms.schemas import MutModule, MutPage


@pytest.fixture
def sqlite_uri(tmp_path):
    return f"sqlite:///{tmp_path / 'cms.db'}"


@pytest.fixture
def pool(sqlite_uri):
    """File-backed SQLite pool with the schema created."""
    engine = init_pool(sqlite_uri, max_size=2, timeout=0.2)
    create_all_tables(engine)
    yield engine
    dispose_pool(engine)


@pytest.fixture
def db(pool):
    with connection_scope(pool) as conn:
        yield conn


@pytest.fixture
def page_model():
    return PageModel()


@pytest.fixture
def module_model():
    return ModuleModel()


@pytest.fixture
def page_factory(db, page_model):
    def _create(page_name: str, page_url: str = None, page_title: str = None):
        new = MutPage(
            page_name=page_name,
            page_url=page_url or f"/{page_name}",
            page_title=page_title or page_name.title(),
        )
        page_model.create(new, db)
        return new
    return _create


@pytest.fixture
def module_factory(db, module_model):
    def _create(page_name: str, title: str, content: str = "body"):
        module_model.create(MutModule(page_name=page_name, title=title, content=content), db)
        return module_model.read_all_for_page(page_name, db)[-1]
    return _create
