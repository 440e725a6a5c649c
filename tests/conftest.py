import pytest
from fastapi.testclient import TestClient

from string_analyzer.crud.string import InMemoryStringStore, SQLStringStore, get_store
from string_analyzer.database import create_db_engine, init_db
from string_analyzer.main import app


@pytest.fixture
def memory_store():
    return InMemoryStringStore()


@pytest.fixture
def sql_store(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'strings.db'}")
    init_db(engine)
    yield SQLStringStore(engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def client(memory_store):
    app.dependency_overrides[get_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()
