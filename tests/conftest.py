import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from todo_api.database import build_engine, build_sessionmaker, get_db, init_models
from todo_api.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine_test():
    # one shared connection so every session sees the same in-memory database
    engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine_test):
    return build_sessionmaker(engine_test)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    async def _create(name="Ann"):
        res = await client.post("/users", json={"name": name})
        assert res.status_code == 201
        return res.json()

    return _create


@pytest.fixture
def create_todo(client):
    async def _create(user_id, title="Buy milk", **extra):
        res = await client.post("/todos", json={"title": title, "userId": user_id, **extra})
        assert res.status_code == 201
        return res.json()

    return _create
