import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import QueuePool, StaticPool

from database import Base, create_db_engine, create_session_factory, is_memory_sqlite
from main import create_app
from models.agents import Agent
from tests.conftest import VALID_AGENT, make_settings


def _file_url(tmp_path):
    return f"sqlite:///{tmp_path / 'sample.db'}"


@pytest.mark.parametrize("url, expected", [
    ("sqlite://", True),
    ("sqlite:///:memory:", True),
    ("sqlite:///file:shared?mode=memory&uri=true", True),
    ("sqlite:///./sample.db", False),
    ("mysql+pymysql://root@localhost:3306/sample", False),
])
def test_is_memory_sqlite(url, expected):
    assert is_memory_sqlite(url) is expected


def test_memory_sqlite_uses_one_shared_connection():
    engine = create_db_engine(make_settings())
    try:
        assert isinstance(engine.pool, StaticPool)
    finally:
        engine.dispose()


def test_file_sqlite_sessions_do_not_share_a_transaction(tmp_path):
    engine = create_db_engine(make_settings(DATABASE_URL=_file_url(tmp_path)))
    Base.metadata.create_all(bind=engine)
    session_factory = create_session_factory(engine)
    writer = session_factory()
    reader = session_factory()
    try:
        assert isinstance(engine.pool, QueuePool)

        writer.add(Agent(agent_code="A001", agent_name="Smith", working_area="Delhi",
                         commission=0.15, phone_no="+14155552671"))
        writer.flush()

        assert reader.query(Agent).count() == 0
        reader.rollback()
        writer.commit()

        assert reader.query(Agent).count() == 1
    finally:
        reader.close()
        writer.close()
        engine.dispose()


@pytest.fixture
def pooled_client(tmp_path):
    settings = make_settings(
        DATABASE_URL=_file_url(tmp_path),
        DB_POOL_SIZE=1,
        DB_MAX_OVERFLOW=0,
        DB_POOL_TIMEOUT=0.2,
    )
    with TestClient(create_app(settings)) as client:
        yield client


def test_connection_is_released_after_a_storage_fault(pooled_client):
    pool = pooled_client.app.state.engine.pool
    assert pooled_client.post("/api/agents", json=VALID_AGENT).status_code == 201

    duplicate = pooled_client.post("/api/agents", json=VALID_AGENT)

    assert duplicate.status_code == 500
    assert duplicate.text == "Failed to add agent."
    assert pool.checkedout() == 0

    response = pooled_client.get("/api/agents")
    assert response.status_code == 200
    assert [row["AGENT_CODE"] for row in response.json()] == ["A001"]
    assert pool.checkedout() == 0


def test_connection_is_released_after_not_found_and_validation(pooled_client):
    pool = pooled_client.app.state.engine.pool

    assert pooled_client.delete("/api/agents/A999").status_code == 404
    assert pooled_client.post("/api/agents", json={"AGENT_CODE": "A001"}).status_code == 400
    assert pool.checkedout() == 0

    assert pooled_client.get("/api/agents").status_code == 200


def test_exhausted_pool_maps_to_500(pooled_client):
    engine = pooled_client.app.state.engine

    held = engine.connect()
    try:
        response = pooled_client.get("/api/agents")
    finally:
        held.close()

    assert response.status_code == 500
    assert response.text == "Failed to fetch agents."
    assert pooled_client.get("/api/agents").status_code == 200
