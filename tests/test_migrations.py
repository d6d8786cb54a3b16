from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect, text

from users_api.api import create_app
from users_api.data.database import Store
from users_api.data.models import UserModel
from users_api.data.migrate import run_migrations


def test_upgrade_creates_users_table(tmp_path):
    url = f"sqlite:///{tmp_path / 'users.db'}"
    run_migrations(url)

    engine = create_engine(url)
    insp = inspect(engine)
    assert {"users", "alembic_version"} <= set(insp.get_table_names())
    assert {c["name"] for c in insp.get_columns("users")} == {"id", "name"}
    engine.dispose()


def test_upgrade_is_repeatable(tmp_path):
    url = f"sqlite:///{tmp_path / 'users.db'}"
    run_migrations(url)
    run_migrations(url)


def test_service_runs_on_migrated_schema_without_auto_migrate(tmp_path):
    url = f"sqlite:///{tmp_path / 'users.db'}"
    run_migrations(url)

    store = Store(url, connect_args={"check_same_thread": False})
    assert store.initialize(ensure_schema=False).ok
    with TestClient(create_app(store)) as client:
        resp = client.post("/users", json={"name": "migrated"})
        assert resp.status_code == 200
        assert client.get("/users").json() == [resp.json()]
    store.dispose()


def test_upgrade_after_boot_time_schema_creation(tmp_path):
    url = f"sqlite:///{tmp_path / 'users.db'}"
    store = Store(url)
    assert store.initialize(ensure_schema=True).ok
    with store.session() as db:
        db.add(UserModel(name="before migrate"))
        db.commit()
    store.dispose()

    run_migrations(url)

    engine = create_engine(url)
    with engine.connect() as conn:
        version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one()
        names = conn.execute(text("SELECT name FROM users")).scalars().all()
    engine.dispose()
    assert version == "0001_create_users"
    assert names == ["before migrate"]
