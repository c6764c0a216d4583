from pathlib import Path

from orgcal.db import DatabaseConfig, seed_reference_data
from orgcal.models import House, User, UserRole


def test_in_memory_config():
    config = DatabaseConfig(sqlite_path=':memory:')
    assert config.is_sqlite
    assert config.connection_url == "sqlite://"
    assert config.get_engine_args()["connect_args"] == {"check_same_thread": False}


def test_file_config(tmp_path):
    path = tmp_path / "calendar.db"
    assert DatabaseConfig(sqlite_path=path).connection_url == f"sqlite:///{path}"


def test_default_sqlite_path(monkeypatch):
    monkeypatch.delenv('ORGCAL_SQLITE_PATH', raising=False)
    config = DatabaseConfig()
    assert Path(config.sqlite_path).name == 'organization_calendar.db'


def test_connection(database):
    database.test_connection()


def test_reference_data_is_seeded_once(database):
    with database.session() as session:
        assert seed_reference_data(session) == 0
        assert session.query(House).count() == 7
        admin = session.get(User, 'admin')
        assert admin.role == UserRole.ADMIN
        assert admin.display_name == 'System Administrator'
