from classbook.core.config import BACKEND_DIR, Settings


def test_relative_paths_resolve_against_backend_dir():
    settings = Settings(
        regular_classes_path="data/regular_classes.json",
        database_url="sqlite+pysqlite:///./classbook.db",
    )
    assert settings.regular_classes_path == BACKEND_DIR / "data" / "regular_classes.json"
    assert settings.database_url == f"sqlite+pysqlite:///{(BACKEND_DIR / 'classbook.db').resolve()}"


def test_absolute_and_in_memory_urls_are_kept(tmp_path):
    override = tmp_path / "classes.json"
    settings = Settings(regular_classes_path=override, database_url="sqlite+pysqlite://")
    assert settings.regular_classes_path == override
    assert settings.database_url == "sqlite+pysqlite://"

    assert Settings(database_url="sqlite:///:memory:").database_url == "sqlite:///:memory:"
    assert Settings(database_url=f"sqlite:///{tmp_path}/x.db").database_url == f"sqlite:///{tmp_path}/x.db"
    assert Settings(database_url="postgresql+psycopg://u:p@db/classbook").database_url.startswith("postgresql")


def test_list_settings_accept_comma_strings():
    settings = Settings(staff_rooms="CSE-101, CSE-102", regular_classes_path=None)
    assert settings.staff_rooms == ["CSE-101", "CSE-102"]
