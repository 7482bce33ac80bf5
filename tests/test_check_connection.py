import logging

import pytest

import check_connection


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_main_succeeds_with_sqlite(tmp_path, capsys):
    (tmp_path / "jstryker.properties").write_text(
        "driver=sqlite3\njdbc.url=:memory:\nuser=root\npassword=hunter2\n"
    )

    assert check_connection.main(["--search-path", str(tmp_path), "--show-settings"]) == 0

    out = capsys.readouterr().out
    assert "driver: sqlite3" in out
    assert "username: root" in out
    assert "password: ****" in out
    assert "hunter2" not in out


def test_main_fails_without_properties(tmp_path):
    assert check_connection.main(["--search-path", str(tmp_path)]) == 1


def test_main_fails_with_unknown_driver(tmp_path):
    (tmp_path / "hibernate.properties").write_text(
        "hibernate.connection.driver_class=org.hsqldb.jdbcDriver\n"
        "hibernate.connection.url=jdbc:hsqldb:mem:test\n"
    )

    assert check_connection.main(["--search-path", str(tmp_path), "-v"]) == 1


def test_search_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "hibernate.properties").write_text(
        "hibernate.connection.driver_class=sqlite3\n"
        "hibernate.connection.url=sqlite::memory:\n"
    )
    monkeypatch.setenv("CONNECTION_SEARCH_PATH", str(tmp_path))

    assert check_connection.main([]) == 0
