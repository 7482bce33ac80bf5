import os

from config import ConnectionConstants, get_search_path


def test_search_path_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.delenv("CONNECTION_SEARCH_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    assert get_search_path() == [os.getcwd()]


def test_search_path_from_environment(monkeypatch):
    monkeypatch.setenv("CONNECTION_SEARCH_PATH", os.pathsep.join(["/etc/app", "", "/opt/app"]))
    assert get_search_path() == ["/etc/app", "/opt/app"]


def test_file_names():
    assert ConnectionConstants.STRYKER_PROPERTIES_FILE == "jstryker.properties"
    assert ConnectionConstants.HIBERNATE_PROPERTIES_FILE == "hibernate.properties"


def test_search_path_without_directories_falls_back_to_cwd(monkeypatch, tmp_path):
    monkeypatch.setenv("CONNECTION_SEARCH_PATH", os.pathsep)
    monkeypatch.chdir(tmp_path)
    assert get_search_path() == [os.getcwd()]
