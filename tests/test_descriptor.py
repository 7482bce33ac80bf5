import dataclasses

import pytest

from db.descriptor import ConnectionDescriptor


def test_descriptor_is_immutable():
    descriptor = ConnectionDescriptor("sqlite3", ":memory:", "root", "pw")
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.url = "other.db"


def test_repr_masks_password():
    descriptor = ConnectionDescriptor("psycopg2", "postgresql://app:pw@db/app", "app", "pw")
    text = repr(descriptor)
    assert "'pw'" not in text
    assert ":pw@" not in text
    assert "password='****'" in text


def test_redacted_url():
    assert (
        ConnectionDescriptor("psycopg2", "postgresql://app:pw@db:5432/app").redacted_url()
        == "postgresql://app:****@db:5432/app"
    )
    assert (
        ConnectionDescriptor("pyodbc", "DRIVER=x;SERVER=db;UID=sa;PWD=secret;").redacted_url()
        == "DRIVER=x;SERVER=db;UID=sa;PWD=****;"
    )
    assert ConnectionDescriptor("sqlite3", ":memory:").redacted_url() == ":memory:"


def test_as_dict():
    descriptor = ConnectionDescriptor("sqlite3", ":memory:", "root", "pw")
    assert descriptor.as_dict() == {
        "driver": "sqlite3",
        "url": ":memory:",
        "username": "root",
        "password": "pw",
    }
    assert descriptor.as_dict(mask_password=True)["password"] == "****"
    assert ConnectionDescriptor("sqlite3", ":memory:").as_dict(mask_password=True)["password"] == ""


def test_redacted_url_password_with_at_sign():
    descriptor = ConnectionDescriptor("psycopg2", "postgresql://app:p@ssw0rd@db/app")
    assert descriptor.redacted_url() == "postgresql://app:****@db/app"


def test_redacted_url_braced_odbc_password():
    descriptor = ConnectionDescriptor("pyodbc", "DRIVER=x;UID=sa;PWD={a;b}}c};DATABASE=app")
    assert descriptor.redacted_url() == "DRIVER=x;UID=sa;PWD=****;DATABASE=app"
