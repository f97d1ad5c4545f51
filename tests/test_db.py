import pytest
from mysql.connector import errors

import db


def test_get_db_config_maps_env_to_connect_kwargs(db_env):
    assert db.get_db_config() == {
        "host": "db",
        "database": "labdb",
        "user": "labuser",
        "password": "labpass",
    }


def test_get_db_config_has_no_defaults(db_env, monkeypatch):
    monkeypatch.delenv("DB_PASS")
    with pytest.raises(KeyError, match="DB_PASS"):
        db.get_db_config()


def test_check_connection_opens_and_closes(db_env, mocker):
    connect = mocker.patch("mysql.connector.connect")

    db.check_connection()

    connect.assert_called_once_with(host="db", database="labdb", user="labuser", password="labpass")
    connect.return_value.close.assert_called_once_with()


def test_check_connection_propagates_driver_errors(db_env, mocker):
    mocker.patch("mysql.connector.connect", side_effect=errors.InterfaceError(msg="timed out", errno=2003))

    with pytest.raises(errors.InterfaceError):
        db.check_connection()
