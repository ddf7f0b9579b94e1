import pytest

from config.settings import Settings
from storage.mongo_client import get_mongo_client, select_database

def _client(uri):
    return get_mongo_client(Settings(MONGO_URI=uri, MONGO_DB_NAME=""))

def test_select_database_defaults_to_solutions():
    client = _client("mongodb://localhost:27017")
    assert select_database(client, settings=Settings(MONGO_DB_NAME="")).name == "solutions"

def test_select_database_uses_uri_path():
    client = _client("mongodb://localhost:27017/reviews_dev")
    assert select_database(client, settings=Settings(MONGO_DB_NAME="")).name == "reviews_dev"

def test_setting_and_explicit_name_take_precedence():
    client = _client("mongodb://localhost:27017/reviews_dev")
    assert select_database(client, settings=Settings(MONGO_DB_NAME="from_env")).name == "from_env"
    assert select_database(client, name="solutions", settings=Settings(MONGO_DB_NAME="from_env")).name == "solutions"

def test_blank_name_rejected():
    client = _client("mongodb://localhost:27017")
    with pytest.raises(ValueError):
        select_database(client, name="  ")
