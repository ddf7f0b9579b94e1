from __future__ import annotations

from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from config.settings import Settings, settings as default_settings
from models.schema import DEFAULT_DB_NAME


def get_mongo_client(settings: Optional[Settings] = None) -> MongoClient:
    # Lazy: no socket is opened until the first command.
    cfg = settings or default_settings
    return MongoClient(
        cfg.MONGO_URI,
        serverSelectionTimeoutMS=cfg.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        connect=False,
    )


def resolve_db_name(client: MongoClient, name: Optional[str] = None, settings: Optional[Settings] = None) -> str:
    cfg = settings or default_settings
    if name is not None:
        if not name.strip():
            raise ValueError("database name must be a non-empty string")
        return name.strip()
    if cfg.MONGO_DB_NAME.strip():
        return cfg.MONGO_DB_NAME.strip()
    return client.get_default_database(DEFAULT_DB_NAME).name


def select_database(client: MongoClient, name: Optional[str] = None, settings: Optional[Settings] = None) -> Database:
    """
    Bind to the target database.
    - Explicit name, then MONGO_DB_NAME, then the URI path, then "solutions".
    - Pure handle lookup: nothing is created on the server.
    """
    return client[resolve_db_name(client, name=name, settings=settings)]
