from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Set

from pymongo.collation import Collation
from pymongo.database import Database


class CollectionCatalogRepository:
    """Read/write access to the database's catalog of collections."""

    def __init__(self, db: Database):
        self.db = db

    @property
    def db_name(self) -> str:
        return self.db.name

    def list_names(self) -> Set[str]:
        return set(self.db.list_collection_names())

    def exists(self, name: str) -> bool:
        return _require_name(name) in self.list_names()

    def get_collation(self, name: str) -> Optional[Dict[str, Any]]:
        for info in self.db.list_collections(filter={"name": _require_name(name)}):
            options = info.get("options") or {}
            collation = options.get("collation")
            return dict(collation) if collation else None
        return None

    def create(self, name: str, collation: Mapping[str, Any]) -> None:
        # Only the collation is set; capped/validator/etc. keep server defaults.
        # A duplicate name raises CollectionInvalid (or OperationFailure code 48) and is not caught here.
        self.db.create_collection(
            _require_name(name),
            collation=Collation(locale=collation["locale"], strength=collation["strength"]),
        )


def _require_name(name: str) -> str:
    if not name or not name.strip():
        raise ValueError("collection name must be a non-empty string")
    return name.strip()
