from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from pymongo.errors import CollectionInvalid


class FakeDatabase:
    """In-memory stand-in for pymongo.database.Database (catalog calls only)."""

    def __init__(self, name: str = "solutions", existing: Optional[Dict[str, Dict[str, Any]]] = None):
        self.name = name
        self.options: Dict[str, Dict[str, Any]] = dict(existing or {})
        self.create_calls: List[str] = []

    def list_collection_names(self) -> List[str]:
        return list(self.options)

    def list_collections(self, filter: Optional[Dict[str, Any]] = None):
        wanted = (filter or {}).get("name")
        for name, options in self.options.items():
            if wanted is None or wanted == name:
                yield {"name": name, "type": "collection", "options": options}

    def create_collection(self, name: str, **kwargs: Any) -> None:
        self.create_calls.append(name)
        if name in self.options:
            raise CollectionInvalid(f"collection {name} already exists")
        options: Dict[str, Any] = {}
        collation = kwargs.get("collation")
        if collation is not None:
            # Server echoes back the full ICU option set.
            options["collation"] = {
                **collation.document,
                "caseLevel": False,
                "caseFirst": "off",
                "numericOrdering": False,
                "alternate": "non-ignorable",
                "maxVariable": "punct",
                "normalization": False,
                "backwards": False,
                "version": "57.1",
            }
        self.options[name] = options


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def make_db():
    return FakeDatabase
