from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from models.schema import CASE_INSENSITIVE_COLLATION, ICU_COLLATION_DEFAULTS, PROVISIONED_COLLECTIONS
from ops.metrics import Timer
from repos.collection_catalog_repo import CollectionCatalogRepository

log = logging.getLogger("solutions.provisioning")

MODE_CREATE = "create"
MODE_ENSURE = "ensure"
MODES = (MODE_CREATE, MODE_ENSURE)

# ICU library build, reported by the server; not a comparison setting.
_IGNORED_KEYS = ("version",)


class ProvisioningError(RuntimeError):
    pass


class CollationMismatchError(ProvisioningError):
    def __init__(self, name: str, expected: Mapping[str, Any], actual: Optional[Mapping[str, Any]]):
        self.name = name
        self.expected = dict(expected)
        self.actual = dict(actual) if actual else None
        super().__init__(
            f"collection {name!r} exists with collation {self.actual!r}; expected {self.expected!r}"
        )


class ProvisionResult(BaseModel):
    database: str
    mode: str
    created: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
    duration_ms: int = 0


class CollectionStatus(BaseModel):
    name: str
    exists: bool
    collation: Optional[Dict[str, Any]] = None
    collation_ok: bool = False


def collation_matches(expected: Mapping[str, Any], actual: Optional[Mapping[str, Any]]) -> bool:
    if not actual:
        return False
    want = {**ICU_COLLATION_DEFAULTS, **expected}
    got = {**ICU_COLLATION_DEFAULTS, **actual}
    keys = (set(want) | set(got)) - set(_IGNORED_KEYS)
    return all(got.get(k) == want.get(k) for k in keys)


class CollectionProvisioner:
    """
    Creates the application's collections with a shared collation.

    create mode: every name is created in order; the first error stops the run
    and propagates as raised by the driver. Nothing already created is undone.

    ensure mode: names that already exist are skipped when their collation
    matches, and rejected with CollationMismatchError when it does not
    (a collection's collation is fixed at creation).
    """

    def __init__(
        self,
        catalog: CollectionCatalogRepository,
        collections: Sequence[str] = PROVISIONED_COLLECTIONS,
        collation: Mapping[str, Any] = CASE_INSENSITIVE_COLLATION,
        mode: str = MODE_CREATE,
    ):
        mode = (mode or "").strip().lower()
        if mode not in MODES:
            raise ValueError(f"Unknown provisioning mode {mode!r}; expected one of {MODES}")
        self.catalog = catalog
        self.collections = tuple(collections)
        self.collation = dict(collation)
        self.mode = mode

    def provision(self) -> ProvisionResult:
        timer = Timer()
        result = ProvisionResult(database=self.catalog.db_name, mode=self.mode)

        existing = self.catalog.list_names() if self.mode == MODE_ENSURE else set()

        for name in self.collections:
            if name in existing:
                actual = self.catalog.get_collation(name)
                if not collation_matches(self.collation, actual):
                    raise CollationMismatchError(name, self.collation, actual)
                result.skipped.append(name)
                log.info(
                    "collection_skipped",
                    extra={"extra": {"event": "collection_skipped", "database": result.database, "collection": name}},
                )
                continue

            self.catalog.create(name, self.collation)
            result.created.append(name)
            log.info(
                "collection_created",
                extra={
                    "extra": {
                        "event": "collection_created",
                        "database": result.database,
                        "collection": name,
                        "collation": self.collation,
                    }
                },
            )

        result.duration_ms = timer.ms()
        log.info(
            "provision_completed",
            extra={
                "extra": {
                    "event": "provision_completed",
                    "database": result.database,
                    "mode": self.mode,
                    "created": len(result.created),
                    "skipped": len(result.skipped),
                    "duration_ms": result.duration_ms,
                }
            },
        )
        return result

    def verify(self) -> List[CollectionStatus]:
        # Read-only.
        existing = self.catalog.list_names()
        out: List[CollectionStatus] = []
        for name in self.collections:
            if name not in existing:
                out.append(CollectionStatus(name=name, exists=False))
                continue
            actual = self.catalog.get_collation(name)
            out.append(
                CollectionStatus(
                    name=name,
                    exists=True,
                    collation=actual,
                    collation_ok=collation_matches(self.collation, actual),
                )
            )
        return out
