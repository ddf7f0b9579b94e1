from __future__ import annotations

import time
from typing import Any, Dict, List

from fastapi import APIRouter
from pymongo import MongoClient

from config.settings import settings
from provisioning.provisioner import CollectionProvisioner
from repos.collection_catalog_repo import CollectionCatalogRepository
from storage.mongo_client import resolve_db_name

router = APIRouter()


def _mongo_probe(timeout_ms: int = 500) -> Dict[str, Any]:
    """
    Read-only, bounded-time MongoDB check.
    - `ping` for connectivity
    - provisioning status of each collection (no writes)
    """
    client: MongoClient = MongoClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=timeout_ms,
        timeoutMS=timeout_ms,
        connect=False,
    )
    try:
        t0 = time.time()
        client.admin.command("ping")
        dt_ms = int((time.time() - t0) * 1000)
        db = client[resolve_db_name(client, settings=settings)]
        statuses = CollectionProvisioner(CollectionCatalogRepository(db)).verify()
        return {
            "ok": True,
            "latency_ms": dt_ms,
            "database": db.name,
            "collections": [s.model_dump() for s in statuses],
        }
    except Exception as e:
        return {"ok": False, "error_type": type(e).__name__, "message": str(e)}
    finally:
        client.close()


@router.get("/health")
def health():
    probe = _mongo_probe()
    collections: List[Dict[str, Any]] = probe.pop("collections", [])
    provisioned = bool(collections) and all(c.get("exists") and c.get("collation_ok") for c in collections)

    payload: Dict[str, Any] = {
        "ok": bool(probe.get("ok", False)) and provisioned,
        "service": "solutions-provisioning",
        "environment": settings.ENVIRONMENT,
        "database": probe.get("database", ""),
        "mongo_ok": bool(probe.get("ok", False)),
        "mongo": probe,
        "provisioned": provisioned,
        "collections": collections,
        "time_unix": time.time(),
    }
    return payload
