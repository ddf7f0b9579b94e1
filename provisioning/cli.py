"""
Operator entry point for provisioning the solutions database.

Usage:
  python -m provisioning                 # create the collections (fails if any exist)
  python -m provisioning --mode ensure   # create missing ones, keep matching ones
  python -m provisioning --verify        # report only, no writes

Connection details come from MONGO_URI / MONGO_DB_NAME (env or .env).
Errors are not caught: the traceback and non-zero exit status are the report.
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from config.settings import settings
from ops.structured_logger import setup_logging
from provisioning.provisioner import MODES, CollectionProvisioner
from repos.collection_catalog_repo import CollectionCatalogRepository
from storage.mongo_client import get_mongo_client, select_database


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="provision-solutions",
        description="Create the solutions collections with an English, strength-2 collation.",
    )
    parser.add_argument("--mode", choices=MODES, default=None, help="override PROVISION_MODE")
    parser.add_argument("--db", default=None, help="override database selection")
    parser.add_argument("--verify", action="store_true", help="check the collections without creating anything")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries the JSON report only.
    setup_logging(settings.LOG_LEVEL, stream=sys.stderr)

    client = get_mongo_client(settings)
    try:
        db = select_database(client, name=args.db, settings=settings)
        provisioner = CollectionProvisioner(
            CollectionCatalogRepository(db),
            mode=args.mode or settings.PROVISION_MODE,
        )

        if args.verify:
            statuses = provisioner.verify()
            print(json.dumps([s.model_dump() for s in statuses], default=str))
            return 0 if all(s.exists and s.collation_ok for s in statuses) else 1

        result = provisioner.provision()
        print(result.model_dump_json())
        return 0
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
