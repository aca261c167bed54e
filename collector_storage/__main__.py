"""
Install, inspect and remove the elasticsearch indices of the collector
"""

import argparse
import logging
import sys

from collector_storage.client import ElasticSearchClient
from collector_storage.config import ENV_PREFIX, get_settings
from collector_storage.elastic_connection import CannotConnectElastic
from collector_storage.installer import ElasticSearchStorageInstaller, StorageInstallError
from collector_storage.tables import load_table_defines


def _installer(debug: bool = False) -> ElasticSearchStorageInstaller:
    settings = get_settings()
    return ElasticSearchStorageInstaller(
        shards=settings.index_shards_number,
        replicas=settings.index_replicas_number,
        allow_degraded=settings.allow_degraded_mapping,
        debug=debug or settings.debug,
    )


def install(args):
    installer = _installer(debug=args.debug)
    if installer.debug:
        logging.warning("Debug mode: existing collector indices will be dropped and recreated")
    try:
        report = installer.install(ElasticSearchClient(), load_table_defines())
    except StorageInstallError as e:
        logging.error(str(e))
        sys.exit(1)
    logging.info(
        f"Created {len(report.created)}, recreated {len(report.recreated)}, "
        f"kept {len(report.existing)} existing indices"
    )
    if report.failed:
        logging.error(f"Creation not acknowledged for: {', '.join(report.failed)}")
        sys.exit(1)


def delete(args):
    if not args.tables and not args.all:
        logging.error("Specify the tables to delete, or use --all to delete all collector indices")
        sys.exit(1)
    installer = _installer()
    tables = installer.define_filter(load_table_defines())
    if not args.all:
        unknown = set(args.tables) - {table.name for table in tables}
        if unknown:
            logging.error(f"Unknown table(s): {', '.join(sorted(unknown))}")
            sys.exit(1)
        tables = [table for table in tables if table.name in args.tables]
    client = ElasticSearchClient()
    for table in tables:
        installer.delete_table(client, table)


def status(_args):
    installer = _installer()
    client = ElasticSearchClient()
    for table in installer.define_filter(load_table_defines()):
        state = "exists" if installer.is_exists(client, table) else "missing"
        print(f"{table.name:<20} {state}")


def echo_config(_args):
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")


def main():
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m collector_storage")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("install", help="Create all collector indices that do not exist yet")
    p.add_argument(
        "--debug",
        action="store_true",
        help="Drop and recreate indices that already exist. This destroys all collected data!",
    )
    p.set_defaults(func=install)

    p = subparsers.add_parser("delete", help="Delete collector indices")
    p.add_argument("tables", nargs="*", help="Names of the tables to delete")
    p.add_argument("--all", action="store_true", help="Delete all collector indices")
    p.set_defaults(func=delete)

    p = subparsers.add_parser("status", help="List the collector indices and whether they exist")
    p.set_defaults(func=status)

    p = subparsers.add_parser("config", help="Show the current settings")
    p.set_defaults(func=echo_config)

    args = parser.parse_args()

    logging.basicConfig(
        format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.DEBUG if args.verbose else logging.INFO
    )
    es_logger = logging.getLogger("elasticsearch")
    es_logger.setLevel(logging.WARNING)

    try:
        args.func(args)
    except CannotConnectElastic as e:
        logging.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
