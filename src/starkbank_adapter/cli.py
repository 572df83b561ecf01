#!/usr/bin/env python3
"""
Command line access to the Stark Bank resources

Examples:
    starkbank-adapter --config starkbank.toml get dict_key tony@starkbank.com
    starkbank-adapter query boleto_log --after 2020-04-03 --limit 10 --filter types=paid
    starkbank-adapter page deposit_log --limit 50 --cursor <cursor>
"""

import sys
import json
import argparse
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .client import StarkBankClient
from .config_loader import ConfigurationError, EnvironmentError
from .errors import StarkBankError
from .resources import QUERYABLE

logger = logging.getLogger(__name__)


def parse_filters(items: Optional[List[str]]) -> Dict[str, Any]:
    """
    Parse repeated ``key=value`` arguments, comma separated values become lists

    Raises:
        ValueError: If an item has no '='
    """
    filters = {}
    for item in items or []:
        if '=' not in item:
            raise ValueError(f"Invalid filter '{item}', expected key=value")
        key, value = item.split('=', 1)
        filters[key.strip()] = value.split(',') if ',' in value else value
    return filters


def to_json(obj: Any) -> str:
    return json.dumps(asdict(obj), default=str, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='starkbank-adapter',
        description='Retrieve Stark Bank resources as JSON lines'
    )
    parser.add_argument(
        '--config',
        default='starkbank.toml',
        help='Path to TOML or YAML client configuration'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level, overrides the configuration file (default WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    get_parser = subparsers.add_parser('get', help='Retrieve one object by id')
    get_parser.add_argument('resource', choices=sorted(QUERYABLE))
    get_parser.add_argument('id')

    for command, help_text in (('query', 'Enumerate objects across pages'),
                               ('page', 'Retrieve a single page of objects')):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument('resource', choices=sorted(QUERYABLE))
        sub.add_argument('--limit', type=int, default=None)
        sub.add_argument('--after', default=None, help='Date filter, e.g. 2020-04-03')
        sub.add_argument('--before', default=None, help='Date filter, e.g. 2020-04-03')
        sub.add_argument('--filter', action='append', dest='filters',
                         help='Extra filter as key=value, repeatable')
        if command == 'page':
            sub.add_argument('--cursor', default=None)

    return parser


def run(args: argparse.Namespace, client: StarkBankClient) -> int:
    endpoint = getattr(client, args.resource)

    if args.command == 'get':
        print(to_json(endpoint.get(args.id)))
        return 0

    filters = parse_filters(args.filters)
    filters.update(limit=args.limit, after=args.after, before=args.before)

    if args.command == 'query':
        for element in endpoint.query(**filters):
            print(to_json(element))
        return 0

    elements, cursor = endpoint.page(cursor=args.cursor, **filters)
    for element in elements:
        print(to_json(element))
    print(json.dumps({'cursor': cursor}))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or 'WARNING').upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        with StarkBankClient.from_config(Path(args.config), log_level=args.log_level) as client:
            return run(args, client)
    except (StarkBankError, ConfigurationError, EnvironmentError, FileNotFoundError, ValueError, TypeError) as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
