"""Awsjack CLI: call any bundled operation from the command line.

Usage examples::

    awsjack --service eks --config '{"region_name":"us-west-2"}' describe-cluster --params '{"name":"prod"}'
    awsjack --service organizations describe-organization
    awsjack --service kendra --list-operations
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from awsjack.services.factory import SERVICE_REGISTRY


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``awsjack`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="awsjack",
        description="Call AWS service operations",
    )
    parser.add_argument(
        "--service", "-s",
        required=True,
        choices=sorted(SERVICE_REGISTRY),
        help="Service key",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON config string (e.g. \'{"region_name":"us-east-1"}\')',
    )
    parser.add_argument(
        "--params", "-p",
        type=str,
        default="{}",
        help="JSON request members for the operation",
    )
    parser.add_argument(
        "--list-operations", "-l",
        action="store_true",
        help="Print the service's operation names and exit",
    )
    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation to perform (e.g. describe-cluster)",
    )
    return parser


def _load_json(value: str, option: str) -> dict[str, Any]:
    try:
        loaded = json.loads(value)
    except json.JSONDecodeError as e:
        print(f"Invalid {option} JSON: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(loaded, dict):
        print(f"Invalid {option} JSON: expected an object", file=sys.stderr)
        sys.exit(1)
    return loaded


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Creates a client via :func:`awsjack.factory.client_factory`, runs the
    synchronous form of the requested operation and prints the response
    payload as JSON. A failed outcome is printed to stderr and exits 1.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)
    client_class = SERVICE_REGISTRY[ns.service]

    if ns.list_operations:
        for op in client_class.OPERATIONS:
            print(op.python_name.replace("_", "-"))
        return

    if not ns.operation:
        parser.error("an operation is required unless --list-operations is given")

    config = _load_json(ns.config, "--config")
    params = _load_json(ns.params, "--params")

    try:
        operation = client_class.get_operation(ns.operation)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    from awsjack.factory import client_factory

    try:
        client = client_factory(ns.service, config)
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    with client:
        outcome = getattr(client, operation.python_name)(params)

    if not outcome.is_success():
        print(json.dumps(outcome.error.to_dict(), indent=2), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(dict(outcome.result), indent=2, default=str))


if __name__ == "__main__":
    main()
