"""Flumap CLI entry points.
This module exposes commands for ingest, dataset reads, login checks,
and serving the HTTP API. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
from pathlib import Path
import sys
from typing import Any, Sequence

from core.config import FluConfig
from core.errors import FluError
from core.logging_config import configure_console_logging
from store.dataset_sdk import FluClient
from store.record_payload import record_to_payload


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="flumap", description="Flumap surveillance data CLI")
    parser.add_argument("--data-root", help="Override FLUMAP_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_ingest_command(subparsers)
    _add_fetch_command(subparsers)
    _add_datasets_command(subparsers)
    _add_login_command(subparsers)
    _add_serve_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Flumap CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_console_logging()
    try:
        config = _build_config(args.data_root, getattr(args, "users_file", None))
        if args.command == "serve":
            return _run_serve_command(config, args)
        client = FluClient(config)
        if args.command == "ingest":
            return _run_ingest_command(client, args)
        if args.command == "fetch":
            return _run_fetch_command(client, args)
        if args.command == "datasets":
            return _run_datasets_command(client)
        if args.command == "login":
            return _run_login_command(client, args)
    except FluError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_root: str | None, users_file: str | None) -> FluConfig:
    """Build config with optional command-line overrides.

    Args:
        data_root: Optional data root override.
        users_file: Optional credential list override.

    Returns:
        Runtime configuration.
    """
    config = FluConfig.from_env()
    if data_root:
        config = config.with_data_root(Path(data_root).expanduser().resolve())
    if users_file:
        config = replace(config, users_file=Path(users_file).expanduser().resolve())
    return config


def _run_ingest_command(client: FluClient, args: argparse.Namespace) -> int:
    """Handle ingest command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = client.ingest_file(args.source)
    if not result.ok:
        print(f"{result.error_kind}: {result.message}", file=sys.stderr)
        return 1
    print(result.dataset_name)
    return 0


def _run_fetch_command(client: FluClient, args: argparse.Namespace) -> int:
    """Handle fetch command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = client.fetch(args.dataset)
    if not result.ok:
        print(f"{result.error_kind}: {result.message}", file=sys.stderr)
        return 1
    payload = [record_to_payload(record) for record in result.records]
    print(json.dumps(payload, indent=2))
    return 0


def _run_datasets_command(client: FluClient) -> int:
    """Handle datasets command."""
    for name in client.list_datasets():
        print(name)
    return 0


def _run_login_command(client: FluClient, args: argparse.Namespace) -> int:
    """Handle login command."""
    if client.verify_login(args.username, args.password):
        print("Login successful")
        return 0
    print("Invalid username or password", file=sys.stderr)
    return 1


def _run_serve_command(config: FluConfig, args: argparse.Namespace) -> int:
    """Handle serve command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code once the server stops.
    """
    import uvicorn

    from serve.http_app import create_app

    port = args.port or config.port
    uvicorn.run(create_app(config), host=args.host, port=port)
    return 0


def _add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    parser = subparsers.add_parser("ingest", help="Ingest a local .csv or .json file")
    parser.add_argument("source", help="File to ingest; its base name becomes the dataset name")


def _add_fetch_command(subparsers: Any) -> None:
    """Register fetch subcommand."""
    parser = subparsers.add_parser("fetch", help="Print a dataset as JSON")
    parser.add_argument("--dataset", help="Dataset name; default dataset when omitted")


def _add_datasets_command(subparsers: Any) -> None:
    """Register datasets subcommand."""
    subparsers.add_parser("datasets", help="List stored dataset names")


def _add_login_command(subparsers: Any) -> None:
    """Register login subcommand."""
    parser = subparsers.add_parser("login", help="Check a username/password pair")
    parser.add_argument("username", help="Username")
    parser.add_argument("password", help="Password")
    parser.add_argument("--users-file", help="Override FLUMAP_USERS_FILE for this command")


def _add_serve_command(subparsers: Any) -> None:
    """Register serve subcommand."""
    parser = subparsers.add_parser("serve", help="Run the HTTP API")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, help="Listen port; FLUMAP_PORT when omitted")
