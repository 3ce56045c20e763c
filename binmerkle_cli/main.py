"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m binmerkle_cli root ELEMENT... [--from-file PATH] [--json] [--check]
    python -m binmerkle_cli prove --index N ELEMENT... [--from-file PATH]
    python -m binmerkle_cli verify PROOF|- [--root HASH] [--json]
    python -m binmerkle_cli update --index N --value X ELEMENT... [--json]
    python -m binmerkle_cli config --init|--show

Environment Variables:
    BINMERKLE_LOG_LEVEL            Log level (default: WARNING)
    BINMERKLE_LOG_FILE             Optional log file
    BINMERKLE_TRACE_CONSTRUCTION   Log every node created (true/false)
    BINMERKLE_OUTPUT_FORMAT        human or json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from binmerkle import __version__
from binmerkle_cli.commands import root, prove, verify, update
from binmerkle_cli.config import load_config, get_default_config_template


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_element_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "elements",
        nargs="*",
        help="Elements, in order",
    )
    parser.add_argument(
        "--from-file", "-f",
        type=str,
        default=None,
        help="Read elements from a file, one per line ('-' for stdin)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="binmerkle",
        description="Binary Merkle tree CLI - compute roots, generate and verify inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./binmerkle.json or ~/.config/binmerkle/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=False,
        help="Log every node created while building (implies DEBUG output)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the root hash of a list of elements",
    )
    _add_element_arguments(root_parser)
    root_parser.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="Also recompute every hash and check tree integrity",
    )
    root_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output root, size, leaf count and height as JSON",
    )
    root_parser.set_defaults(func=root.root_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Print the inclusion proof for one element",
    )
    _add_element_arguments(prove_parser)
    prove_parser.add_argument(
        "--index", "-i",
        type=int,
        required=True,
        help="0-based index of the element to prove",
    )
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a proof document",
    )
    verify_parser.add_argument(
        "proof",
        type=str,
        help="Path to proof JSON ('-' for stdin)",
    )
    verify_parser.add_argument(
        "--root", "-r",
        type=str,
        default=None,
        help="Known root hash (default: the root stored in the proof)",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- update command ---
    update_parser = subparsers.add_parser(
        "update",
        help="Replace one element and print the new root",
    )
    _add_element_arguments(update_parser)
    update_parser.add_argument(
        "--index", "-i",
        type=int,
        required=True,
        help="0-based index of the element to replace",
    )
    update_parser.add_argument(
        "--value", "-v",
        type=str,
        required=True,
        help="New element value",
    )
    update_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output old and new roots as JSON",
    )
    update_parser.set_defaults(func=update.update_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="binmerkle.json",
        help="Path for config file (default: binmerkle.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        return EXIT_SUCCESS

    if args.show:
        config = args.cli_config
        print(json.dumps({
            "log_level": config.log_level,
            "log_file": config.log_file,
            "trace_construction": config.trace_construction,
            "default_output_format": config.default_output_format,
        }, indent=2))
        return EXIT_SUCCESS

    print("Usage: binmerkle config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.trace:
        config.trace_construction = True

    log_level = args.log_level or ("DEBUG" if args.trace else config.log_level)
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
