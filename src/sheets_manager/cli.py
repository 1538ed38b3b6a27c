"""CLI for sheets-manager.

Usage:
    sheets-manager status                  # Show credential status
    sheets-manager demo                    # Build the demonstration report
    sheets-manager info <spreadsheet_id>   # Show spreadsheet tabs and sizes
"""

from __future__ import annotations

import argparse
import logging
import sys


def cmd_status() -> int:
    """Show status of the configured service account key."""
    from sheets_manager.config import CREDENTIALS_ENV_VAR

    status = _check_status()

    print("=" * 60)
    print("SHEETS-MANAGER CREDENTIAL STATUS")
    print("=" * 60)
    print()
    source = CREDENTIALS_ENV_VAR if status["env_override"] else "default"
    print(f"Key path ({source}): {status['credentials_path']}")
    print(f"  .env file:        {'[x]' if status['env_file'] else '[ ]'}")
    print(f"  key file exists:  {'[x]' if status['credentials_exist'] else '[ ]'}")
    print()

    if not status["credentials_exist"]:
        print(f"Set {CREDENTIALS_ENV_VAR} or place credentials.json in current directory")
        return 1

    from sheets_manager.google import GoogleAuthError, GoogleServiceAccount

    try:
        auth = GoogleServiceAccount(status["credentials_path"], scopes=["sheets"])
    except GoogleAuthError as e:
        print(f"  [✗] {e}")
        return 1

    info = auth.get_info()
    print(f"  [✓] {info['email']}")
    print(f"  project:          {info['project_id'] or 'unknown'}")
    print()
    print("Share spreadsheets with this email to grant access.")
    return 0


def cmd_demo() -> int:
    """Run the demonstration script."""
    from sheets_manager.demo import main as demo_main

    return demo_main()


def cmd_info(spreadsheet_id: str) -> int:
    """Print a spreadsheet summary."""
    from sheets_manager.google import GoogleAuthError
    from sheets_manager.sheets import SheetsClient

    try:
        info = SheetsClient().get_spreadsheet_info(spreadsheet_id)
    except GoogleAuthError as e:
        print(f"Error: {e}")
        return 1

    print(f"Title : {info.title}")
    print(f"URL   : {info.url}")
    print()
    for sheet in info.sheets:
        print(f"  [{sheet.id}] {sheet.title} ({sheet.row_count} x {sheet.column_count})")
    return 0


def _check_status() -> dict:
    """Get credential status."""
    from sheets_manager.config import get_credential_status

    return get_credential_status()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sheets-manager",
        description="Google Sheets helper authenticated with a service account",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log sheets-manager operations to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # status command
    subparsers.add_parser("status", help="Show credential status")

    # demo command
    subparsers.add_parser("demo", help="Create the demonstration report")

    # info command
    info_parser = subparsers.add_parser("info", help="Show spreadsheet metadata")
    info_parser.add_argument("spreadsheet_id", help="Spreadsheet ID")

    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if args.verbose:
        # Package loggers only; root stays at WARNING
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("sheets_manager").setLevel(logging.INFO)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "status":
        return cmd_status()

    if args.command == "demo":
        return cmd_demo()

    if args.command == "info":
        return cmd_info(args.spreadsheet_id)

    return 0


if __name__ == "__main__":
    sys.exit(main())
