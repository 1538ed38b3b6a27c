"""Demonstration script: build a small test-results report.

Usage:
    GOOGLE_CREDENTIALS_PATH=key.json python -m sheets_manager.demo
"""

from __future__ import annotations

import sys

from sheets_manager.config import CREDENTIALS_ENV_VAR, get_credentials_path
from sheets_manager.google import GoogleAuthError
from sheets_manager.sheets import CellRange, SheetsClient

REPORT_TITLE = "Test Results Report"
SHEET_NAMES = ["API Tests", "UI Tests"]

HEADERS = [["Test Case", "Status", "Duration", "Error Message", "Executed By"]]
TEST_DATA = [
    ["Login API Test", "PASSED", "1.2s", "", "automation@example.com"],
    ["Get User Data", "FAILED", "0.8s", "Timeout error", "automation@example.com"],
    ["Create Order", "PASSED", "2.1s", "", "automation@example.com"],
]
STATUS_VALUES = ["PASSED", "FAILED", "SKIPPED", "BLOCKED"]

# Status column (B) below the header
STATUS_RANGE = CellRange(start_row=1, end_row=1000, start_column=1, end_column=2)


def run_demo(client: SheetsClient) -> str:
    """Create and populate the report. Returns the edit URL."""
    spreadsheet = client.create_spreadsheet(REPORT_TITLE, SHEET_NAMES)
    print(f"Created spreadsheet with ID: {spreadsheet.id}")

    client.write_data(spreadsheet.id, "API Tests!A1:E1", HEADERS)
    print(f"Wrote {len(HEADERS)} rows to API Tests!A1:E1")

    client.write_data(spreadsheet.id, "API Tests!A2:E4", TEST_DATA)
    print(f"Wrote {len(TEST_DATA)} rows to API Tests!A2:E4")

    info = client.get_spreadsheet_info(spreadsheet.id)
    api_sheet = info.sheet_by_title("API Tests")
    sheet_id = api_sheet.id if api_sheet else 0

    client.format_header_row(spreadsheet.id, sheet_id=sheet_id)
    print("Formatted header row")

    client.add_dropdown_validation(spreadsheet.id, sheet_id, STATUS_RANGE, STATUS_VALUES)
    print("Added dropdown validation")

    client.auto_resize_columns(spreadsheet.id, sheet_id=sheet_id, start_column=0, end_column=5)
    print("Auto-resized columns")

    print(f"URL: {info.url}")
    return info.url


def main() -> int:
    """Run the demo against the configured service account."""
    credentials_path = get_credentials_path()

    if not credentials_path.exists():
        print(f"Error: Credentials file not found at {credentials_path}")
        print(
            f"Set {CREDENTIALS_ENV_VAR} environment variable "
            "or place credentials.json in current directory"
        )
        return 1

    try:
        run_demo(SheetsClient(credentials_path))
    except GoogleAuthError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
