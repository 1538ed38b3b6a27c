"""Google Sheets API client with service account authentication.

Usage:
    from sheets_manager.sheets import SheetsClient

    client = SheetsClient()  # reads $GOOGLE_CREDENTIALS_PATH or ./credentials.json

    # Create a spreadsheet
    sheet = client.create_spreadsheet("My Spreadsheet", ["Data"])

    # Write values
    client.write_data(sheet.id, "Data!A1:B2", [["Name", "Age"], ["Alice", 30]])

    # Inspect tabs
    info = client.get_spreadsheet_info(sheet.id)

Service Account Setup:
    1. Create a service account key in Google Cloud Console
    2. Save it as credentials.json or point GOOGLE_CREDENTIALS_PATH at it
    3. Share existing spreadsheets with the service account email
"""

from __future__ import annotations

from sheets_manager.sheets.client import Sheet, SheetsClient, Spreadsheet, edit_url
from sheets_manager.sheets.requests import CellRange

__all__ = ["SheetsClient", "Spreadsheet", "Sheet", "CellRange", "edit_url"]
