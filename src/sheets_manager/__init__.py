"""Google Sheets convenience wrapper authenticated with a service account."""

from sheets_manager.sheets import CellRange, Sheet, SheetsClient, Spreadsheet

__all__ = ["SheetsClient", "Spreadsheet", "Sheet", "CellRange"]

__version__ = "0.1.0"
