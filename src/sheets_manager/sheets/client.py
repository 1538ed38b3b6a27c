"""Google Sheets API client implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sheets_manager.config import get_credentials_path
from sheets_manager.google import GoogleServiceAccount
from sheets_manager.sheets import requests as req
from sheets_manager.sheets.requests import CellRange

logger = logging.getLogger(__name__)

EDIT_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/edit"


def edit_url(spreadsheet_id: str) -> str:
    """Browser URL for editing a spreadsheet."""
    return EDIT_URL_TEMPLATE.format(spreadsheet_id=spreadsheet_id)


@dataclass
class Sheet:
    """Represents a sheet within a spreadsheet."""

    id: int
    title: str
    index: int
    row_count: int = req.DEFAULT_ROW_COUNT
    column_count: int = req.DEFAULT_COLUMN_COUNT


@dataclass
class Spreadsheet:
    """Represents a Google Spreadsheet."""

    id: str
    title: str
    sheets: list[Sheet] = field(default_factory=list)
    url: str | None = None

    def sheet_by_title(self, title: str) -> Sheet | None:
        """Find a sheet by its tab title."""
        for sheet in self.sheets:
            if sheet.title == title:
                return sheet
        return None

    def to_dict(self) -> dict[str, Any]:
        """Summary with title, per-sheet dimensions and edit URL."""
        return {
            "title": self.title,
            "sheets": [
                {
                    "title": s.title,
                    "sheet_id": s.id,
                    "row_count": s.row_count,
                    "column_count": s.column_count,
                }
                for s in self.sheets
            ],
            "url": self.url,
        }


class SheetsClient:
    """Google Sheets API client authenticated with a service account.

    The API service is built on first use and reused for the lifetime of
    the client. Errors from the API (``googleapiclient.errors.HttpError``)
    are not caught.

    Usage:
        client = SheetsClient()

        # Create a spreadsheet with two tabs
        sheet = client.create_spreadsheet("Report", ["API Tests", "UI Tests"])

        # Write values
        client.write_data(sheet.id, "API Tests!A1:B1", [["Name", "Status"]])

        # Bold + freeze the header
        client.format_header_row(sheet.id, sheet_id=sheet.sheets[0].id)

    Note:
        The service account can only open spreadsheets it created or that
        were shared with its email address.
    """

    def __init__(
        self,
        credentials_path: str | Path | None = None,
        service: Any = None,
    ) -> None:
        """Initialize Sheets client.

        Args:
            credentials_path: Service account key file. Defaults to
                $GOOGLE_CREDENTIALS_PATH or ./credentials.json.
            service: Pre-built Sheets v4 service. Skips authentication.
        """
        self.credentials_path = (
            Path(credentials_path) if credentials_path else get_credentials_path()
        )
        self._service: Any = service

    def connect(self) -> Any:
        """Get or create the Sheets API service.

        Raises:
            CredentialsNotFoundError: If the key file does not exist.
            GoogleAuthError: If the key file is invalid.
        """
        if self._service is None:
            auth = GoogleServiceAccount(self.credentials_path, scopes=["sheets"])
            self._service = auth.build_service("sheets", "v4")
        return self._service

    # =========================================================================
    # Spreadsheets
    # =========================================================================

    def create_spreadsheet(
        self, title: str, sheet_names: Sequence[str] = ("Sheet1",)
    ) -> Spreadsheet:
        """Create a new spreadsheet.

        Every tab is sized to 1000 rows by 26 columns.

        Args:
            title: Spreadsheet title.
            sheet_names: Tab titles, in order.

        Returns:
            Created Spreadsheet with its edit URL.
        """
        service = self.connect()

        body = {
            "properties": {"title": title},
            "sheets": [req.sheet_descriptor(name) for name in sheet_names],
        }

        result = service.spreadsheets().create(body=body).execute()
        spreadsheet = self._parse_spreadsheet(result)
        logger.info(f"Created spreadsheet with ID: {spreadsheet.id}")
        logger.info(f"URL: {spreadsheet.url}")
        return spreadsheet

    def get_spreadsheet_info(self, spreadsheet_id: str) -> Spreadsheet:
        """Fetch spreadsheet metadata.

        Args:
            spreadsheet_id: Google Sheets spreadsheet ID.

        Returns:
            Spreadsheet with sheets in tab order.
        """
        service = self.connect()
        result = service.spreadsheets().get(spreadsheetId=spreadsheet_id).execute()
        result.setdefault("spreadsheetId", spreadsheet_id)
        return self._parse_spreadsheet(result)

    # =========================================================================
    # Values
    # =========================================================================

    def write_data(
        self,
        spreadsheet_id: str,
        range_notation: str,
        values: Sequence[Sequence[Any]],
    ) -> dict:
        """Write values to a range.

        Values are parsed as if typed by a user, so numbers, dates and
        formulas are interpreted rather than stored as literal text.
        Values are sent as given, without reshaping.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation (e.g., "Sheet1!A1:C3").
            values: 2D list of values to write.

        Returns:
            UpdateValuesResponse from the API.
        """
        service = self.connect()
        result = (
            service.spreadsheets()
            .values()
            .update(
                spreadsheetId=spreadsheet_id,
                range=range_notation,
                valueInputOption="USER_ENTERED",
                body={"values": values},
            )
            .execute()
        )
        logger.info(f"Wrote {len(values)} rows to {range_notation}")
        return result

    def read_data(self, spreadsheet_id: str, range_notation: str) -> list[list[Any]]:
        """Read values from a range.

        Args:
            spreadsheet_id: Spreadsheet ID.
            range_notation: A1 notation (e.g., "Sheet1!A1:C10").

        Returns:
            2D list of cell values, empty if the range holds nothing.
        """
        service = self.connect()
        result = (
            service.spreadsheets()
            .values()
            .get(spreadsheetId=spreadsheet_id, range=range_notation)
            .execute()
        )
        return result.get("values", [])

    def clear_range(self, spreadsheet_id: str, range_notation: str) -> dict:
        """Clear values from a range, keeping formatting."""
        service = self.connect()
        result = (
            service.spreadsheets()
            .values()
            .clear(spreadsheetId=spreadsheet_id, range=range_notation, body={})
            .execute()
        )
        logger.info(f"Cleared {range_notation}")
        return result

    # =========================================================================
    # Formatting and validation
    # =========================================================================

    def batch_update(
        self, spreadsheet_id: str, requests: Sequence[Mapping[str, Any]]
    ) -> dict:
        """Send request descriptors in a single batchUpdate call."""
        service = self.connect()
        return (
            service.spreadsheets()
            .batchUpdate(spreadsheetId=spreadsheet_id, body=req.batch_body(requests))
            .execute()
        )

    def format_header_row(self, spreadsheet_id: str, sheet_id: int = 0) -> dict:
        """Make row 0 bold with a gray background and freeze it."""
        result = self.batch_update(
            spreadsheet_id,
            [req.header_format_request(sheet_id), req.freeze_rows_request(sheet_id)],
        )
        logger.info(f"Formatted header row on sheet {sheet_id}")
        return result

    def auto_resize_columns(
        self,
        spreadsheet_id: str,
        sheet_id: int = 0,
        start_column: int = 0,
        end_column: int = 26,
    ) -> dict:
        """Resize columns [start_column, end_column) to fit their content."""
        result = self.batch_update(
            spreadsheet_id,
            [req.auto_resize_columns_request(sheet_id, start_column, end_column)],
        )
        logger.info(f"Auto-resized columns {start_column}-{end_column} on sheet {sheet_id}")
        return result

    def add_dropdown_validation(
        self,
        spreadsheet_id: str,
        sheet_id: int,
        cell_range: CellRange | Mapping[str, int],
        allowed_values: Sequence[Any],
    ) -> dict:
        """Restrict a range to a dropdown of allowed values.

        Args:
            spreadsheet_id: Spreadsheet ID.
            sheet_id: Sheet ID (not title).
            cell_range: Zero-based half-open bounds, as a CellRange or a
                mapping with start_row/end_row/start_column/end_column.
            allowed_values: Values offered in the dropdown.

        Returns:
            BatchUpdateSpreadsheetResponse from the API.
        """
        result = self.batch_update(
            spreadsheet_id,
            [req.dropdown_validation_request(sheet_id, cell_range, allowed_values)],
        )
        logger.info(f"Added dropdown validation on sheet {sheet_id}")
        return result

    def _parse_spreadsheet(self, data: dict) -> Spreadsheet:
        """Parse spreadsheet from API response."""
        sheets = []
        for sheet_data in data.get("sheets", []):
            props = sheet_data.get("properties", {})
            grid_props = props.get("gridProperties", {})
            sheets.append(
                Sheet(
                    id=props.get("sheetId", 0),
                    title=props.get("title", ""),
                    index=props.get("index", 0),
                    row_count=grid_props.get("rowCount", req.DEFAULT_ROW_COUNT),
                    column_count=grid_props.get("columnCount", req.DEFAULT_COLUMN_COUNT),
                )
            )

        spreadsheet_id = data["spreadsheetId"]
        return Spreadsheet(
            id=spreadsheet_id,
            title=data.get("properties", {}).get("title", ""),
            sheets=sheets,
            url=edit_url(spreadsheet_id),
        )
