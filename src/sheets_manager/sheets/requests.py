"""Request descriptors for the Sheets ``batchUpdate`` and ``create`` calls.

Each builder returns a plain dict keyed the way the REST API expects, e.g.
``{"repeatCell": {...}}``. See
https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_ROW_COUNT = 1000
DEFAULT_COLUMN_COUNT = 26

HEADER_BACKGROUND = {"red": 0.9, "green": 0.9, "blue": 0.9}


@dataclass(frozen=True)
class CellRange:
    """Rectangular cell range with zero-based, half-open bounds."""

    start_row: int
    end_row: int
    start_column: int
    end_column: int

    @classmethod
    def coerce(cls, value: CellRange | Mapping[str, int]) -> CellRange:
        """Accept a CellRange or a mapping with the same four keys."""
        if isinstance(value, cls):
            return value
        return cls(
            start_row=value["start_row"],
            end_row=value["end_row"],
            start_column=value["start_column"],
            end_column=value["end_column"],
        )

    def to_grid_range(self, sheet_id: int) -> dict[str, int]:
        """GridRange for this range on the given sheet."""
        return {
            "sheetId": sheet_id,
            "startRowIndex": self.start_row,
            "endRowIndex": self.end_row,
            "startColumnIndex": self.start_column,
            "endColumnIndex": self.end_column,
        }


def grid_range(
    sheet_id: int,
    start_row: int | None = None,
    end_row: int | None = None,
    start_column: int | None = None,
    end_column: int | None = None,
) -> dict[str, int]:
    """Build a GridRange. Omitted bounds are left unbounded."""
    result = {"sheetId": sheet_id}
    bounds = {
        "startRowIndex": start_row,
        "endRowIndex": end_row,
        "startColumnIndex": start_column,
        "endColumnIndex": end_column,
    }
    result.update({k: v for k, v in bounds.items() if v is not None})
    return result


def sheet_descriptor(
    title: str,
    row_count: int = DEFAULT_ROW_COUNT,
    column_count: int = DEFAULT_COLUMN_COUNT,
) -> dict[str, Any]:
    """Sheet resource used when creating a spreadsheet."""
    return {
        "properties": {
            "title": title,
            "gridProperties": {
                "rowCount": row_count,
                "columnCount": column_count,
            },
        }
    }


def header_format_request(sheet_id: int) -> dict[str, Any]:
    """Bold text on a light gray background for row 0."""
    return {
        "repeatCell": {
            "range": grid_range(sheet_id, start_row=0, end_row=1),
            "cell": {
                "userEnteredFormat": {
                    "textFormat": {"bold": True},
                    "backgroundColor": dict(HEADER_BACKGROUND),
                }
            },
            "fields": "userEnteredFormat(textFormat,backgroundColor)",
        }
    }


def freeze_rows_request(sheet_id: int, count: int = 1) -> dict[str, Any]:
    """Freeze the first ``count`` rows."""
    return {
        "updateSheetProperties": {
            "properties": {
                "sheetId": sheet_id,
                "gridProperties": {"frozenRowCount": count},
            },
            "fields": "gridProperties.frozenRowCount",
        }
    }


def auto_resize_columns_request(
    sheet_id: int, start_column: int, end_column: int
) -> dict[str, Any]:
    """Fit column widths to content for columns [start_column, end_column)."""
    return {
        "autoResizeDimensions": {
            "dimensions": {
                "sheetId": sheet_id,
                "dimension": "COLUMNS",
                "startIndex": start_column,
                "endIndex": end_column,
            }
        }
    }


def dropdown_validation_request(
    sheet_id: int,
    cell_range: CellRange | Mapping[str, int],
    allowed_values: Iterable[Any],
) -> dict[str, Any]:
    """Strict one-of-list validation shown as a dropdown."""
    bounds = CellRange.coerce(cell_range)
    return {
        "setDataValidation": {
            "range": bounds.to_grid_range(sheet_id),
            "rule": {
                "condition": {
                    "type": "ONE_OF_LIST",
                    "values": [{"userEnteredValue": str(v)} for v in allowed_values],
                },
                "showCustomUi": True,
                "strict": True,
            },
        }
    }


def batch_body(requests: Iterable[Mapping[str, Any]]) -> dict[str, list]:
    """Wrap request descriptors in a batchUpdate body."""
    return {"requests": [dict(r) for r in requests]}
