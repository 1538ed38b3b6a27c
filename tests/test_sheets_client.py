"""Tests for the Sheets client against a stubbed API service."""

from unittest.mock import MagicMock, patch

import pytest

from sheets_manager.google import CredentialsNotFoundError, GoogleAuthError
from sheets_manager.sheets import CellRange, SheetsClient, edit_url


@pytest.fixture
def service():
    """Stub Sheets v4 service."""
    return MagicMock(name="sheets_service")


@pytest.fixture
def client(service):
    """Client wired to the stub service."""
    return SheetsClient(credentials_path="unused.json", service=service)


def _spreadsheets(service):
    return service.spreadsheets.return_value


def _batch_requests(service):
    """Requests list from the single batchUpdate call."""
    batch = _spreadsheets(service).batchUpdate
    batch.assert_called_once()
    return batch.call_args.kwargs["body"]["requests"]


class TestConnect:
    """Test lazy service construction."""

    def test_missing_credentials_fails_before_any_call(self, tmp_path):
        """Should raise before building a service or touching the network."""
        client = SheetsClient(credentials_path=tmp_path / "missing.json")
        with (
            patch("sheets_manager.google.service_account.build") as build,
            pytest.raises(CredentialsNotFoundError),
        ):
            client.create_spreadsheet("Report")
        build.assert_not_called()

    def test_invalid_credentials(self, tmp_path):
        """Should raise an auth error for a malformed key."""
        key_path = tmp_path / "credentials.json"
        key_path.write_text("{}")
        client = SheetsClient(credentials_path=key_path)
        with pytest.raises(GoogleAuthError):
            client.connect()

    def test_service_cached(self, tmp_path):
        """Should authenticate once and reuse the service."""
        client = SheetsClient(credentials_path=tmp_path / "credentials.json")
        with patch("sheets_manager.sheets.client.GoogleServiceAccount") as auth_cls:
            first = client.connect()
            second = client.connect()
        auth_cls.assert_called_once_with(tmp_path / "credentials.json", scopes=["sheets"])
        auth_cls.return_value.build_service.assert_called_once_with("sheets", "v4")
        assert first is second

    def test_injected_service_skips_auth(self, client, service):
        """Should use an injected service without reading credentials."""
        assert client.connect() is service

    def test_default_path_from_env(self, monkeypatch, tmp_path):
        """Should read the key path from GOOGLE_CREDENTIALS_PATH."""
        monkeypatch.setenv("GOOGLE_CREDENTIALS_PATH", str(tmp_path / "key.json"))
        assert SheetsClient().credentials_path == tmp_path / "key.json"


class TestCreateSpreadsheet:
    """Test spreadsheet creation."""

    @pytest.mark.parametrize("names", [["Sheet1"], ["API Tests", "UI Tests"], ["a", "b", "c", "d"]])
    def test_one_descriptor_per_sheet(self, client, service, names):
        """Should send one 1000x26 sheet descriptor per name."""
        _spreadsheets(service).create.return_value.execute.return_value = {
            "spreadsheetId": "abc",
            "properties": {"title": "Report"},
        }
        client.create_spreadsheet("Report", names)

        body = _spreadsheets(service).create.call_args.kwargs["body"]
        assert body["properties"] == {"title": "Report"}
        assert [s["properties"]["title"] for s in body["sheets"]] == names
        for sheet in body["sheets"]:
            assert sheet["properties"]["gridProperties"] == {
                "rowCount": 1000,
                "columnCount": 26,
            }

    def test_default_sheet_name(self, client, service):
        """Should create a single Sheet1 tab by default."""
        _spreadsheets(service).create.return_value.execute.return_value = {"spreadsheetId": "x"}
        client.create_spreadsheet("Report")
        body = _spreadsheets(service).create.call_args.kwargs["body"]
        assert [s["properties"]["title"] for s in body["sheets"]] == ["Sheet1"]

    def test_returns_id_and_url(self, client, service):
        """Should return the service-assigned ID and edit URL."""
        _spreadsheets(service).create.return_value.execute.return_value = {
            "spreadsheetId": "abc123",
            "properties": {"title": "Report"},
            "sheets": [
                {"properties": {"sheetId": 0, "title": "API Tests", "index": 0}},
                {"properties": {"sheetId": 42, "title": "UI Tests", "index": 1}},
            ],
        }
        result = client.create_spreadsheet("Report", ["API Tests", "UI Tests"])

        assert result.id == "abc123"
        assert result.url == "https://docs.google.com/spreadsheets/d/abc123/edit"
        assert result.sheet_by_title("UI Tests").id == 42


class TestWriteData:
    """Test value writes."""

    @pytest.mark.parametrize("values", [[["a", "b"]], [["=SUM(A1:A2)"]], [[1, 2.5, True]]])
    def test_always_user_entered(self, client, service, values):
        """Should always parse values as user input."""
        client.write_data("abc", "Sheet1!A1:B1", values)

        update = _spreadsheets(service).values.return_value.update
        update.assert_called_once_with(
            spreadsheetId="abc",
            range="Sheet1!A1:B1",
            valueInputOption="USER_ENTERED",
            body={"values": values},
        )

    def test_returns_raw_response(self, client, service):
        """Should return the API response unchanged."""
        response = {"updatedRows": 3, "updatedCells": 15}
        update = _spreadsheets(service).values.return_value.update
        update.return_value.execute.return_value = response
        assert client.write_data("abc", "A2:E4", [["x"]] * 3) == response

    def test_values_sent_unchanged(self, client, service):
        """Should pass values through without reshaping rows."""
        values = [["a", "b"], "cd"]
        client.write_data("abc", "A1:B2", values)
        update = _spreadsheets(service).values.return_value.update
        body = update.call_args.kwargs["body"]
        assert body["values"] is values
        assert body["values"][1] == "cd"

    def test_api_errors_propagate(self, client, service):
        """Should not swallow errors raised by the API."""
        update = _spreadsheets(service).values.return_value.update
        update.return_value.execute.side_effect = RuntimeError("quota exceeded")
        with pytest.raises(RuntimeError, match="quota exceeded"):
            client.write_data("abc", "A1", [["x"]])


class TestReadAndClear:
    """Test value reads and clears."""

    def test_read_data(self, client, service):
        """Should return the values of the range."""
        get = _spreadsheets(service).values.return_value.get
        get.return_value.execute.return_value = {"values": [["a", "b"]]}
        assert client.read_data("abc", "Sheet1!A1:B1") == [["a", "b"]]
        get.assert_called_once_with(spreadsheetId="abc", range="Sheet1!A1:B1")

    def test_read_empty_range(self, client, service):
        """Should return an empty list when the range holds nothing."""
        get = _spreadsheets(service).values.return_value.get
        get.return_value.execute.return_value = {"range": "Sheet1!A1:B1"}
        assert client.read_data("abc", "Sheet1!A1:B1") == []

    def test_clear_range(self, client, service):
        """Should clear the range."""
        client.clear_range("abc", "Sheet1!A1:B9")
        clear = _spreadsheets(service).values.return_value.clear
        clear.assert_called_once_with(spreadsheetId="abc", range="Sheet1!A1:B9", body={})


class TestFormatHeaderRow:
    """Test header formatting."""

    @pytest.mark.parametrize("sheet_id", [0, 7, 123456])
    def test_two_requests_in_one_batch(self, client, service, sheet_id):
        """Should bold row 0 and freeze it, both on the given sheet."""
        client.format_header_row("abc", sheet_id=sheet_id)

        requests = _batch_requests(service)
        assert len(requests) == 2
        repeat = requests[0]["repeatCell"]
        assert repeat["range"] == {"sheetId": sheet_id, "startRowIndex": 0, "endRowIndex": 1}
        fmt = repeat["cell"]["userEnteredFormat"]
        assert fmt["textFormat"] == {"bold": True}
        assert fmt["backgroundColor"] == {"red": 0.9, "green": 0.9, "blue": 0.9}

        props = requests[1]["updateSheetProperties"]
        assert props["properties"]["sheetId"] == sheet_id
        assert props["properties"]["gridProperties"] == {"frozenRowCount": 1}
        assert props["fields"] == "gridProperties.frozenRowCount"

    def test_default_sheet(self, client, service):
        """Should target sheet 0 by default."""
        client.format_header_row("abc")
        requests = _batch_requests(service)
        assert requests[0]["repeatCell"]["range"]["sheetId"] == 0


class TestAutoResizeColumns:
    """Test column auto-resize."""

    def test_defaults(self, client, service):
        """Should resize columns [0, 26) on sheet 0."""
        client.auto_resize_columns("abc")
        (request,) = _batch_requests(service)
        assert request == {
            "autoResizeDimensions": {
                "dimensions": {
                    "sheetId": 0,
                    "dimension": "COLUMNS",
                    "startIndex": 0,
                    "endIndex": 26,
                }
            }
        }

    def test_custom_range(self, client, service):
        """Should pass the column span through."""
        client.auto_resize_columns("abc", sheet_id=5, start_column=2, end_column=5)
        (request,) = _batch_requests(service)
        dims = request["autoResizeDimensions"]["dimensions"]
        assert (dims["sheetId"], dims["startIndex"], dims["endIndex"]) == (5, 2, 5)


class TestDropdownValidation:
    """Test dropdown validation rules."""

    def test_strict_list_rule(self, client, service):
        """Should build a strict one-of-list rule with a dropdown."""
        client.add_dropdown_validation(
            "abc", 3, CellRange(1, 1000, 1, 2), ["PASSED", "FAILED"]
        )
        (request,) = _batch_requests(service)
        validation = request["setDataValidation"]
        assert validation["range"] == {
            "sheetId": 3,
            "startRowIndex": 1,
            "endRowIndex": 1000,
            "startColumnIndex": 1,
            "endColumnIndex": 2,
        }
        rule = validation["rule"]
        assert rule["strict"] is True
        assert rule["showCustomUi"] is True
        assert rule["condition"] == {
            "type": "ONE_OF_LIST",
            "values": [{"userEnteredValue": "PASSED"}, {"userEnteredValue": "FAILED"}],
        }

    def test_mapping_range(self, client, service):
        """Should accept a plain mapping of bounds."""
        bounds = {"start_row": 0, "end_row": 10, "start_column": 4, "end_column": 5}
        client.add_dropdown_validation("abc", 0, bounds, ["yes"])
        (request,) = _batch_requests(service)
        assert request["setDataValidation"]["range"]["startColumnIndex"] == 4

    def test_rule_allows_exactly_listed_values(self, client, service):
        """Should send a strict rule listing exactly the allowed values."""
        allowed = ["PASSED", "FAILED", "SKIPPED", "BLOCKED"]
        client.add_dropdown_validation("abc", 0, CellRange(1, 1000, 1, 2), allowed)
        (request,) = _batch_requests(service)
        rule = request["setDataValidation"]["rule"]

        listed = [v["userEnteredValue"] for v in rule["condition"]["values"]]
        assert listed == allowed
        assert "UNKNOWN" not in listed
        assert rule["strict"] is True


class TestGetSpreadsheetInfo:
    """Test metadata reshaping."""

    def test_reshapes_sheets_in_order(self, client, service):
        """Should flatten sheet properties, preserving order."""
        _spreadsheets(service).get.return_value.execute.return_value = {
            "spreadsheetId": "abc",
            "properties": {"title": "Report"},
            "sheets": [
                {
                    "properties": {
                        "sheetId": 9,
                        "title": "Second",
                        "index": 0,
                        "gridProperties": {"rowCount": 50, "columnCount": 5},
                    }
                },
                {
                    "properties": {
                        "sheetId": 0,
                        "title": "First",
                        "index": 1,
                        "gridProperties": {"rowCount": 1000, "columnCount": 26},
                    }
                },
            ],
        }
        info = client.get_spreadsheet_info("abc")

        _spreadsheets(service).get.assert_called_once_with(spreadsheetId="abc")
        assert info.to_dict() == {
            "title": "Report",
            "sheets": [
                {"title": "Second", "sheet_id": 9, "row_count": 50, "column_count": 5},
                {"title": "First", "sheet_id": 0, "row_count": 1000, "column_count": 26},
            ],
            "url": "https://docs.google.com/spreadsheets/d/abc/edit",
        }

    def test_url_built_locally(self, client, service):
        """Should build the edit URL even when the response has none."""
        _spreadsheets(service).get.return_value.execute.return_value = {
            "properties": {"title": "T"},
            "spreadsheetUrl": "https://example.invalid/other",
        }
        info = client.get_spreadsheet_info("weird-id_123")
        assert info.url == "https://docs.google.com/spreadsheets/d/weird-id_123/edit"
        assert info.sheets == []

    @pytest.mark.parametrize("spreadsheet_id", ["abc", "1BxiMVs0XRA5nFMdKvBdBZjgmUUqptlbs74OgvE2upms"])
    def test_edit_url(self, spreadsheet_id):
        """Should embed any ID in the fixed URL template."""
        assert edit_url(spreadsheet_id) == (
            f"https://docs.google.com/spreadsheets/d/{spreadsheet_id}/edit"
        )
