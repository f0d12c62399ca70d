"""
Unit tests for the OsfClient class.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from osfget_core.api import OsfClient
from osfget_core.util import supported as supported_mod
from osfget_core.util.exceptions import (
    OsfConfigError,
    OsfError,
    OsfHttpError,
    OsfNotFoundError,
)

FILES_URL = "https://files.osf.io/v1/resources/abc12/providers/osfstorage"


def make_response(status=200, chunks=(b"payload",), headers=None, json_body=None):
    """Build a mock requests response usable as a context manager."""
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    response.reason = "Reason"
    response.headers = headers or {}
    response.iter_content.return_value = iter(chunks)
    response.json.return_value = json_body
    response.__enter__.return_value = response
    return response


@pytest.fixture
def client():
    """client on the production server with a mocked session"""
    osf = OsfClient(server="production", pat="secret", logger=Mock())
    osf.session = MagicMock()
    return osf


class TestOsfClientInit:
    """test construction"""

    def test_production_urls(self):
        osf = OsfClient(server="production", pat="", logger=Mock())

        assert osf.api_url == "https://api.osf.io/v2"
        assert osf.files_url == "https://files.osf.io"

    def test_test_urls(self):
        osf = OsfClient(server="test", pat="", logger=Mock())

        assert osf.api_url == "https://api.test.osf.io/v2"
        assert osf.files_url == "https://files.us.test.osf.io"

    def test_unknown_server(self):
        with pytest.raises(ValueError, match="Expected server"):
            OsfClient(server="staging", pat="", logger=Mock())

    def test_server_from_config(self):
        with (
            patch("osfget_core.api.get_server", return_value="test"),
            patch("osfget_core.api.get_pat", return_value=None),
        ):
            osf = OsfClient(logger=Mock())

        assert osf.server == "test"

    def test_authorization_header(self):
        osf = OsfClient(server="production", pat="secret", logger=Mock())

        assert osf.session.headers["Authorization"] == "Bearer secret"
        assert osf.session.headers["User-Agent"].startswith("osfget/")

    def test_no_pat(self):
        with patch("osfget_core.api.get_pat", return_value=None):
            osf = OsfClient(server="production", logger=Mock())

        assert "Authorization" not in osf.session.headers

    def test_malformed_config_raises(self, tmp_path, monkeypatch):
        """test a broken config file raises instead of exiting"""
        file = tmp_path / "config.yaml"
        file.write_text("server: [unclosed")
        monkeypatch.delenv("OSF_SERVER", raising=False)

        with patch.object(supported_mod, "get_config_file", return_value=file):
            with pytest.raises(OsfConfigError, match="Could not parse") as excinfo:
                OsfClient(logger=Mock())

        assert isinstance(excinfo.value, OsfError)

    def test_creates_logger_when_none_provided(self, tmp_path):
        with patch("osfget_core.api.setup_logger") as mock_setup_logger:
            mock_setup_logger.return_value = Mock()

            osf = OsfClient(server="production", pat="", logdir=tmp_path)

            mock_setup_logger.assert_called_once_with(
                "osfget_core.api", level=20, log_dir=tmp_path
            )
            assert osf.logger is mock_setup_logger.return_value


class TestWbPath:
    """test WaterButler paths"""

    def test_file(self, client):
        assert (
            client.wb_path("abc12", "2ryha", "file")
            == "v1/resources/abc12/providers/osfstorage/2ryha"
        )

    def test_folder(self, client):
        assert client.wb_path("abc12", "d0001", "folder").endswith("/d0001/")


class TestWbDownload:
    """test WaterButler downloads"""

    def test_file(self, client, tmp_path):
        dest = tmp_path / "plan.docx"
        client.session.get.return_value = make_response(chunks=(b"pay", b"load"))

        result = client.wb_download("abc12", "2ryha", str(dest), "file")

        client.session.get.assert_called_once_with(
            f"{FILES_URL}/2ryha", params=None, stream=True, timeout=30
        )
        assert result == str(dest)
        assert dest.read_bytes() == b"payload"
        assert not (tmp_path / "plan.docx.part").exists()

    def test_folder_as_zip(self, client, tmp_path):
        dest = tmp_path / "data_folder.zip"
        client.session.get.return_value = make_response(chunks=(b"PK",))

        client.wb_download("abc12", "d0001", str(dest), "folder", zip=True)

        client.session.get.assert_called_once_with(
            f"{FILES_URL}/d0001/", params={"zip": ""}, stream=True, timeout=30
        )
        assert dest.read_bytes() == b"PK"

    def test_replaces_existing(self, client, tmp_path):
        dest = tmp_path / "plan.docx"
        dest.write_bytes(b"old")
        client.session.get.return_value = make_response(chunks=(b"new",))

        client.wb_download("abc12", "2ryha", dest, "file")

        assert dest.read_bytes() == b"new"

    def test_not_found(self, client, tmp_path):
        dest = tmp_path / "plan.docx"
        client.session.get.return_value = make_response(status=404)

        with pytest.raises(
            OsfNotFoundError, match=r"file \(2ryha\) could not be found in node `abc12`"
        ):
            client.wb_download("abc12", "2ryha", str(dest), "file")

        assert not dest.exists()

    def test_http_error_message(self, client, tmp_path):
        client.session.get.return_value = make_response(
            status=500, json_body={"code": 500, "message": "boom"}
        )

        with pytest.raises(OsfHttpError, match="boom") as excinfo:
            client.wb_download("abc12", "2ryha", str(tmp_path / "x"), "file")

        assert excinfo.value.status_code == 500

    def test_http_error_without_json(self, client, tmp_path):
        response = make_response(status=502)
        response.json.side_effect = ValueError("no json")
        client.session.get.return_value = response

        with pytest.raises(OsfHttpError, match="HTTP 502: Reason"):
            client.wb_download("abc12", "2ryha", str(tmp_path / "x"), "file")

    def test_interrupted_transfer_keeps_existing(self, client, tmp_path):
        """test a failed stream leaves no partial file and the old file intact"""
        dest = tmp_path / "plan.docx"
        dest.write_bytes(b"old")

        def broken_stream(chunk_size):
            yield b"partial"
            raise requests.exceptions.ChunkedEncodingError("connection reset")

        response = make_response()
        response.iter_content.side_effect = broken_stream
        client.session.get.return_value = response

        with pytest.raises(requests.exceptions.ChunkedEncodingError):
            client.wb_download("abc12", "2ryha", str(dest), "file")

        assert dest.read_bytes() == b"old"
        assert not (tmp_path / "plan.docx.part").exists()

    def test_connection_error_propagates(self, client, tmp_path):
        client.session.get.side_effect = requests.exceptions.ConnectionError()

        with pytest.raises(requests.exceptions.ConnectionError):
            client.wb_download("abc12", "2ryha", str(tmp_path / "x"), "file")

    def test_progress_bar(self, client, tmp_path):
        client.progress = True
        client.session.get.return_value = make_response(
            chunks=(b"abc",), headers={"content-length": "3"}
        )

        with patch("osfget_core.api.progress_bar") as mock_progress_bar:
            client.wb_download("abc12", "2ryha", str(tmp_path / "x"), "file")

            mock_progress_bar.assert_called_once()
        assert (tmp_path / "x").read_bytes() == b"abc"

    def test_no_progress_bar_without_size(self, client, tmp_path):
        client.progress = True
        client.session.get.return_value = make_response(chunks=(b"abc",))

        with patch("osfget_core.api.progress_bar") as mock_progress_bar:
            client.wb_download("abc12", "2ryha", str(tmp_path / "x"), "file")

            mock_progress_bar.assert_not_called()

    def test_bad_transfer_type(self, client, tmp_path):
        with pytest.raises(ValueError, match="transfer_type"):
            client.wb_download("abc12", "2ryha", str(tmp_path / "x"), "archive")

        client.session.get.assert_not_called()


class TestRetrieveFile:
    """test OSF API retrieval"""

    def test_retrieve(self, client):
        entity = {
            "id": "2ryha",
            "attributes": {"name": "plan.docx", "kind": "file"},
            "relationships": {"node": {"data": {"id": "abc12"}}},
        }
        client.session.get.return_value = make_response(json_body={"data": entity})

        files = client.retrieve_file("2ryha")

        client.session.get.assert_called_once_with(
            "https://api.osf.io/v2/files/2ryha/", timeout=30
        )
        assert files.name == "plan.docx"
        assert files.parent_id == "abc12"

    def test_not_found(self, client):
        client.session.get.return_value = make_response(status=404)

        with pytest.raises(OsfNotFoundError):
            client.retrieve_file("nope0")

    def test_forbidden(self, client):
        client.session.get.return_value = make_response(
            status=403,
            json_body={"errors": [{"detail": "You do not have permission."}]},
        )

        with pytest.raises(OsfHttpError, match="You do not have permission") as excinfo:
            client.retrieve_file("priv1")

        assert excinfo.value.status_code == 403
