import io
from unittest.mock import MagicMock, patch

import httpx
import pytest

from plainsong.exceptions import FetchError, SourceError
from plainsong.sources import fetch, is_url, read_source

TEST_URL = "https://example.com/songs/amazing-grace.txt"


def _response(status_code=200, text="Title\n") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


# ---------------------------------------------------------------------------
# is_url
# ---------------------------------------------------------------------------


def test_is_url():
    assert is_url(TEST_URL)
    assert is_url("http://example.com/song.txt")


def test_paths_are_not_urls():
    assert not is_url("songs/amazing-grace.txt")
    assert not is_url("-")
    assert not is_url("httpsong.txt")


# ---------------------------------------------------------------------------
# Standard input
# ---------------------------------------------------------------------------


def test_dash_reads_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Dark Star\nG\nla\n"))
    assert read_source("-") == "Dark Star\nG\nla\n"


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def test_read_file(tmp_path):
    path = tmp_path / "song.txt"
    path.write_text("Café\n", encoding="utf-8")
    assert read_source(str(path)) == "Café\n"


def test_missing_file_raises_source_error(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(SourceError) as exc_info:
        read_source(missing)
    assert exc_info.value.source == missing


def test_invalid_utf8_raises_source_error(tmp_path):
    path = tmp_path / "song.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(SourceError):
        read_source(str(path))


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


def test_fetch_returns_body():
    with patch("plainsong.sources.httpx.get", return_value=_response(text="Dark Star\n")) as get:
        assert read_source(TEST_URL) == "Dark Star\n"
    get.assert_called_once_with(TEST_URL, follow_redirects=True, timeout=15)


def test_fetch_http_error_status():
    with patch("plainsong.sources.httpx.get", return_value=_response(status_code=404)):
        with pytest.raises(FetchError) as exc_info:
            fetch(TEST_URL)
    assert exc_info.value.status_code == 404
    assert exc_info.value.url == TEST_URL


def test_fetch_transport_error():
    error = httpx.ConnectError("connection refused")
    with patch("plainsong.sources.httpx.get", side_effect=error):
        with pytest.raises(FetchError) as exc_info:
            fetch(TEST_URL)
    assert exc_info.value.status_code == 0


def test_fetch_error_message_names_url_and_status():
    error = FetchError(TEST_URL, 503)
    assert TEST_URL in str(error)
    assert "503" in str(error)
