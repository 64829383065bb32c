"""Reading song sheets from stdin, a file or a URL."""

import sys
from pathlib import Path

import httpx

from .exceptions import FetchError, SourceError

STDIN = "-"


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(source: str) -> str:
    """Return the whole text of *source*.

    Args:
        source: ``"-"`` for standard input, an ``http(s)://`` URL, or a
                file path.

    Raises FetchError if a URL cannot be fetched and SourceError if a file
    cannot be read.
    """
    if source == STDIN:
        return sys.stdin.read()
    if is_url(source):
        return fetch(source)
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(source, str(exc)) from exc


def fetch(url: str) -> str:
    """Download a song sheet published as plain text.

    Redirects are followed.  Anything but a 200 answer is an error: the
    body of an error page would otherwise be parsed as a song.

    Raises FetchError with the HTTP status, or status 0 when no answer
    arrived at all (DNS failure, refused connection, timeout).
    """
    try:
        resp = httpx.get(url, follow_redirects=True, timeout=15)
    except httpx.RequestError as exc:
        raise FetchError(url, 0) from exc

    if resp.status_code == 200:
        return resp.text
    raise FetchError(url, resp.status_code)
