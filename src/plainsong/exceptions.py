class PlainsongError(Exception):
    """Base exception for plainsong."""


class FetchError(PlainsongError):
    """Raised when a song sheet URL cannot be downloaded (status 0: no answer)."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Song sheet download from {url} failed with status {status_code}")


class SourceError(PlainsongError):
    """Raised when a song sheet file cannot be read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read {source}: {reason}")


class UnsupportedFormatError(PlainsongError):
    """Raised when no formatter is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No formatter found for format: {name}")
