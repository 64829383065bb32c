"""Structural dump of the parsed song, for debugging the parser."""

import json
from dataclasses import asdict

from ..models import Song
from .base import Formatter


class JsonFormatter(Formatter):
    """Render the whole :class:`~plainsong.models.Song` tree as JSON."""

    def render(self, song: Song) -> str:
        return json.dumps(asdict(song), indent=2, ensure_ascii=False) + "\n"
