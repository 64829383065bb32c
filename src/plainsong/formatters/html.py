"""HTML formatter.

A preformatted rendering that keeps the sheet's own layout: each chord row
is printed in bold above its lyric, wrapped in one ``<pre>`` block.
"""

import html

from ..models import Line, Part, Song
from .base import Formatter


def _esc(text: str) -> str:
    return html.escape(text, quote=False)


class HtmlFormatter(Formatter):
    """Render a :class:`~plainsong.models.Song` to a ``<pre>`` HTML block."""

    def render(self, song: Song) -> str:
        out: list[str] = ["<pre>", f"<h1>{_esc(song.title)}</h1>\n"]

        for key, value in song.metadata.items():
            out.append(f"{_esc(key)}: {_esc(value)}\n")
        out.append("\n\n")

        for part in song.parts:
            out.append(render_part(part))
            out.append("\n\n")

        out.append("</pre>")
        return "".join(out)


def render_part(part: Part) -> str:
    return f"<em>{_esc(part.name)}:</em>\n" + "".join(render_line(line) for line in part.lines)


def render_line(line: Line) -> str:
    """Return a bold chord row (if any) followed by the lyric (if any)."""
    out = ""

    if line.chords:
        row = []
        column = 0
        for chord in sorted(line.chords, key=lambda c: c.offset):
            # A chord overlapping the previous one goes straight after it
            row.append(" " * max(chord.offset - column, 0))
            row.append(_esc(chord.name))
            column = max(chord.offset, column) + len(chord.name)
        out += "<b>" + "".join(row) + "</b>\n"

    if line.text:
        out += _esc(line.text) + "\n"

    return out
