"""LaTeX formatter for the ``songs`` package.

Renders a :class:`~plainsong.models.Song` to ``\\beginsong`` ... ``\\endsong``
markup.

Part name → environment mapping
-------------------------------

+--------------------------------------+------------------------------------+
| Name (case-insensitive)              | Environment                        |
+======================================+====================================+
| ``Chorus``                           | ``\\beginchorus`` / ``\\endchorus``  |
+--------------------------------------+------------------------------------+
| ``Verse N`` (N one or more digits)   | ``\\beginverse`` / ``\\endverse``    |
+--------------------------------------+------------------------------------+
| anything else, including unnamed     | ``\\beginverse*`` with a bold       |
|                                      | ``Name:`` label / ``\\endverse``    |
+--------------------------------------+------------------------------------+

Chords are inserted inline as ``\\[G]`` at their offset in the lyric.  A
line with chords but no lyric is wrapped in ``\\nolyrics{...}``.

Usage::

    from plainsong.formatters.latex import LatexFormatter
    text = LatexFormatter().render(song)
"""

import re

from ..models import Line, Part, Song
from .base import Formatter

# Numbered verses get the package's automatic numbering.
_NUMBERED_VERSE_RE = re.compile(r"verse \d+")


class LatexFormatter(Formatter):
    """Render a :class:`~plainsong.models.Song` to ``songs`` LaTeX."""

    def render(self, song: Song) -> str:
        """Return LaTeX for *song*, ending with ``\\endsong`` and a newline."""
        out: list[str] = []

        out.append(f"\\beginsong{{{song.title}}}")
        artist = song.metadata.get("artist")
        if artist is not None:
            out.append(f"[by={{{artist}}}]")
        out.append("\n\n")

        for part in song.parts:
            out.append(render_part(part))
            out.append("\n")  # blank line after every part

        out.append("\\endsong\n")
        return "".join(out)


def render_part(part: Part) -> str:
    """Return one verse or chorus environment, lines indented by a tab."""
    kind = part.name.lower()

    if kind == "chorus":
        out = ["\\beginchorus\n"]
        end = "\\endchorus\n"
    elif _NUMBERED_VERSE_RE.fullmatch(kind):
        out = ["\\beginverse\n"]
        end = "\\endverse\n"
    else:
        out = ["\\beginverse*\n", f"\t\\textbf{{{part.name}:}}\n"]
        end = "\\endverse\n"

    for line in part.lines:
        out.append("\t" + render_line(line))

    out.append(end)
    return "".join(out)


def render_line(line: Line) -> str:
    """Return *line* with its chords inserted as ``\\[name]`` markers.

    Chords are inserted from the rightmost offset to the leftmost: an
    insertion only shifts the text to its right, so the offsets still to
    be used stay valid.  Inserting left to right would push every later
    chord off its syllable.
    """
    if not line.chords:
        return line.text + "\n"

    chords = sorted(line.chords, key=lambda c: c.offset, reverse=True)

    # Overhanging chords need the lyric padded out to their column.
    out = line.text.ljust(chords[0].offset)
    for chord in chords:
        out = out[: chord.offset] + f"\\[{chord.name}]" + out[chord.offset :]

    if not line.text:
        return f"\\nolyrics{{{out}}}\n"
    return out + "\n"
