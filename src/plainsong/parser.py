"""Song sheet parser.

Turns a plain-text "chords over lyrics" sheet into a
:class:`~plainsong.models.Song`::

    Amazing Grace                 <- title (first non-blank line)
    artist: John Newton           <- metadata, "key: value"

    Verse 1:                      <- part header, first line of a part
    G           C      G
    Amazing grace, how sweet      <- lyric line, takes the chords above

Phases
------
``START``       skip blank lines; the first non-blank line is the title.
``DEFINITION``  skip blank lines; read ``key: value`` metadata.  The first
                line that is not metadata is handed on to ``BODY``.
``BODY``        a blank line closes the current part; any other line is a
                part header, a chord line or a lyric line.

A chord line is held as *pending* until the next lyric line takes it.  A
second chord line, or the end of the part, pushes pending chords out as a
chord-only line (empty text).
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum, auto

from .chords import extract_chords
from .models import Chord, Line, Part, Song

# "key: value".  The greedy key makes the *last* ": " the separator, so
# "Words: Newton: 1779" gives key "Words: Newton" and value "1779".
METADATA_RE = re.compile(r"\s*(.*): (.*)\s*")

# "Verse 1:" - any text ending in a colon, nothing after it.
PART_HEADER_RE = re.compile(r"\s*(.*):")

# Line breaks only; form feeds and Unicode separators stay inside a line.
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


class Phase(Enum):
    START = auto()  # before the title
    DEFINITION = auto()  # metadata header
    BODY = auto()  # parts


@dataclass
class ParserState:
    """Everything the parser carries from one line to the next."""

    phase: Phase = Phase.START
    part: Part = field(default_factory=Part)  # not yet appended to the song
    pending: list[Chord] = field(default_factory=list)


def parse(content: str) -> Song:
    """Parse a whole song sheet.

    Never fails: degenerate input gives a best-effort song (empty input
    gives an empty title, no metadata and no parts).
    """
    song = Song()
    state = ParserState()
    # The trailing "" flushes the last part like any other blank line.
    for line in [*_NEWLINE_RE.split(content), ""]:
        state = step(song, state, line)
    return song


def step(song: Song, state: ParserState, line: str) -> ParserState:
    """Feed one line to the parser and return the state for the next one.

    *song* is extended in place with the title, metadata and every part
    that gets closed.
    """
    stripped = line.strip()

    if state.phase is Phase.START:
        if not stripped:
            return state
        song.title = stripped
        return replace(state, phase=Phase.DEFINITION)

    if state.phase is Phase.DEFINITION:
        if not stripped:
            return state
        if _parse_metadata(song, line):
            return state
        # End of the header; the same line starts the body.
        return step(song, replace(state, phase=Phase.BODY), line)

    if not stripped:
        return _close_part(song, state)
    return _parse_body_line(state, line)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_metadata(song: Song, line: str) -> bool:
    """Store *line* in the song's metadata if it is ``key: value``."""
    m = METADATA_RE.fullmatch(line)
    if not m:
        return False
    song.metadata[m.group(1)] = m.group(2)
    return True


def _close_part(song: Song, state: ParserState) -> ParserState:
    """Append the part under construction to *song* and start a new one.

    A blank line while the part is still empty (no name, no lines) changes
    nothing, and any pending chords stay pending.
    """
    part = state.part
    if part.is_empty():
        return state

    if state.pending:
        part.lines.append(Line(text="", chords=state.pending))
    song.parts.append(part)
    return ParserState(phase=state.phase)


def _parse_body_line(state: ParserState, line: str) -> ParserState:
    part = state.part

    # Only the first line of a part can name it.
    if part.is_empty():
        m = PART_HEADER_RE.fullmatch(line)
        if m:
            part.name = m.group(1)
            return state

    chords = extract_chords(line)
    if chords is not None:
        # Back-to-back chord lines: the earlier one gets a line of its own.
        if state.pending:
            part.lines.append(Line(text="", chords=state.pending))
        return replace(state, pending=chords)

    part.lines.append(Line(text=line, chords=state.pending))
    return replace(state, pending=[])
