"""Chord grammar and chord-line extraction.

A chord line holds nothing but chord names separated by spaces::

    G       D
    Hello world

Each chord's column is the character offset of the syllable it sounds on
in the lyric line below.
"""

import re

from .models import Chord

# Valid chord name, anchored on the whole token.
# Handles:
#   Root + accidental:   C, Bb, F#
#   Quality:             Cm, CM, Cmin, Cmaj, Cdim, CΔ, C°, Cø, CØ
#   Extensions:          C7, Cm7b5, Csus4, Cadd9, Csus4add9 (repeatable)
#   Alteration:          C+, Caug, C7alt
#   Slash bass:          C/G, D/F#
CHORD_NAME_RE = re.compile(
    r"(?:C|D|E|F|G|A|B)(?:b|#)?"
    r"(?:m|M|min|maj|dim|Δ|°|ø|Ø)?"
    r"(?:(?:sus|add)?(?:b|#)?(?:2|4|5|6|7|9|10|11|13)?)*"
    r"(?:\+|aug|alt)?"
    r"(?:/(?:C|D|E|F|G|A|B)(?:b|#)?)?"
)

# A token is a maximal run of anything but the ASCII space.  Tabs and
# other whitespace are ordinary token characters.
_TOKEN_RE = re.compile(r"[^ ]+")


def is_chord(token: str) -> bool:
    """Return True if the whole of *token* is a chord name."""
    return CHORD_NAME_RE.fullmatch(token) is not None


def extract_chords(line: str) -> list[Chord] | None:
    """Return the chords of *line* with their offsets, or None.

    None means *line* is not a chord line: at least one of its tokens is
    not a chord name.  A line of nothing but spaces is a chord line with
    no chords.

    Args:
        line: A single line of raw text.

    Returns:
        :class:`~plainsong.models.Chord` objects sorted left to right,
        each at the index of its token's first character.
    """
    chords: list[Chord] = []
    for m in _TOKEN_RE.finditer(line):
        if not is_chord(m.group()):
            return None
        chords.append(Chord(name=m.group(), offset=m.start()))
    return chords
