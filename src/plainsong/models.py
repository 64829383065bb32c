from dataclasses import dataclass, field


@dataclass
class Chord:
    """A chord sounded at a character offset of its line.

    The offset may lie beyond the end of the line's text (an overhanging
    chord after the last syllable).
    """

    name: str
    offset: int


@dataclass
class Line:
    """A lyric line and the chords placed above it.

    Chord-only lines (two chord lines in a row, or a chord line closing a
    part) have empty text.
    """

    text: str
    chords: list[Chord] = field(default_factory=list)


@dataclass
class Part:
    """A named section of a song (verse, chorus, bridge, etc.)."""

    name: str = ""  # "" until a "Name:" header is seen
    lines: list[Line] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.name and not self.lines


@dataclass
class Song:
    """A parsed song sheet."""

    title: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    parts: list[Part] = field(default_factory=list)

    def to_latex(self) -> str:
        from .formatters.latex import LatexFormatter

        return LatexFormatter().render(self)

    def to_html(self) -> str:
        from .formatters.html import HtmlFormatter

        return HtmlFormatter().render(self)

    def to_json(self) -> str:
        from .formatters.dump import JsonFormatter

        return JsonFormatter().render(self)
