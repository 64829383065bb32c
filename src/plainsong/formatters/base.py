from abc import ABC, abstractmethod

from ..models import Song


class Formatter(ABC):
    """Abstract base class for all output formatters."""

    @abstractmethod
    def render(self, song: Song) -> str:
        """Return the text rendering of *song*.

        Must not modify *song*: a parsed song can be rendered any number of
        times, in any format.
        """
