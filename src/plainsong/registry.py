from .exceptions import UnsupportedFormatError
from .formatters.base import Formatter
from .formatters.dump import JsonFormatter
from .formatters.html import HtmlFormatter
from .formatters.latex import LatexFormatter

FORMATTERS: dict[str, type[Formatter]] = {
    "to-latex": LatexFormatter,
    "to-html": HtmlFormatter,
    "to-json": JsonFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Return an instantiated formatter for the given format name.

    Raises UnsupportedFormatError if no formatter is registered under it.
    """
    try:
        cls = FORMATTERS[name]
    except KeyError:
        raise UnsupportedFormatError(name) from None
    return cls()
