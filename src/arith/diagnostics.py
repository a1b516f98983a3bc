"""Caret-style rendering of a span against the source it came from."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from .span import Span


def annotate(source: str, span: Span) -> str:
    """Render the source line containing ``span.start`` and a caret underline.

    Carets are clipped to the end of that line, but at least one caret is
    always drawn so that zero-width spans and the synthetic span just past
    the end of input stay visible.
    """

    start = min(span.start, len(source))
    line_start = source.rfind("\n", 0, start) + 1
    line_end = source.find("\n", start)
    if line_end == -1:
        line_end = len(source)
    line = source[line_start:line_end]

    prefix = source[line_start:start]
    #keep tabs so carets line up under tab-indented text
    padding = "".join(char if char == "\t" else " " for char in prefix)
    padding += " " * (span.start - start)
    width = max(1, min(span.end, line_end) - span.start)
    return f"{line}\n{padding}{'^' * width}"


#writes the two-line annotation to the error stream
def print_annotation(source: str, span: Span, file: Optional[TextIO] = None) -> None:
    stream = file if file is not None else sys.stderr
    print(annotate(source, span), file=stream)


__all__ = ["annotate", "print_annotation"]
