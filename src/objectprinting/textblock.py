"""Line accumulator for rendered text blocks.

A block is an ordered list of lines joined once at the end, with no
trailing separator. Multi-line fragments (nested blocks rendered inline
after a label) are appended as a single line; they already carry their
own separators.

Thread Safety:
    TextBlock instances are local to a single layout routine.

"""

from __future__ import annotations


class TextBlock:
    """Accumulates lines and joins them with a fixed separator.

    Usage:
        >>> block = TextBlock("\\n")
        >>> block.add_line("Person")
        >>> block.add_line("\\tName = Alice")
        >>> block.build()
        'Person\\n\\tName = Alice'
    """

    __slots__ = ("_lines", "_newline")

    def __init__(self, newline: str) -> None:
        self._newline = newline
        self._lines: list[str] = []

    def add_line(self, *parts: str) -> TextBlock:
        """Append one line built from the given parts.

        Returns:
            self for method chaining
        """
        self._lines.append("".join(parts))
        return self

    def build(self) -> str:
        """Join all lines, without a trailing separator."""
        return self._newline.join(self._lines)

    def __len__(self) -> int:
        """Return number of lines."""
        return len(self._lines)
