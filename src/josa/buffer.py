"""Caller-owned mutable text buffer."""

from __future__ import annotations


class TextBuffer:
    """Mutable string that josa can be appended to in place.

    Examples:
        >>> buf = TextBuffer("유진")
        >>> buf.push("은")
        >>> str(buf)
        '유진은'
    """

    __slots__ = ("_parts",)

    def __init__(self, text: str = "") -> None:
        """Initialize buffer.

        Args:
            text: Initial contents
        """
        self._parts: list[str] = [text] if text else []

    @property
    def value(self) -> str:
        """Current contents as an immutable string."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def last_char(self) -> str | None:
        """Return the last character, or None when the buffer is empty."""
        if not self._parts:
            return None
        return self._parts[-1][-1]

    def push(self, text: str) -> None:
        """Append text to the end of the buffer."""
        if text:
            self._parts.append(text)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
