"""Exceptions raised by paletter."""


class PaletterError(Exception):
    """Base class for every error raised by this package."""


class ParseError(PaletterError, ValueError):
    """A string is not a color literal we understand."""

    def __init__(self, text, reason: str | None = None):
        self.text = text
        self.reason = reason
        message = f"Invalid color literal: {text!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnsupportedFormat(PaletterError, ValueError):
    """Format kind outside of hex/rgb/hsl/lch."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown color format: {kind!r}")


class IndexOutOfRange(PaletterError, IndexError):
    """Collection mutation with an index outside [0, length)."""

    def __init__(self, index, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index!r} out of range for collection of length {length}")
