"""Exceptions raised by chromacss."""


class ColorError(ValueError):
    """Base class for every error raised while handling colors."""


class UnrecognizedFormatError(ColorError):
    """The string does not start like any of the supported CSS color syntaxes."""

    def __init__(self, color: str):
        self.color = color
        super().__init__(f"Unrecognized color format: {color!r}")


class MalformedColorError(ColorError):
    """The string looks like a known syntax but its fields cannot be parsed."""

    def __init__(self, color: str, reason: str):
        self.color = color
        self.reason = reason
        super().__init__(f"Malformed color string {color!r}: {reason}")


class InvalidArgumentError(ColorError):
    """A caller passed arguments the operation cannot work with."""
