__all__ = [
    "TonalityError",
    "InvalidNote",
    "InvalidPitch",
    "InvalidInterval",
    "InvalidKey",
]


class TonalityError(ValueError):
    """Base class of all errors raised on malformed input."""


class InvalidNote(TonalityError):
    """A note token that cannot be parsed."""


class InvalidPitch(TonalityError, TypeError):
    """A value that cannot be used as a semitone value, such as a fraction or a string."""


class InvalidInterval(TonalityError):
    """An interval name that cannot be parsed."""


class InvalidKey(TonalityError):
    """An unrecognized key name."""
