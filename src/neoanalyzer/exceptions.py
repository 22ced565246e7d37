"""Errors raised by neoanalyzer.

Record errors subclass `ValueError` so that callers catching the usual
"bad input" exception keep working.
"""

__all__ = [
    "NeoRecordError",
    "FieldMissingError",
    "TypeMismatchError",
    "NumericParseError",
    "DomainError",
]


class NeoRecordError(ValueError):
    """A NeoWs record could not be turned into an `Asteroid`."""


class FieldMissingError(NeoRecordError, KeyError):
    """A required field of the NeoWs record is absent.

    Parameters
    ----------
    path : str
        Dotted path of the missing field, e.g.
        ``"close_approach_data[0].miss_distance.kilometers"``.
    """

    def __init__(self, path):
        self.path = path
        super().__init__(f"Required field `{path}` is missing from the NEO record.")

    # KeyError.__str__ would quote the whole message.
    def __str__(self):
        return self.args[0]


class TypeMismatchError(NeoRecordError, TypeError):
    """A field of the NeoWs record has an unexpected type."""


class NumericParseError(NeoRecordError):
    """A numeric-valued string in the NeoWs record is not a number."""


class DomainError(ValueError):
    """A physical formula was called outside of its domain (e.g., zero diameter)."""
