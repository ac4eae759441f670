"""Exception hierarchy for tag-value decoding, formatting and encoding.

Errors caused by bad input derive from TagValueError, so a directory walker
can skip a single bad tag with one ``except`` clause. InternalInconsistencyError
marks a programming error; it derives from RuntimeError instead, so that
clause does not swallow it.
"""


class TagValueError(Exception):
    """Base class for exifcodec errors caused by bad input."""


class MisalignedDataError(TagValueError):
    """Byte count is not a multiple of the type's unit size."""

    def __init__(self, byte_count: int, type_name: str, unit_size: int):
        self.byte_count = byte_count
        self.type_name = type_name
        self.unit_size = unit_size
        super().__init__(
            f'byte-count ({byte_count}) does not align for [{type_name}] '
            f'type with a size of ({unit_size}) bytes')


class InsufficientDataError(TagValueError):
    """Fewer bytes are available than the requested unit count needs."""

    def __init__(self, available: int, required: int, type_name: str):
        self.available = available
        self.required = required
        self.type_name = type_name
        super().__init__(
            f'not enough data for [{type_name}]: need {required} byte(s), '
            f'have {available}')


class UnsupportedTypeError(TagValueError):
    """Operation attempted on UNDEFINED or on an unknown type or shape."""


class UnhandledUndefinedTypeError(UnsupportedTypeError):
    """An UNDEFINED payload reached the generic decode path.

    UNDEFINED tags need tag-specific decoding (maker notes, version fields,
    etc.) which lives outside this package.
    """


class UnparsableTextError(TagValueError):
    """User text could not be parsed into a value of the requested type."""

    def __init__(self, type_name: str, text: str, reason: str = ''):
        self.type_name = type_name
        self.text = text
        self.reason = reason
        msg = f'can not parse {text!r} as [{type_name}]'
        if reason:
            msg += f': {reason}'
        super().__init__(msg)


class InternalInconsistencyError(RuntimeError):
    """A type outside the closed enumeration reached an exhaustive dispatch.

    Not a TagValueError: this is a caller bug, not bad input.
    """


class ValueFormatError(TagValueError):
    """Raw bytes could not be decoded for display.

    The underlying decode error is available as ``__cause__``.
    """


class ValueEncodeError(TagValueError):
    """A typed value can not be packed into bytes for its type."""
