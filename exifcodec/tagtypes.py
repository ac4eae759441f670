"""Primitive EXIF/TIFF tag types -- ids, unit sizes and names.

The name tables are built once at import time and exposed read-only, so
they can be shared between threads without locking.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from exifcodec.errors import UnsupportedTypeError


class TagType(IntEnum):
    """Primitive type of a tag value, keyed by its wire id."""
    BYTE = 1
    ASCII = 2         # NUL-terminated on the wire
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    UNDEFINED = 7     # opaque, tag-specific interpretation
    SLONG = 9
    SRATIONAL = 10

    # Pseudo-type for text without a terminator. Never appears on the wire.
    ASCII_NO_NUL = 0xF0


# {tag_type: (unit_size_bytes, struct_format_chars)}
# UNDEFINED has no generic size and so no entry.
TYPE_LAYOUTS: Mapping[TagType, Tuple[int, str]] = MappingProxyType({
    TagType.BYTE: (1, 'B'),
    TagType.ASCII: (1, 's'),
    TagType.ASCII_NO_NUL: (1, 's'),
    TagType.SHORT: (2, 'H'),
    TagType.LONG: (4, 'I'),
    TagType.RATIONAL: (8, 'II'),    # num/denom
    TagType.SLONG: (4, 'i'),
    TagType.SRATIONAL: (8, 'ii'),
})

TYPE_NAMES: Mapping[TagType, str] = MappingProxyType({
    TagType.BYTE: 'BYTE',
    TagType.ASCII: 'ASCII',
    TagType.SHORT: 'SHORT',
    TagType.LONG: 'LONG',
    TagType.RATIONAL: 'RATIONAL',
    TagType.UNDEFINED: 'UNDEFINED',
    TagType.SLONG: 'SLONG',
    TagType.SRATIONAL: 'SRATIONAL',
    TagType.ASCII_NO_NUL: '_ASCII_NO_NUL',
})

_TYPES_BY_NAME: Mapping[str, TagType] = MappingProxyType(
    {type_name: tag_type for tag_type, type_name in TYPE_NAMES.items()})


def _coerce(tag_type) -> Optional[TagType]:
    """Return the TagType for an enum member or raw id, or None."""
    if isinstance(tag_type, TagType):
        return tag_type
    if isinstance(tag_type, bool) or not isinstance(tag_type, int):
        return None
    try:
        return TagType(tag_type)
    except ValueError:
        return None


def tag_type_from_id(type_id: int) -> TagType:
    """Convert the raw type field of an IFD entry into a TagType."""
    tag_type = _coerce(type_id)
    if tag_type is None:
        raise UnsupportedTypeError(f'unknown tag type id ({type_id!r})')
    return tag_type


def size(tag_type) -> int:
    """Size in bytes of one unit of the type.

    UNDEFINED has no generic size; callers must special-case it first.
    """
    resolved = _coerce(tag_type)
    if resolved is None or resolved not in TYPE_LAYOUTS:
        raise UnsupportedTypeError(
            f'can not determine tag-value size for type ({tag_type!r}): '
            f'[{name(tag_type)}]')
    return TYPE_LAYOUTS[resolved][0]


def is_valid(tag_type) -> bool:
    """True for every defined type, including the ASCII_NO_NUL pseudo-type."""
    return _coerce(tag_type) is not None


def is_wire_type(tag_type) -> bool:
    """True for types that may appear in an IFD entry."""
    resolved = _coerce(tag_type)
    return resolved is not None and resolved is not TagType.ASCII_NO_NUL


def name(tag_type) -> str:
    """Canonical name of the type, or '' if it is not registered."""
    return name_by_type(tag_type)[0]


def name_by_type(tag_type) -> Tuple[str, bool]:
    """Canonical name of the type plus a found flag."""
    resolved = _coerce(tag_type)
    if resolved is None:
        return '', False
    return TYPE_NAMES[resolved], True


def type_by_name(type_name: str) -> Tuple[Optional[TagType], bool]:
    """Look up a type by its canonical name. Returns (type, found)."""
    tag_type = _TYPES_BY_NAME.get(type_name)
    return tag_type, tag_type is not None
