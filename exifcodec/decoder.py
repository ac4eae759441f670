"""Decode raw tag payloads into typed values.

Byte order is a struct prefix: '<' for little-endian ("II" files) and
'>' for big-endian ("MM" files). The caller takes it from the TIFF header.
"""

import logging
import struct

from exifcodec.errors import (
    InsufficientDataError,
    InternalInconsistencyError,
    MisalignedDataError,
    UnhandledUndefinedTypeError,
)
from exifcodec.models import (
    ByteValues,
    DecodedValue,
    LongValues,
    Rational,
    RationalValues,
    ShortValues,
    SignedLongValues,
    SignedRational,
    SignedRationalValues,
    TextValue,
)
from exifcodec.tagtypes import TYPE_LAYOUTS, TagType, name, tag_type_from_id

logger = logging.getLogger(__name__)

LITTLE_ENDIAN = '<'
BIG_ENDIAN = '>'

_BYTE_ORDER_MARKERS = {
    b'II': LITTLE_ENDIAN,
    b'MM': BIG_ENDIAN,
}


def byte_order_from_marker(marker: bytes) -> str:
    """Map the first two bytes of a TIFF header to a byte order."""
    try:
        return _BYTE_ORDER_MARKERS[bytes(marker)]
    except KeyError:
        raise ValueError(f'unknown byte-order marker: {marker!r}') from None


def check_byte_order(byte_order: str) -> None:
    """Raise ValueError unless byte_order is '<' or '>'."""
    if byte_order not in (LITTLE_ENDIAN, BIG_ENDIAN):
        raise ValueError(
            f"byte order must be '{LITTLE_ENDIAN}' or '{BIG_ENDIAN}', "
            f"got {byte_order!r}")


def _take(raw: bytes, unit_count: int, tag_type: TagType) -> bytes:
    """Slice exactly unit_count units off the front of raw."""
    if unit_count < 0:
        raise ValueError(f'unit count can not be negative: {unit_count}')
    required = TYPE_LAYOUTS[tag_type][0] * unit_count
    if len(raw) < required:
        raise InsufficientDataError(len(raw), required, name(tag_type))
    return bytes(raw[:required])


def _unpack(raw: bytes, unit_count: int, tag_type: TagType,
            byte_order: str) -> tuple:
    check_byte_order(byte_order)
    data = _take(raw, unit_count, tag_type)
    fmt_chars = TYPE_LAYOUTS[tag_type][1]
    return struct.unpack(byte_order + fmt_chars * unit_count, data)


def parse_bytes(raw: bytes, unit_count: int) -> ByteValues:
    return ByteValues(_take(raw, unit_count, TagType.BYTE))


def parse_ascii(raw: bytes, unit_count: int) -> TextValue:
    """Decode NUL-terminated text, stripping the one trailing NUL.

    A missing terminator is tolerated: the text comes back unchanged.
    """
    data = _take(raw, unit_count, TagType.ASCII)
    if not data:
        return TextValue('', terminated=False)
    if data[-1] != 0:
        text = data.decode('ascii', errors='replace')
        logger.warning("ascii not terminated with nul as expected: [%s]", text)
        return TextValue(text, terminated=False)
    return TextValue(data[:-1].decode('ascii', errors='replace'))


def parse_ascii_no_nul(raw: bytes, unit_count: int) -> TextValue:
    data = _take(raw, unit_count, TagType.ASCII_NO_NUL)
    return TextValue(data.decode('ascii', errors='replace'),
                     TagType.ASCII_NO_NUL)


def parse_shorts(raw: bytes, unit_count: int, byte_order: str) -> ShortValues:
    return ShortValues(_unpack(raw, unit_count, TagType.SHORT, byte_order))


def parse_longs(raw: bytes, unit_count: int, byte_order: str) -> LongValues:
    return LongValues(_unpack(raw, unit_count, TagType.LONG, byte_order))


def parse_signed_longs(raw: bytes, unit_count: int,
                       byte_order: str) -> SignedLongValues:
    return SignedLongValues(
        _unpack(raw, unit_count, TagType.SLONG, byte_order))


def parse_rationals(raw: bytes, unit_count: int,
                    byte_order: str) -> RationalValues:
    flat = _unpack(raw, unit_count, TagType.RATIONAL, byte_order)
    return RationalValues(
        Rational(flat[i], flat[i + 1]) for i in range(0, len(flat), 2))


def parse_signed_rationals(raw: bytes, unit_count: int,
                           byte_order: str) -> SignedRationalValues:
    flat = _unpack(raw, unit_count, TagType.SRATIONAL, byte_order)
    return SignedRationalValues(
        SignedRational(flat[i], flat[i + 1]) for i in range(0, len(flat), 2))


def decode(raw: bytes, tag_type, byte_order: str) -> DecodedValue:
    """Decode a whole payload. The unit count is derived from its length.

    Raises:
        UnhandledUndefinedTypeError: tag_type is UNDEFINED.
        UnsupportedTypeError: tag_type is not a known type.
        MisalignedDataError: len(raw) is not a multiple of the unit size.
    """
    tag_type = tag_type_from_id(tag_type)
    if tag_type is TagType.UNDEFINED:
        logger.debug("decode: refusing UNDEFINED payload of %d byte(s)", len(raw))
        raise UnhandledUndefinedTypeError(
            'not a standard unknown-typed tag; UNDEFINED payloads need '
            'tag-specific decoding')

    check_byte_order(byte_order)

    unit_size = TYPE_LAYOUTS[tag_type][0]
    if len(raw) % unit_size != 0:
        logger.debug("decode: %d byte(s) misaligned for %s",
                     len(raw), name(tag_type))
        raise MisalignedDataError(len(raw), name(tag_type), unit_size)

    unit_count = len(raw) // unit_size

    if tag_type is TagType.BYTE:
        return parse_bytes(raw, unit_count)
    elif tag_type is TagType.ASCII:
        return parse_ascii(raw, unit_count)
    elif tag_type is TagType.ASCII_NO_NUL:
        return parse_ascii_no_nul(raw, unit_count)
    elif tag_type is TagType.SHORT:
        return parse_shorts(raw, unit_count, byte_order)
    elif tag_type is TagType.LONG:
        return parse_longs(raw, unit_count, byte_order)
    elif tag_type is TagType.SLONG:
        return parse_signed_longs(raw, unit_count, byte_order)
    elif tag_type is TagType.RATIONAL:
        return parse_rationals(raw, unit_count, byte_order)
    elif tag_type is TagType.SRATIONAL:
        return parse_signed_rationals(raw, unit_count, byte_order)

    raise InternalInconsistencyError(
        f'no decoder for type [{name(tag_type)}]; this should not happen')
