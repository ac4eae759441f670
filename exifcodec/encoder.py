"""Write path: parse user text into typed units and pack values into bytes."""

import logging
import re
import struct

from exifcodec.decoder import check_byte_order
from exifcodec.errors import (
    InternalInconsistencyError,
    UnparsableTextError,
    UnsupportedTypeError,
    ValueEncodeError,
)
from exifcodec.models import (
    ByteValues,
    DecodedValue,
    EncodedValue,
    Rational,
    SignedRational,
    TextValue,
)
from exifcodec.tagtypes import TYPE_LAYOUTS, TagType, name

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'[0-9A-Fa-f]+')
_UNSIGNED_RE = re.compile(r'[0-9]+')
_SIGNED_RE = re.compile(r'[+-]?[0-9]+')

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF
_INT32_MIN = -0x80000000
_INT32_MAX = 0x7FFFFFFF


def _parse_int(text: str, tag_type: TagType, pattern, base: int,
               lo: int, hi: int) -> int:
    if not pattern.fullmatch(text):
        raise UnparsableTextError(name(tag_type), text, 'not a number')
    n = int(text, base)
    if not lo <= n <= hi:
        raise UnparsableTextError(name(tag_type), text,
                                  f'out of range [{lo}, {hi}]')
    return n


def _split_fraction(text: str, tag_type: TagType):
    parts = text.split('/', 1)
    if len(parts) != 2:
        raise UnparsableTextError(name(tag_type), text,
                                  "expected 'numerator/denominator'")
    return parts


def encode_from_string(tag_type, text: str):
    """Convert one unit of user-supplied text to its typed value.

    Returns an int for BYTE, SHORT, LONG and SLONG, a str for ASCII types,
    and a Rational or SignedRational for the fraction types. Splitting a
    multi-unit string is the caller's job.
    """
    if tag_type == TagType.UNDEFINED:
        raise UnsupportedTypeError(
            'undefined-type values are not supported; use tag-specific logic')

    if tag_type == TagType.BYTE:
        return _parse_int(text, TagType.BYTE, _HEX_RE, 16, 0, _UINT8_MAX)
    elif tag_type in (TagType.ASCII, TagType.ASCII_NO_NUL):
        # The NUL terminator is only added when the value is packed.
        return text
    elif tag_type == TagType.SHORT:
        return _parse_int(text, TagType.SHORT, _UNSIGNED_RE, 10, 0, _UINT16_MAX)
    elif tag_type == TagType.LONG:
        return _parse_int(text, TagType.LONG, _UNSIGNED_RE, 10, 0, _UINT32_MAX)
    elif tag_type == TagType.SLONG:
        return _parse_int(text, TagType.SLONG, _SIGNED_RE, 10,
                          _INT32_MIN, _INT32_MAX)
    elif tag_type == TagType.RATIONAL:
        num, den = _split_fraction(text, TagType.RATIONAL)
        return Rational(
            _parse_int(num, TagType.RATIONAL, _UNSIGNED_RE, 10, 0, _UINT32_MAX),
            _parse_int(den, TagType.RATIONAL, _UNSIGNED_RE, 10, 0, _UINT32_MAX),
        )
    elif tag_type == TagType.SRATIONAL:
        num, den = _split_fraction(text, TagType.SRATIONAL)
        return SignedRational(
            _parse_int(num, TagType.SRATIONAL, _SIGNED_RE, 10,
                       _INT32_MIN, _INT32_MAX),
            _parse_int(den, TagType.SRATIONAL, _SIGNED_RE, 10,
                       _INT32_MIN, _INT32_MAX),
        )

    logger.debug("encode_from_string: unknown type %r", tag_type)
    raise InternalInconsistencyError(
        f'from-string encoding for type not supported; this should not '
        f'happen: [{tag_type!r}]')


def _flatten(value: DecodedValue) -> list:
    if value.tag_type in (TagType.RATIONAL, TagType.SRATIONAL):
        flat = []
        for r in value.values:
            flat.extend((r.numerator, r.denominator))
        return flat
    return list(value.values)


def encode_value(value: DecodedValue, byte_order: str) -> EncodedValue:
    """Pack a decoded value back into payload bytes.

    ASCII text gets its NUL terminator here; ASCII_NO_NUL text does not.
    """
    check_byte_order(byte_order)

    if isinstance(value, ByteValues):
        return EncodedValue(TagType.BYTE, value.data, len(value.data))

    if isinstance(value, TextValue):
        if value.tag_type not in (TagType.ASCII, TagType.ASCII_NO_NUL):
            raise UnsupportedTypeError(
                f'text can not be encoded as [{name(value.tag_type)}]')
        try:
            data = value.text.encode('ascii')
        except UnicodeEncodeError as e:
            raise ValueEncodeError(
                f'text is not ascii: {value.text!r}') from e
        if value.tag_type == TagType.ASCII:
            data += b'\x00'
        return EncodedValue(value.tag_type, data, len(data))

    tag_type = getattr(value, 'tag_type', None)
    if not isinstance(value, DecodedValue) or tag_type not in TYPE_LAYOUTS:
        raise UnsupportedTypeError(
            f'type can not be encoded: {type(value).__name__}')

    unit_count = len(value.values)
    fmt = byte_order + TYPE_LAYOUTS[tag_type][1] * unit_count
    try:
        data = struct.pack(fmt, *_flatten(value))
    except struct.error as e:
        logger.debug("encode_value: %s value out of range: %r",
                     name(tag_type), value.values)
        raise ValueEncodeError(
            f'value can not be packed as [{name(tag_type)}]: {e}') from e
    return EncodedValue(tag_type, data, unit_count)
