"""Render decoded tag values as human-readable strings.

Used for dumps and log lines, so output is deterministic: byte runs as
space-separated lowercase hex, numbers and rationals as ``[a b c]``, and a
``...`` suffix when only the first of several units is shown.
"""

import json
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from exifcodec.decoder import decode
from exifcodec.errors import (
    InsufficientDataError,
    MisalignedDataError,
    UnsupportedTypeError,
    ValueFormatError,
)
from exifcodec.models import (
    ByteValues,
    LongValues,
    Rational,
    RationalValues,
    ShortValues,
    SignedLongValues,
    SignedRational,
    SignedRationalValues,
    TextValue,
)

TRUNCATION_SUFFIX = '...'
BYTE_SEPARATOR = ' '
LIST_SEPARATOR = ' '
LIST_OPEN = '['
LIST_CLOSE = ']'


@dataclass
class FormatConfig:
    """Display conventions for formatted values."""

    truncation_suffix: str = TRUNCATION_SUFFIX
    byte_separator: str = BYTE_SEPARATOR
    list_separator: str = LIST_SEPARATOR
    list_open: str = LIST_OPEN
    list_close: str = LIST_CLOSE

    @classmethod
    def default(cls) -> 'FormatConfig':
        """Return the built-in conventions."""
        return cls()

    @classmethod
    def from_json(cls, path) -> 'FormatConfig':
        """Load conventions from a JSON file.

        JSON format::

            {
              "truncation_suffix": "...",
              "byte_separator": " ",
              "list_separator": " ",
              "list_open": "[",
              "list_close": "]"
            }

        All keys are optional; omitted keys keep the built-in defaults and
        unknown keys are ignored.
        """
        with open(str(path), 'r') as f:
            data = json.load(f)

        config = cls.default()
        for key in ('truncation_suffix', 'byte_separator', 'list_separator',
                    'list_open', 'list_close'):
            if key in data:
                value = data[key]
                if not isinstance(value, str):
                    raise ValueError(f'{key} must be a string, got {value!r}')
                setattr(config, key, value)
        return config


_DEFAULT_CONFIG = FormatConfig.default()


def _rational_unit(r) -> str:
    return f'{r.numerator}/{r.denominator}'


# Per-unit renderers for every sequence shape, matched with isinstance.
_UNIT_RENDERERS: Tuple[Tuple[type, Callable[[object], str]], ...] = (
    (ShortValues, str),
    (LongValues, str),
    (SignedLongValues, str),
    (RationalValues, _rational_unit),
    (SignedRationalValues, _rational_unit),
)


def dump_bytes_to_string(data: bytes, config: Optional[FormatConfig] = None) -> str:
    """Render bytes as two-digit lowercase hex, e.g. 'de ad be ef'."""
    cfg = config if config is not None else _DEFAULT_CONFIG
    return cfg.byte_separator.join(f'{b:02x}' for b in data)


def dump_bytes_to_clause(data: bytes) -> str:
    """Render bytes as a fully escaped Python bytes literal."""
    return "b'" + ''.join(f'\\x{b:02x}' for b in data) + "'"


def _format_units(units: Sequence, render: Callable[[object], str],
                  just_first: bool, cfg: FormatConfig) -> str:
    if len(units) == 0:
        return ''

    if just_first:
        suffix = cfg.truncation_suffix if len(units) > 1 else ''
        return render(units[0]) + suffix

    parts = cfg.list_separator.join(render(u) for u in units)
    return f'{cfg.list_open}{parts}{cfg.list_close}'


def format_value(value, just_first: bool = False,
                 config: Optional[FormatConfig] = None) -> str:
    """Format an already-decoded value.

    Accepts any decoded shape, plus plain bytes (dumped as hex), str
    (returned as-is) and a single Rational or SignedRational as produced by
    encode_from_string. Anything else raises UnsupportedTypeError.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG

    if isinstance(value, ByteValues):
        return dump_bytes_to_string(value.data, cfg)
    if isinstance(value, (bytes, bytearray)):
        return dump_bytes_to_string(value, cfg)
    if isinstance(value, TextValue):
        return value.text
    if isinstance(value, str):
        return value
    if isinstance(value, (Rational, SignedRational)):
        return _rational_unit(value)

    for shape, render in _UNIT_RENDERERS:
        if isinstance(value, shape):
            return _format_units(value.values, render, just_first, cfg)
    raise UnsupportedTypeError(
        f'type can not be formatted into string: {type(value).__name__}')


def format_bytes(raw: bytes, tag_type, just_first: bool, byte_order: str,
                 config: Optional[FormatConfig] = None) -> str:
    """Decode raw payload bytes and format the result.

    Misaligned or short payloads raise ValueFormatError chained to the
    decode error. UNDEFINED payloads raise UnhandledUndefinedTypeError.
    """
    try:
        value = decode(raw, tag_type, byte_order)
    except (MisalignedDataError, InsufficientDataError) as e:
        raise ValueFormatError(f'can not format payload: {e}') from e
    return format_value(value, just_first, config)
