"""exifcodec -- EXIF/TIFF tag-value types: decode, format and encode."""

__version__ = "1.0.0"

from exifcodec.tagtypes import (
    TYPE_NAMES,
    TagType,
    is_valid,
    is_wire_type,
    name,
    name_by_type,
    size,
    tag_type_from_id,
    type_by_name,
)
from exifcodec.models import (
    DECODED_SHAPES,
    ByteValues,
    DecodedValue,
    EncodedValue,
    LongValues,
    Rational,
    RationalValues,
    ShortValues,
    SignedLongValues,
    SignedRational,
    SignedRationalValues,
    TextValue,
)
from exifcodec.errors import (
    InsufficientDataError,
    InternalInconsistencyError,
    MisalignedDataError,
    TagValueError,
    UnhandledUndefinedTypeError,
    UnparsableTextError,
    UnsupportedTypeError,
    ValueEncodeError,
    ValueFormatError,
)
from exifcodec.decoder import (
    BIG_ENDIAN,
    LITTLE_ENDIAN,
    byte_order_from_marker,
    decode,
)
from exifcodec.formatter import (
    FormatConfig,
    dump_bytes_to_clause,
    dump_bytes_to_string,
    format_bytes,
    format_value,
)
from exifcodec.encoder import encode_from_string, encode_value

__all__ = [
    "__version__",
    "TagType",
    "TYPE_NAMES",
    "size",
    "is_valid",
    "is_wire_type",
    "name",
    "name_by_type",
    "type_by_name",
    "tag_type_from_id",
    "Rational",
    "SignedRational",
    "DecodedValue",
    "DECODED_SHAPES",
    "ByteValues",
    "TextValue",
    "ShortValues",
    "LongValues",
    "SignedLongValues",
    "RationalValues",
    "SignedRationalValues",
    "EncodedValue",
    "TagValueError",
    "MisalignedDataError",
    "InsufficientDataError",
    "UnsupportedTypeError",
    "UnhandledUndefinedTypeError",
    "UnparsableTextError",
    "InternalInconsistencyError",
    "ValueFormatError",
    "ValueEncodeError",
    "LITTLE_ENDIAN",
    "BIG_ENDIAN",
    "byte_order_from_marker",
    "decode",
    "FormatConfig",
    "format_value",
    "format_bytes",
    "dump_bytes_to_string",
    "dump_bytes_to_clause",
    "encode_from_string",
    "encode_value",
]
