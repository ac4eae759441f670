"""Data models for decoded and encoded tag values."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from exifcodec.tagtypes import TagType


@dataclass(frozen=True)
class Rational:
    """Unsigned fraction stored as two 32-bit integers."""
    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f'{self.numerator}/{self.denominator}'


@dataclass(frozen=True)
class SignedRational:
    """Signed fraction stored as two signed 32-bit integers."""
    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f'{self.numerator}/{self.denominator}'


class DecodedValue(ABC):
    """Base class of the closed set of decoded value shapes."""

    tag_type: TagType

    @property
    @abstractmethod
    def unit_count(self) -> int:
        """Number of units the value occupies on the wire."""
        ...


@dataclass(frozen=True)
class ByteValues(DecodedValue):
    """A run of raw BYTE units."""
    data: bytes

    tag_type = TagType.BYTE

    def __post_init__(self):
        object.__setattr__(self, 'data', bytes(self.data))

    @property
    def unit_count(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class TextValue(DecodedValue):
    """ASCII text with any wire terminator already removed.

    ``terminated`` records whether an ASCII payload carried its NUL; it is
    False for tolerated unterminated or empty payloads.
    """
    text: str
    tag_type: TagType = TagType.ASCII
    terminated: bool = True

    @property
    def unit_count(self) -> int:
        extra = 1 if self.tag_type == TagType.ASCII and self.terminated else 0
        return len(self.text) + extra


@dataclass(frozen=True)
class _SequenceValue(DecodedValue):
    values: Tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'values', tuple(self.values))

    @property
    def unit_count(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator:
        return iter(self.values)

    def __getitem__(self, index):
        return self.values[index]


@dataclass(frozen=True)
class ShortValues(_SequenceValue):
    """Unsigned 16-bit integers."""
    tag_type = TagType.SHORT


@dataclass(frozen=True)
class LongValues(_SequenceValue):
    """Unsigned 32-bit integers."""
    tag_type = TagType.LONG


@dataclass(frozen=True)
class SignedLongValues(_SequenceValue):
    """Signed 32-bit integers."""
    tag_type = TagType.SLONG


@dataclass(frozen=True)
class RationalValues(_SequenceValue):
    """Sequence of Rational."""
    tag_type = TagType.RATIONAL


@dataclass(frozen=True)
class SignedRationalValues(_SequenceValue):
    """Sequence of SignedRational."""
    tag_type = TagType.SRATIONAL


# Every shape the decoder can produce.
DECODED_SHAPES = (
    ByteValues,
    TextValue,
    ShortValues,
    LongValues,
    SignedLongValues,
    RationalValues,
    SignedRationalValues,
)


@dataclass(frozen=True)
class EncodedValue:
    """Payload bytes ready to be stored in (or pointed to by) an IFD entry."""
    tag_type: TagType
    data: bytes
    unit_count: int

    @property
    def total_size(self) -> int:
        return len(self.data)
