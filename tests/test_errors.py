"""Tests for the error hierarchy -- skip-and-report vs. surface-loudly."""

import pytest

from exifcodec import decode, encode_from_string
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


class TestHierarchy:
    @pytest.mark.parametrize('exc_type', [
        InsufficientDataError,
        MisalignedDataError,
        UnhandledUndefinedTypeError,
        UnparsableTextError,
        UnsupportedTypeError,
        ValueEncodeError,
        ValueFormatError,
    ])
    def test_input_errors_derive_from_base(self, exc_type):
        assert issubclass(exc_type, TagValueError)

    def test_undefined_is_unsupported(self):
        assert issubclass(UnhandledUndefinedTypeError, UnsupportedTypeError)

    def test_internal_error_is_distinct(self):
        assert not issubclass(InternalInconsistencyError, TagValueError)
        assert issubclass(InternalInconsistencyError, RuntimeError)
        assert not issubclass(InternalInconsistencyError, UnsupportedTypeError)
        assert not issubclass(InternalInconsistencyError, UnparsableTextError)


class TestSkipAndReport:
    def test_walker_can_skip_bad_tags(self):
        """A directory walker keeps going past tags that fail to decode."""
        payloads = [
            (b'\x00\x01', 3),
            (b'\x00\x01\x02', 3),   # misaligned
            (b'0230', 7),           # UNDEFINED
            (b'Sony\x00', 2),
        ]
        decoded, skipped = [], []
        for raw, type_id in payloads:
            try:
                decoded.append(decode(raw, type_id, '>'))
            except TagValueError as e:
                skipped.append(e)

        assert len(decoded) == 2
        assert isinstance(skipped[0], MisalignedDataError)
        assert isinstance(skipped[1], UnhandledUndefinedTypeError)

    def test_walker_does_not_swallow_internal_errors(self):
        """A programming error escapes the skip-and-report clause."""
        skipped = []
        with pytest.raises(InternalInconsistencyError):
            for type_id, text in [(3, 'x'), (6, '1'), (4, '1')]:
                try:
                    encode_from_string(type_id, text)
                except TagValueError as e:
                    skipped.append(e)

        assert len(skipped) == 1
        assert isinstance(skipped[0], UnparsableTextError)

    def test_messages(self):
        with pytest.raises(MisalignedDataError, match='does not align'):
            decode(b'\x00' * 5, 4, '<')
        with pytest.raises(UnparsableTextError, match='SHORT'):
            encode_from_string(3, 'x')
