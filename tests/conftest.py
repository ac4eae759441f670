"""Shared test fixtures -- synthetic tag payload builders."""

import struct

import pytest

from exifcodec.tagtypes import TYPE_LAYOUTS, TagType


def build_payload(tag_type, values, endian='<'):
    """Pack values into a raw tag payload the way a TIFF writer would.

    Args:
        tag_type: Numeric TagType of the payload.
        values: Flat list of ints. Rationals are passed as
            [num0, den0, num1, den1, ...].
        endian: '<' for little-endian, '>' for big-endian.

    Returns:
        bytes: Raw payload, no padding.
    """
    fmt_chars = TYPE_LAYOUTS[TagType(tag_type)][1]
    per_unit = len(fmt_chars)
    unit_count = len(values) // per_unit
    return struct.pack(endian + fmt_chars * unit_count, *values)


@pytest.fixture(params=['<', '>'], ids=['little', 'big'])
def byte_order(request):
    """Run a test once per byte order."""
    return request.param


@pytest.fixture
def payload():
    """Expose build_payload to tests."""
    return build_payload
