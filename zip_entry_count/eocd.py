from __future__ import annotations

import struct

from typing_extensions import Any, Optional, Union

from zip_entry_count.constants import (
    EOCD_ENTRY_COUNT_OFFSET,
    EOCD_RECORD_SIZE,
    EOCD_SIGNATURE,
    MAX_COMMENT_LENGTH,
)

ByteView = Union[bytes, bytearray, memoryview]


def as_byte_view(data: Any) -> ByteView:
    """
    Normalize binary data to a flat view with one item per byte.

    `bytes` and `bytearray` are returned untouched. Anything else supporting the buffer
    protocol (`memoryview`, `array.array`, `mmap`, ...) is wrapped in an unsigned byte
    `memoryview`, only copying when the underlying buffer is not contiguous.
    """

    if isinstance(data, (bytes, bytearray)):
        return data

    try:
        view = memoryview(data)
    except TypeError:
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}") from None

    if not view.c_contiguous:
        return memoryview(view.tobytes())

    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")

    return view


def find_eocd(data: ByteView) -> Optional[int]:
    """Find the offset of the End of Central Directory (EOCD) record closest to the end of the data."""

    last_offset = len(data) - EOCD_RECORD_SIZE

    if last_offset < 0:
        return None

    # The EOCD is followed by a comment of at most 0xFFFF bytes
    first_offset = max(0, last_offset - MAX_COMMENT_LENGTH)
    end = last_offset + len(EOCD_SIGNATURE)

    if isinstance(data, memoryview):
        # memoryview has no rfind, only the search window is copied
        eocd_offset = data[first_offset:end].tobytes().rfind(EOCD_SIGNATURE)
        return None if eocd_offset == -1 else first_offset + eocd_offset

    eocd_offset = data.rfind(EOCD_SIGNATURE, first_offset, end)
    return None if eocd_offset == -1 else eocd_offset


def read_entry_count(data: ByteView, eocd_offset: int) -> int:
    """Read the total number of entries on this disk from the EOCD record at `eocd_offset`."""

    return struct.unpack_from("<H", data, eocd_offset + EOCD_ENTRY_COUNT_OFFSET)[0]


def number_of_entries(data: Any) -> Optional[int]:
    """
    Report the number of entries declared by a ZIP archive, or None when no EOCD record is found.

    `data` must hold the entire archive (or at least its last `EOCD_SEARCH_SIZE` bytes). The value
    comes straight from the archive's metadata, which is trivial to spoof, so take it with a pinch
    of salt. ZIP64 archives are not supported: their count field is returned as-is (0xFFFF).
    """

    view = as_byte_view(data)
    eocd_offset = find_eocd(view)

    if eocd_offset is None:
        return None

    return read_entry_count(view, eocd_offset)
