import io
import struct
import zipfile

import pytest

from zip_entry_count.constants import EOCD_SIGNATURE


def build_eocd(entries: int = 0, comment: bytes = b"") -> bytes:
    return struct.pack(
        "<4s4H2LH",
        EOCD_SIGNATURE,
        0,              # Number of this disk
        0,              # Disk where central directory starts
        entries,        # Number of central directory records on this disk
        entries,        # Total number of central directory records
        0,              # Size of central directory
        0,              # Offset of start of central directory
        len(comment),   # Comment length
    ) + comment


@pytest.fixture
def eocd_builder():
    return build_eocd


@pytest.fixture
def zip_example():
    """A small archive holding three files, built with the standard library."""

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zip_file:
        zip_file.writestr("quotes/page-1.html", "<html>1</html>")
        zip_file.writestr("quotes/page-2.html", "<html>2</html>")
        zip_file.writestr("robots.txt", "User-agent: *")
    return buffer.getvalue()
