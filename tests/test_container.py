import io
import zipfile

import pytest

from geogebra_tikz import FormatError, decode_container

XML = '<?xml version="1.0" encoding="utf-8"?>\n<geogebra format="5.0"><construction/></geogebra>\n'


def _archive(entries, compression=zipfile.ZIP_STORED, comment=b""):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=compression) as archive:
        for name, payload in entries:
            archive.writestr(name, payload)
        archive.comment = comment
    return buffer.getvalue()


def test_stored_entry_decodes_to_literal_text():
    data = _archive([("geogebra_thumbnail.png", b"\x89PNG..."), ("geogebra.xml", XML)])
    assert decode_container(data) == XML


def test_deflated_entry_is_inflated():
    data = _archive([("geogebra.xml", XML * 20)], compression=zipfile.ZIP_DEFLATED)
    assert decode_container(data) == XML * 20


def test_trailing_comment_is_skipped():
    data = _archive([("geogebra.xml", XML)], comment=b"saved by a test")
    assert decode_container(bytearray(data)) == XML


def test_non_ascii_content_roundtrips():
    xml = '<geogebra><construction><element type="angle" label="α"/></construction></geogebra>'
    data = _archive([("geogebra.xml", xml.encode("utf-8"))], compression=zipfile.ZIP_DEFLATED)
    assert decode_container(data) == xml


def test_unsupported_method_raises():
    data = bytearray(_archive([("geogebra.xml", XML)]))
    central = data.find(b"PK\x01\x02")
    data[central + 10:central + 12] = (12).to_bytes(2, "little")

    with pytest.raises(FormatError, match="unsupported compression method 12"):
        decode_container(bytes(data))


def test_missing_entry_raises():
    data = _archive([("other.xml", XML)])
    with pytest.raises(FormatError, match="no geogebra.xml entry"):
        decode_container(data)


@pytest.mark.parametrize("data", [b"PK", b"plain text that is certainly not an archive"])
def test_non_archive_raises(data):
    with pytest.raises(FormatError, match="not a packaged construction"):
        decode_container(data)


def test_truncated_payload_raises():
    data = bytearray(_archive([("geogebra.xml", XML)]))
    central = data.find(b"PK\x01\x02")
    # Claim a payload far larger than the file.
    data[central + 20:central + 24] = (1 << 20).to_bytes(4, "little")

    with pytest.raises(FormatError, match="truncated"):
        decode_container(bytes(data))
