import io
import zipfile

import pytest

from geogebra_tikz import FormatError, convert_source
from geogebra_tikz.convert import detect_kind

XML = (
    '<geogebra format="5.0"><construction>'
    '<element type="point" label="P"><show object="true" label="true"/>'
    '<coords x="1.0" y="2.0" z="1.0"/></element>'
    "</construction></geogebra>"
)
MARKUP = "\\begin{tikzpicture}\n\\draw (0,0) -- (1,1);\n\\end{tikzpicture}\n"


def _ggb(xml: str) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("geogebra.xml", xml)
    return buffer.getvalue()


@pytest.mark.parametrize(
    "content, kind",
    [
        (b"PK...", "container"),
        (XML, "construction"),
        (MARKUP, "markup"),
        ("<construction/> without the outer tag", "markup"),
    ],
)
def test_detect_kind(content, kind):
    assert detect_kind(content) == kind


def test_archive_and_xml_give_the_same_fragment():
    assert convert_source(_ggb(XML)) == convert_source(XML)
    assert "\\coordinate (P) at (1,2);" in convert_source(XML)


def test_markup_is_converted():
    assert "\\draw (0,0) -- (1,1);" in convert_source(MARKUP)


def test_text_without_environment_raises():
    with pytest.raises(FormatError, match="no drawing environment found"):
        convert_source("just some words")


def test_non_finite_numbers_drop_only_their_primitive():
    markup = (
        "\\begin{tikzpicture}\n"
        "\\draw [fill=ududff] (NaN,NaN) circle (2.5pt);\n"
        "\\draw (1e400,1) node[anchor=north] {x};\n"
        "\\draw (0,0) -- (1,1);\n"
        "\\end{tikzpicture}\n"
    )

    tikz = convert_source(markup)

    assert "\\draw (0,0) -- (1,1);" in tikz
    assert "NaN" not in tikz
    assert "1e400" not in tikz
