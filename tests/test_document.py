"""Tests for the document state machine and content building."""

import pytest

from conftest import svg_source
from svg2pdfmin import (
    DOC,
    DecodeError,
    DocumentFinalized,
    NoActivePage,
    attrDict,
    decodeSvg,
    pageHeight,
    pageWidth,
)

RECT = attrDict(x=0.0, y=0.0, width=100.0, height=50.0)
TEXT = attrDict(x=10.0, y=10.0, content="Hi(there)")


def test_states():
    doc = DOC()
    assert doc.state == "Empty"
    doc.addPage()
    assert doc.state == "HasPages"
    doc.finalize()
    assert doc.state == "Finalized"


def test_pages_are_numbered_from_one():
    doc = DOC()
    assert [doc.addPage().number for _ in range(3)] == [1, 2, 3]


@pytest.mark.parametrize(
    "draw, element",
    [
        ("drawRect", RECT),
        ("drawText", TEXT),
        ("drawGradient", attrDict(id="g", stops=[])),
        ("drawPath", attrDict(d="M 0 0")),
    ],
)
def test_drawing_needs_a_page(draw, element):
    doc = DOC()
    with pytest.raises(NoActivePage):
        getattr(doc, draw)(element)
    assert doc.grid.cells == []


def test_no_mutation_after_finalize():
    doc = DOC()
    doc.addPage()
    doc.finalize()

    with pytest.raises(DocumentFinalized):
        doc.addPage()
    with pytest.raises(DocumentFinalized):
        doc.drawRect(RECT)
    with pytest.raises(DocumentFinalized):
        doc.render(decodeSvg(svg_source("")))
    assert len(doc.pages) == 1


def test_rect_is_scaled_and_flipped():
    doc = DOC()
    doc.setScale(400, 150)
    page = doc.addPage()
    doc.drawRect(RECT)

    assert page.lines == [
        "0 842 m",
        "148.75 842 l",
        "148.75 561.33 l",
        "0 561.33 l",
        "h",
        "0 0 0 RG",
        "S",
    ]


def test_rect_stroke_attribute_is_not_consulted():
    doc = DOC()
    page = doc.addPage()
    doc.drawRect(attrDict(RECT, stroke="red"))

    assert "0 0 0 RG" in page.lines


def test_text_is_mapped_then_rotated():
    doc = DOC(fontSize=9)
    doc.setScale(pageWidth, pageHeight)
    page = doc.addPage()
    doc.drawText(attrDict(x=100.0, y=42.0, content="Hi(there)"))

    # (100, 42) -> (100, 800) -> rotate -> (800, 495)
    assert page.lines == ["BT", "/F1 9 Tf", "800 495 Td", "(Hi\\(there\\)) Tj", "ET"]


def test_text_outside_latin1_is_replaced():
    doc = DOC()
    page = doc.addPage()
    doc.drawText(attrDict(x=0.0, y=0.0, content="5 €"))

    assert "(5 ?) Tj" in page.lines


def test_path_draws_nothing():
    doc = DOC()
    page = doc.addPage()
    doc.drawPath(attrDict(d="M 0 0 L 10 10"))

    assert page.lines == []


def test_render_orders_gradients_rects_texts():
    svg = decodeSvg(svg_source(
        '<text x="1" y="1">t</text>'
        '<path d="M 0 0"/>'
        '<rect x="1" y="1" width="1" height="1"/>'
        '<linearGradient id="g"><stop offset="0" stop-color="red"/></linearGradient>'
    ))
    doc = DOC()
    page = doc.render(svg)

    assert page.lines[:3] == ["100 100 200 50 re", "0 0 1 RG", "S"]
    assert page.lines[3].endswith(" m")
    assert page.lines[-5:][0] == "BT"
    assert len(page.lines) == 3 + 7 + 5


def test_render_sets_scale_from_declared_dimensions():
    doc = DOC()
    doc.render(decodeSvg(svg_source("", attrs='width="200" height="100"')))

    assert doc.scaleX == pageWidth / 200
    assert doc.scaleY == pageHeight / 100


def test_render_without_dimensions_uses_defaults():
    doc = DOC()
    doc.render(decodeSvg(svg_source("", attrs="")))

    assert doc.scaleX == pageWidth / 400
    assert doc.scaleY == pageHeight / 150


def test_each_render_adds_a_page():
    doc = DOC()
    doc.render(decodeSvg(svg_source('<rect x="0" y="0" width="1" height="1"/>')))
    doc.render(decodeSvg(svg_source('<text x="0" y="0">b</text>')))

    assert len(doc.pages) == 2
    assert doc.pages[0].lines[-1] == "S"
    assert doc.pages[1].lines[-1] == "ET"


def test_debug_comments():
    doc = DOC(debug=True)
    page = doc.addPage()
    doc.drawRect(RECT)
    doc.drawGradient(attrDict(id="g", stops=[]))

    assert page.lines[0] == "% rect"
    assert page.lines[8] == "% linearGradient id=g"


def test_convert_reads_file(write_svg):
    doc = DOC()
    page = doc.convert(write_svg('<rect x="0" y="0" width="100" height="50"/>'))

    assert page.lines[0] == "0 842 m"


def test_page_stream_is_newline_joined():
    doc = DOC()
    page = doc.addPage()
    doc.drawGradient(attrDict(id="g", stops=[]))

    assert page.stream() == "100 100 200 50 re\n0 0 1 RG\nS"


def test_finalize_twice():
    doc = DOC()
    doc.addPage()
    doc.finalize()
    doc.finalize()
    assert doc.state == "Finalized"


@pytest.mark.parametrize(
    "body",
    [
        '<rect x="1e308" y="0" width="1" height="1"/>',
        '<rect x="0" y="0" width="1e308" height="1"/>',
        '<text x="0" y="1e308">far</text>',
    ],
)
def test_coordinates_overflowing_the_page_are_decode_errors(body):
    doc = DOC()
    with pytest.raises(DecodeError, match="finite page coordinates"):
        doc.render(decodeSvg(svg_source(body)))
    assert doc.grid.cells == []


def test_tiny_declared_width_uses_default_scale():
    doc = DOC()
    page = doc.render(decodeSvg(svg_source('<rect x="0" y="0" width="100" height="50"/>',
                                           attrs='width="1e-320" height="150"')))

    assert doc.scaleX == pageWidth / 400
    assert page.lines[1] == "148.75 842 l"


def test_debug_comment_for_gradient_without_id():
    doc = DOC(debug=True)
    page = doc.addPage()
    doc.drawGradient(attrDict(stops=[]))

    assert page.lines[0] == "% linearGradient"
