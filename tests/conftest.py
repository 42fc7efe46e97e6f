"""Shared fixtures for the svg2pdfmin tests."""

import pytest

SVG_NS = "http://www.w3.org/2000/svg"


def svg_source(body, attrs='width="400" height="150"'):
    """An SVG document with the given root attributes and children."""
    return f'<svg xmlns="{SVG_NS}" {attrs}>{body}</svg>'


@pytest.fixture
def write_svg(tmp_path):
    """Factory writing an SVG file into tmp_path and returning its path."""
    def write(body, name="drawing.svg", attrs='width="400" height="150"'):
        path = tmp_path / name
        path.write_text(svg_source(body, attrs), encoding="utf-8")
        return path
    return write
