"""Tests for the SVG cropper."""

import pytest
from lxml import etree

from svgcrop.cropper import crop_svg, format_number
from svgcrop.errors import InvalidCropBoxError, MalformedSvgError, UnknownPageSizeError
from svgcrop.geometry import MappedRect, ViewBox

SVG = "{http://www.w3.org/2000/svg}"
XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"


def _parse(svg: str):
    return etree.fromstring(svg.encode("utf-8"))


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [(40.0, "40"), (-10.0, "-10"), (12.5, "12.5"), (-0.0, "0"), (0.1 + 0.2, "0.3"), (1e-9, "0")],
    )
    def test_shortest_form(self, value, expected):
        assert format_number(value) == expected


class TestCropSvg:
    def test_view_box_and_translation(self, page_one):
        out = crop_svg(page_one, MappedRect(10, 10, 50, 60))
        root = _parse(out)
        assert root.tag == f"{SVG}svg"
        assert root.get("viewBox") == "0 0 40 50"
        assert root.get("preserveAspectRatio") == "xMidYMid meet"
        group = root[0]
        assert group.tag == f"{SVG}g"
        assert group.get("transform") == "translate(-10,-10)"

    def test_min_offset_correction(self, page_two):
        out = crop_svg(page_two, MappedRect(10, 10, 50, 60))
        assert 'transform="translate(10,20)"' in out
        assert 'viewBox="0 0 40 50"' in out

    def test_explicit_view_box_wins(self, page_one):
        out = crop_svg(page_one, MappedRect(0, 0, 10, 10), ViewBox(5, 5, 100, 200))
        assert 'transform="translate(-5,-5)"' in out

    def test_inner_content_preserved(self, page_one):
        root = _parse(crop_svg(page_one, MappedRect(10, 10, 50, 60)))
        children = list(root[0])
        assert [etree.QName(c).localname for c in children] == ["rect", "image"]
        assert children[0].get("fill") == "red"
        href = children[1].get("{http://www.w3.org/1999/xlink}href")
        assert href == "data:image/png;base64,iVBORw0KGgo="

    def test_output_has_no_prologue(self, page_one):
        out = crop_svg(page_one, MappedRect(10, 10, 50, 60))
        assert out.startswith("<svg")
        assert "<?xml" not in out

    def test_required_declarations_added(self, page_two):
        out = crop_svg(page_two, MappedRect(0, 0, 10, 10))
        assert 'xmlns="http://www.w3.org/2000/svg"' in out
        assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in out
        assert 'xml:space="preserve"' in out

    def test_xlink_not_duplicated(self, page_one):
        out = crop_svg(page_one, MappedRect(10, 10, 50, 60))
        assert out.count("xmlns:xlink=") == 1
        assert out.count('xmlns="http://www.w3.org/2000/svg"') == 1

    def test_custom_prefixes_kept(self):
        page = (
            '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="urn:custom-xlink" '
            'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" '
            'xml:space="default" viewBox="0 0 10 10"><rect/></svg>'
        )
        out = crop_svg(page, MappedRect(1, 1, 5, 5))
        root = _parse(out)
        assert root.nsmap["xlink"] == "urn:custom-xlink"
        assert root.nsmap["inkscape"] == "http://www.inkscape.org/namespaces/inkscape"
        assert root.get(XML_SPACE) == "default"
        assert out.count("xml:space=") == 1
        assert out.count("xmlns:xlink=") == 1

    def test_other_root_attributes_dropped(self, page_one):
        root = _parse(crop_svg(page_one, MappedRect(10, 10, 50, 60)))
        assert root.get("width") is None
        assert root.get("height") is None

    def test_source_without_namespace(self):
        out = crop_svg('<svg viewBox="0 0 10 10"><rect width="2" height="2"/></svg>', MappedRect(1, 1, 5, 5))
        assert _parse(out).tag == f"{SVG}svg"
        assert 'xmlns="http://www.w3.org/2000/svg"' in out

    def test_fractional_values(self, page_one):
        out = crop_svg(page_one, MappedRect(10.25, 10.5, 50, 60))
        root = _parse(out)
        assert root.get("viewBox") == "0 0 39.75 49.5"
        assert root[0].get("transform") == "translate(-10.25,-10.5)"

    def test_input_string_is_untouched(self, page_one):
        before = str(page_one)
        crop_svg(page_one, MappedRect(10, 10, 50, 60))
        assert page_one == before

    @pytest.mark.parametrize("rect", [MappedRect(50, 10, 50, 60), MappedRect(10, 60, 50, 10)])
    def test_empty_rect_rejected(self, page_one, rect):
        with pytest.raises(InvalidCropBoxError):
            crop_svg(page_one, rect)

    @pytest.mark.parametrize(
        "rect", [MappedRect(10, 10, 10.0000001, 60), MappedRect(10, 10, 50, 10.0000004)]
    )
    def test_sub_precision_rect_rejected(self, page_one, rect):
        with pytest.raises(InvalidCropBoxError, match="too small"):
            crop_svg(page_one, rect)

    @pytest.mark.parametrize("page", ["no svg here", "<div><p/></div>", ""])
    def test_malformed_page(self, page):
        with pytest.raises(MalformedSvgError):
            crop_svg(page, MappedRect(10, 10, 50, 60))

    def test_page_without_view_box(self):
        with pytest.raises(UnknownPageSizeError):
            crop_svg('<svg xmlns="http://www.w3.org/2000/svg"/>', MappedRect(10, 10, 50, 60))
