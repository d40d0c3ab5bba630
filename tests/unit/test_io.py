"""Unit tests for the input parser and SVG writer."""

import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import patch

import pytest

from runeglyph.config import CanvasConfig, ExportConfig, LineCap, RuneSettings, StyleConfig
from runeglyph.core import GlyphComposer
from runeglyph.exceptions import ExportError, InvalidInputError
from runeglyph.io.parser import clamp_value, parse_value
from runeglyph.io.writer import SVG_MIME_TYPE, SvgWriter, export_filename

SVG_NS = "{http://www.w3.org/2000/svg}"


def _lines(markup: str | bytes) -> list[ET.Element]:
    root = ET.fromstring(markup)
    return root.findall(f"{SVG_NS}line")


class TestParseValue:
    """Tests for parse_value."""

    def test_plain_number(self):
        """Test digits pass through."""
        assert parse_value("1993") == 1993

    def test_surrounding_whitespace(self):
        """Test whitespace is ignored."""
        assert parse_value("  42 ") == 42

    def test_leading_zeros(self):
        """Test zero-prefixed text."""
        assert parse_value("0042") == 42

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_uses_minimum(self, text):
        """Test empty input falls back to 1."""
        assert parse_value(text) == 1

    def test_zero_clamped_up(self):
        """Test zero is clamped to the minimum."""
        assert parse_value("0") == 1

    def test_large_clamped_down(self):
        """Test values above 9999 are clamped."""
        assert parse_value("12345") == 9999
        assert parse_value("99999999999999999999") == 9999

    @pytest.mark.parametrize("text", ["abc", "12a", "-5", "3.5", "1 2", "+7"])
    def test_non_digits_rejected(self, text):
        """Test any non-digit character is rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            parse_value(text)
        assert exc_info.value.text == text

    def test_very_long_input_clamped(self):
        """Test digit strings beyond int conversion limits clamp to 9999."""
        assert parse_value("9" * 5000) == 9999
        assert parse_value("1" + "0" * 10000) == 9999

    def test_long_zero_prefix(self):
        """Test leading zeros do not count towards the length."""
        assert parse_value("0" * 5000 + "42") == 42
        assert parse_value("0" * 5000) == 1

    @pytest.mark.parametrize("text", ["\u0664\u0662", "\uff14\uff12", "4\u0662"])
    def test_non_ascii_digits_rejected(self, text):
        """Test only ASCII 0-9 count as digits."""
        with pytest.raises(InvalidInputError):
            parse_value(text)

    def test_clamp_value(self):
        """Test clamping bounds."""
        assert clamp_value(-10) == 1
        assert clamp_value(1) == 1
        assert clamp_value(500) == 500
        assert clamp_value(9999) == 9999
        assert clamp_value(10000) == 9999


class TestExportFilename:
    """Tests for export file naming."""

    def test_default_template(self):
        """Test rune-<value>.svg naming."""
        assert export_filename(1993) == "rune-1993.svg"
        assert export_filename(7) == "rune-7.svg"

    def test_custom_template(self):
        """Test a custom template."""
        assert export_filename(12, "glyph_{value:04d}.svg") == "glyph_0012.svg"

    def test_mime_type(self):
        """Test the SVG MIME type."""
        assert SVG_MIME_TYPE == "image/svg+xml"


class TestSvgWriter:
    """Tests for SvgWriter class."""

    @pytest.fixture
    def writer(self):
        return SvgWriter()

    @pytest.fixture
    def glyph(self):
        return GlyphComposer().compose(1111)

    def test_document_size(self, writer, glyph):
        """Test width, height and viewBox of the document."""
        root = ET.fromstring(writer.to_string(glyph))
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width") == "140"
        assert root.get("height") == "200"
        assert root.get("viewBox") == "0 0 140 200"

    def test_one_line_per_segment(self, writer, glyph):
        """Test stem plus four digit lines."""
        lines = _lines(writer.to_string(glyph))
        assert len(lines) == 5

    def test_stem_first(self, writer, glyph):
        """Test the stem is the first line."""
        stem = _lines(writer.to_string(glyph))[0]
        coords = [float(stem.get(a)) for a in ("x1", "y1", "x2", "y2")]
        assert coords == [70, 20, 70, 170]

    def test_line_order_matches_glyph(self, writer, glyph):
        """Test lines follow the glyph's draw order."""
        lines = _lines(writer.to_string(glyph))
        expected = [s.to_dict() for s in glyph.all_segments()]
        actual = [
            {a: float(line.get(a)) for a in ("x1", "y1", "x2", "y2")} for line in lines
        ]
        assert actual == expected

    def test_line_style(self, writer, glyph):
        """Test black, width 4, round caps."""
        for line in _lines(writer.to_string(glyph)):
            assert line.get("stroke") == "black"
            assert float(line.get("stroke-width")) == 4
            assert line.get("stroke-linecap") == "round"

    def test_custom_style_and_canvas(self, glyph):
        """Test settings flow into the document."""
        settings = RuneSettings(
            canvas=CanvasConfig().scaled(2),
            style=StyleConfig(stroke="#336699", stroke_width=2.5, linecap=LineCap.SQUARE),
        )
        root = ET.fromstring(SvgWriter(settings).to_string(glyph))
        assert root.get("viewBox") == "0 0 280 400"
        line = root.find(f"{SVG_NS}line")
        assert line.get("stroke") == "#336699"
        assert float(line.get("stroke-width")) == 2.5
        assert line.get("stroke-linecap") == "square"

    def test_default_output_path(self, tmp_path):
        """Test output path uses the configured directory and template."""
        writer = SvgWriter(RuneSettings(export=ExportConfig(output_dir=tmp_path)))
        assert writer.get_output_path(58) == tmp_path / "rune-58.svg"
        assert writer.get_output_path(58, Path("elsewhere")) == Path("elsewhere") / "rune-58.svg"

    def test_save(self, writer, glyph, tmp_path):
        """Test saving writes a parseable SVG file."""
        path = writer.save(glyph, output_dir=tmp_path)
        assert path == tmp_path / "rune-1111.svg"
        assert path.exists()
        assert len(_lines(path.read_bytes())) == 5

    def test_save_explicit_path(self, writer, glyph, tmp_path):
        """Test an explicit path wins and parent folders are created."""
        target = tmp_path / "nested" / "out.svg"
        assert writer.save(glyph, output_path=target) == target
        assert target.exists()

    def test_save_empty_glyph(self, writer, tmp_path):
        """Test out-of-range glyphs are not exported."""
        empty = GlyphComposer().compose(0)
        with pytest.raises(ExportError, match="outside the rune range"):
            writer.save(empty, output_dir=tmp_path)
        assert not (tmp_path / "rune-0.svg").exists()

    def test_save_write_failure(self, writer, glyph, tmp_path):
        """Test OS errors are wrapped in ExportError."""
        with patch("svgwrite.Drawing.saveas", side_effect=PermissionError("denied")):
            with pytest.raises(ExportError) as exc_info:
                writer.save(glyph, output_dir=tmp_path)
        assert exc_info.value.reason == "denied"
        assert exc_info.value.path == str(tmp_path / "rune-1111.svg")
