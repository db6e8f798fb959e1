"""Tests for the gvsvg command line."""

import gzip
import json

import pytest

from conftest import GRAPHVIZ_AVAILABLE
from gvsvg.cli import main


@pytest.fixture
def layout_file(tmp_path, simple_layout_dict):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(simple_layout_dict), encoding="utf-8")
    return path


class TestCli:

    def test_json_to_svg(self, layout_file, tmp_path, capsys):
        output = tmp_path / "out.svg"
        assert main([str(layout_file), "--json", "-o", str(output)]) == 0

        svg = output.read_text(encoding="utf-8")
        assert svg.startswith("<?xml")
        assert '<g id="node1" class="node">' in svg
        assert capsys.readouterr().out.strip() == str(output)

    def test_default_output_path(self, layout_file, capsys):
        assert main([str(layout_file), "--json"]) == 0

        expected = layout_file.with_suffix(".svg")
        assert expected.exists()
        assert capsys.readouterr().out.strip() == str(expected)

    def test_svgz(self, layout_file, tmp_path):
        output = tmp_path / "out.svgz"
        assert main([str(layout_file), "--json", "-T", "svgz", "-o", str(output)]) == 0

        svg = gzip.decompress(output.read_bytes()).decode("utf-8")
        assert svg.endswith("</svg>\n")

    def test_stdout(self, layout_file, capsys):
        assert main([str(layout_file), "--json", "-o", "-"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("<?xml")
        assert out.endswith("</svg>\n")

    def test_fontnames_and_scale(self, layout_file, capsys):
        assert main([str(layout_file), "--json", "-o", "-", "--fontnames", "svg", "-s", "2"]) == 0

        out = capsys.readouterr().out
        assert 'font-family="serif"' in out
        assert '<svg width="124pt" height="232pt"' in out

    def test_verbose(self, layout_file, tmp_path, capsys):
        output = tmp_path / "out.svg"
        assert main([str(layout_file), "--json", "-o", str(output), "-v"]) == 0

        assert f"Rendered 'G' -> {output}" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.dot")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_directory_input(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == 1
        assert "Not a file" in capsys.readouterr().err

    def test_bad_scale(self, layout_file, capsys):
        assert main([str(layout_file), "--json", "-s", "0"]) == 1
        assert "Scale must be positive" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{broken", encoding="utf-8")

        assert main([str(path), "--json"]) == 1
        assert "Error loading file" in capsys.readouterr().err

    @pytest.mark.skipif(not GRAPHVIZ_AVAILABLE, reason="Graphviz executable not found - install with: brew install graphviz")
    def test_dot_input(self, tmp_path):
        path = tmp_path / "graph.dot"
        path.write_text("digraph G { a -> b }", encoding="utf-8")

        assert main([str(path)]) == 0
        svg = path.with_suffix(".svg").read_text(encoding="utf-8")
        assert "<title>a-&gt;b</title>" in svg
