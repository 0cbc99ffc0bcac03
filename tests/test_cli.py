"""Tests for svg2css.cli module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg2css import __version__
from svg2css.cli import main

SVG_NS = "http://www.w3.org/2000/svg"


@pytest.fixture
def source_dir(tmp_path) -> Path:
    """Create a source directory with one icon."""
    source = tmp_path / "icons"
    source.mkdir()
    (source / "icon.svg").write_text(
        f'<svg xmlns="{SVG_NS}" width="10" height="10"></svg>'
    )
    return source


class TestArguments:
    """Tests for argument handling."""

    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "usage: svg2css" in capsys.readouterr().out

    def test_missing_target(self, source_dir, capsys):
        assert main([str(source_dir)]) == 1
        assert "usage: svg2css" in capsys.readouterr().out

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "Svg2Css Utility" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestConversion:
    """Tests for end-to-end conversion runs."""

    def test_basic_run(self, source_dir, tmp_path, capsys):
        output_file = tmp_path / "out.css"
        assert main([str(source_dir), str(output_file)]) == 0

        output = output_file.read_text(encoding="utf-8")
        assert output.startswith(".icon {\n")
        assert "$icon-width" not in output

        out = capsys.readouterr().out
        assert f"Processing: {source_dir / 'icon.svg'}" in out
        assert f"Writing file {output_file}" in out
        assert "Files converted: 1" in out

    def test_prefix_and_dimensions(self, source_dir, tmp_path):
        output_file = tmp_path / "out.scss"
        exit_code = main(
            [str(source_dir), str(output_file), "--prefix", "ic-", "--write-dimensions"]
        )
        assert exit_code == 0

        lines = output_file.read_text(encoding="utf-8").split("\n")
        assert lines[0] == "$ic-icon-width: 10;"
        assert lines[1] == "$ic-icon-height: 10;"
        assert lines[2] == ".ic-icon {"

    def test_dimensions_without_namespace(self, tmp_path):
        source = tmp_path / "plain"
        source.mkdir()
        (source / "icon.svg").write_text('<svg width="10" height="10"></svg>')
        output_file = tmp_path / "out.scss"

        exit_code = main(
            [str(source), str(output_file), "--prefix", "ic-", "--write-dimensions"]
        )
        assert exit_code == 0

        output = output_file.read_text(encoding="utf-8")
        assert "$ic-icon-width: 10;\n" in output
        assert "$ic-icon-height: 10;\n" in output
        assert ".ic-icon {\n    background-image: url(data:image/svg+xml;base64," in output

    def test_invalid_utf8_input(self, tmp_path):
        source = tmp_path / "binary"
        source.mkdir()
        (source / "broken.svg").write_bytes(b"<svg>\xff\xfe</svg>")
        output_file = tmp_path / "out.css"

        assert main([str(source), str(output_file)]) == 0
        assert output_file.read_text(encoding="utf-8").startswith(".broken {")

    def test_empty_directory(self, tmp_path, capsys):
        source = tmp_path / "empty"
        source.mkdir()
        output_file = tmp_path / "out.css"

        assert main([str(source), str(output_file)]) == 0
        assert output_file.read_text() == ""
        assert "No input files found!" in capsys.readouterr().err

    def test_missing_source_directory(self, tmp_path, capsys):
        output_file = tmp_path / "out.css"
        assert main([str(tmp_path / "missing"), str(output_file)]) == 1
        assert not output_file.exists()
        assert capsys.readouterr().err.startswith("Error: ")


class TestConfigFile:
    """Tests for the --config option."""

    def test_config_options(self, source_dir, tmp_path):
        config_file = tmp_path / "svg2css.yaml"
        config_file.write_text("prefix: cfg-\nwrite_dimensions: true\n")
        output_file = tmp_path / "out.scss"

        assert main([str(source_dir), str(output_file), "-c", str(config_file)]) == 0
        output = output_file.read_text(encoding="utf-8")
        assert output.startswith("$cfg-icon-width: 10;\n")

    def test_flags_override_config(self, source_dir, tmp_path):
        config_file = tmp_path / "svg2css.yaml"
        config_file.write_text("prefix: cfg-\n")
        output_file = tmp_path / "out.css"

        exit_code = main(
            [str(source_dir), str(output_file), "-c", str(config_file), "-p", "cli-"]
        )
        assert exit_code == 0
        assert output_file.read_text(encoding="utf-8").startswith(".cli-icon {")

    def test_config_not_found(self, source_dir, tmp_path, capsys):
        output_file = tmp_path / "out.css"
        exit_code = main(
            [str(source_dir), str(output_file), "-c", str(tmp_path / "missing.yaml")]
        )
        assert exit_code == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_config(self, source_dir, tmp_path, capsys):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("colour: red\n")
        output_file = tmp_path / "out.css"

        exit_code = main([str(source_dir), str(output_file), "-c", str(config_file)])
        assert exit_code == 2
        assert not output_file.exists()
        assert "Failed to parse config file" in capsys.readouterr().err
