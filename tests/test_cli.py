"""
Tests for the command-line interface.
"""

import os
import sys

import pytest
from PIL import Image

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import main
from cloud_filler import FontManager
from geometry import Point

FONT_AVAILABLE = FontManager().is_available()


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(
        "cloud cloud cloud tag tag words words words words layout spiral",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def any_font(monkeypatch):
    """Let config validation pass the font check without a font installed."""
    monkeypatch.setattr(FontManager, "is_available", lambda self: True)


def save_args(input_path, *extra):
    _, args = main.parse_arguments(["save", input_path, *extra])
    return args


@pytest.mark.cli
class TestBuildConfig:
    """Test validation of `save` arguments."""

    def test_valid_arguments(self, any_font, input_file, tmp_path):
        result = main.build_config(
            save_args(input_file, "--out-path", str(tmp_path), "--canvas-size", "800", "600")
        )

        assert result.is_success
        config = result.value
        assert config.center == Point(400, 300)
        assert config.count == 70
        assert config.input_type is None
        assert config.out_path == str(tmp_path)
        assert config.page_range is None

    def test_pdf_pages_become_zero_based_range(self, any_font, input_file):
        """Test that 1-based inclusive pages map to a 0-based half-open range."""
        result = main.build_config(save_args(input_file, "--pdf-pages", "2", "3"))
        assert result.value.page_range == (1, 3)

    def test_run_save_passes_page_range(self, any_font, input_file, monkeypatch):
        """Test that the page selection reaches text extraction."""
        seen = {}

        def fake_analyze(self, source, input_type=None, limit=None, **kwargs):
            seen.update(kwargs)
            raise ValueError("stop here")

        monkeypatch.setattr(main.WordCounter, "analyze", fake_analyze)
        config = main.build_config(save_args(input_file, "--pdf-pages", "4", "4")).value

        result = main.run_save(config)

        assert not result.is_success
        assert "stop here" in result.error_message
        assert seen == {"page_range": (3, 4)}

    @pytest.mark.parametrize(
        "extra, message",
        [
            (["-c", "-1"], "Invalid count of rectangles."),
            (["--font-size", "0"], "Invalid font size"),
            (["--img-ext", "nope"], "Invalid image format."),
            (["--out-path", "/nonexistent/output/dir"], "Invalid output path."),
            (["--color", "blurple"], "Invalid color: blurple"),
            (["--back-color", "nothing"], "Invalid color: nothing"),
            (["--canvas-size", "0", "10"], "Invalid canvas size."),
            (["--step", "0"], "Invalid spiral step."),
            (["--max-candidates", "0"], "Invalid maximum of candidates."),
            (["--pdf-pages", "0", "3"], "Invalid page range."),
            (["--pdf-pages", "5", "2"], "Invalid page range."),
        ],
    )
    def test_invalid_arguments(self, any_font, input_file, extra, message):
        result = main.build_config(save_args(input_file, *extra))
        assert not result.is_success
        assert result.error == message

    def test_missing_input_file(self, any_font, tmp_path):
        result = main.build_config(save_args(str(tmp_path / "missing.txt")))
        assert result.error == "Input file does not exist."

    def test_unknown_font(self, input_file):
        result = main.build_config(save_args(input_file, "--font-name", "no-such-font.ttf"))
        assert result.error == "Can not parse font name."


@pytest.mark.cli
class TestMain:
    """Test the main entry point and exit codes."""

    def test_no_command_prints_help(self, capsys):
        assert main.main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_exclude_words(self, tmp_path):
        path = tmp_path / "excluded.txt"

        code = main.main(["--excluded-words", str(path), "exclude", "Foo", "bar"])

        assert code == 0
        assert path.read_text(encoding="utf-8") == "bar\nfoo\n"

    def test_exclude_invalid_word(self, tmp_path, capsys):
        path = tmp_path / "excluded.txt"
        code = main.main(["--excluded-words", str(path), "exclude", "r2d2"])
        assert code == 1
        assert "Can't exclude words" in capsys.readouterr().err
        assert not path.exists()

    def test_save_with_invalid_config(self, any_font, tmp_path, capsys):
        code = main.main(["-q", "save", str(tmp_path / "missing.txt")])
        assert code == 1
        assert "Error: Input file does not exist." in capsys.readouterr().err

    @pytest.mark.integration
    @pytest.mark.skipif(not FONT_AVAILABLE, reason="Default font is not installed")
    def test_save_end_to_end(self, input_file, tmp_path):
        excluded = tmp_path / "excluded.txt"
        code = main.main(
            [
                "-q",
                "--excluded-words",
                str(excluded),
                "save",
                input_file,
                "--out-path",
                str(tmp_path),
                "--name",
                "result",
                "--rectangles",
            ]
        )

        assert code == 0
        with Image.open(tmp_path / "result.png") as image:
            assert image.size == (1000, 1000)
        assert (tmp_path / "result-rectangles.png").exists()

    @pytest.mark.integration
    @pytest.mark.skipif(not FONT_AVAILABLE, reason="Default font is not installed")
    def test_save_too_small_canvas(self, input_file, tmp_path, capsys):
        code = main.main(
            [
                "-q",
                "--excluded-words",
                str(tmp_path / "excluded.txt"),
                "save",
                input_file,
                "--out-path",
                str(tmp_path),
                "--canvas-size",
                "40",
                "40",
            ]
        )

        assert code == 1
        assert "Too small image size" in capsys.readouterr().err
