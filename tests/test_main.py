"""Tests for the command line entry point."""

import pytest
from PIL import Image
from raytracing.main import DEFAULT_QUALITY, QUALITY_LEVELS, build_parser, main, render_size


class TestArguments:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.output == "test_render.png"
        assert (args.width, args.height) == (860, 640)
        assert args.quality == DEFAULT_QUALITY
        assert args.max_bounces is None
        assert args.workers is None
        assert args.background is None
        assert args.show is False

    @pytest.mark.parametrize("quality,size", [("draft", (215, 160)), ("standard", (430, 320)),
                                              ("final", (860, 640))])
    def test_render_size(self, quality, size):
        args = build_parser().parse_args(["--quality", quality])
        assert render_size(args) == size

    def test_render_size_never_zero(self):
        args = build_parser().parse_args(["--width", "2", "--height", "2", "--quality", "draft"])
        assert render_size(args) == (1, 1)

    def test_quality_levels(self):
        assert set(QUALITY_LEVELS) == {"draft", "standard", "final"}
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--quality", "ultra"])


class TestMain:

    def test_renders_test_scene(self, tmp_path):
        output = tmp_path / "frame.jpeg"
        status = main(["-o", str(output), "--width", "16", "--height", "12",
                       "--quality", "draft", "--workers", "1", "--background", "0", "0", "0"])
        assert status == 0
        with Image.open(tmp_path / "frame.png") as img:
            assert img.size == (4, 3)

    def test_reports_failure(self, tmp_path, capsys):
        status = main(["-o", str(tmp_path / "x.png"), "--width", "8", "--height", "8",
                       "--workers", "1", "--background", "300", "0", "0"])
        assert status == 1
        assert "Error during rendering" in capsys.readouterr().out
