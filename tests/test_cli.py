import PIL.Image
import pytest

import julia_set

SMALL_ARGS = ["--width", "6", "--height", "4", "--iterations", "16"]


def test_writes_image_and_creates_directories(tmp_path, capsys):
    output = tmp_path / "nested" / "deeper" / "julia.png"
    assert julia_set.main([*SMALL_ARGS, "--output", str(output)]) == 0

    with PIL.Image.open(output) as image:
        assert image.size == (6, 4)
        assert image.mode == "RGB"
    assert f"Image saved to: {output}" in capsys.readouterr().out


def test_two_by_two_pixel_values(tmp_path):
    output = tmp_path / "tiny.png"
    args = ["--width", "2", "--height", "2", "-i", "10", "--output", str(output)]
    assert julia_set.main(args) == 0

    with PIL.Image.open(output) as image:
        assert image.getpixel((0, 0)) == (51, 30, 40)


def test_verbose_prints_header(tmp_path, capsys):
    output = tmp_path / "verbose.png"
    assert julia_set.main([*SMALL_ARGS, "--output", str(output), "--verbose", "--workers", "2"]) == 0

    out = capsys.readouterr().out
    assert "Julia Set Generator" in out
    assert "Resolution: 6x4" in out
    assert "Complex constant c: -0.4 + 0.6i" in out
    assert "Max iterations: 16" in out
    assert "Bounds: x[-1.5, 1.5], y[-1.5, 1.5]" in out
    assert f"Image saved successfully to: {output}" in out


def test_unknown_extension_exits_with_one(tmp_path, capsys):
    output = tmp_path / "julia.notaformat"
    assert julia_set.main([*SMALL_ARGS, "--output", str(output)]) == 1
    assert "Error saving image" in capsys.readouterr().err


def test_unwritable_destination_exits_with_one(tmp_path, capsys):
    output = tmp_path / "taken.png"
    output.mkdir()
    assert julia_set.main([*SMALL_ARGS, "--output", str(output)]) == 1
    assert "Error saving image" in capsys.readouterr().err


def test_directory_creation_failure_is_fatal(tmp_path, capsys, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    def fail_render(*args, **kwargs):
        raise AssertionError("rendering must not start")

    monkeypatch.setattr(julia_set, "render_frame", fail_render)
    assert julia_set.main([*SMALL_ARGS, "--output", str(blocker / "sub" / "julia.png")]) == 1
    assert "Failed to create output directory" in capsys.readouterr().err


@pytest.mark.parametrize("args", [
    ["--width", "0"],
    ["--height", "-2"],
    ["--iterations", "0"],
    ["--workers", "0"],
    ["--width", "abc"],
    ["--c-real", "not-a-float"],
])
def test_configuration_errors_exit_before_rendering(args, monkeypatch):
    def fail_render(*a, **kw):
        raise AssertionError("rendering must not start")

    monkeypatch.setattr(julia_set, "render_frame", fail_render)
    with pytest.raises(SystemExit) as excinfo:
        julia_set.main(args)
    assert excinfo.value.code == 2


def test_degenerate_viewport_warns(tmp_path):
    output = tmp_path / "flat.png"
    with pytest.warns(UserWarning, match="Viewport bounds"):
        assert julia_set.main([*SMALL_ARGS, "--x-min", "1", "--x-max", "-1", "--output", str(output)]) == 0
    assert output.exists()


def test_parser_defaults():
    opt = julia_set.build_parser().parse_args([])
    assert (opt.width, opt.height, opt.iterations) == (800, 800, 256)
    assert (opt.c_real, opt.c_imag) == (-0.4, 0.6)
    assert (opt.x_min, opt.x_max, opt.y_min, opt.y_max) == (-1.5, 1.5, -1.5, 1.5)
    assert opt.output == "output/julia_set.png"
    assert opt.verbose is False
    assert opt.workers is None
