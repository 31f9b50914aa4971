import sys
import warnings
from argparse import ArgumentParser
from pathlib import Path

# Imports for encoding and progress display
import PIL.Image
from tqdm import tqdm

from julia import RenderParameters, Viewport, render_frame

VERBOSE = False


def log(message="", *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


def build_parser():
    parser = ArgumentParser(prog="julia-set", description="A Julia set fractal generator")

    parser.add_argument('--width', type=int,
                        dest='width', help='width of the output image in pixels',
                        metavar='WIDTH', default=800)

    parser.add_argument('--height', type=int,
                        dest='height', help='height of the output image in pixels',
                        metavar='HEIGHT', default=800)

    parser.add_argument('-i', '--iterations', type=int,
                        dest='iterations', help='maximum number of iterations per pixel',
                        metavar='ITERATIONS', default=256)

    parser.add_argument('--c-real', type=float,
                        dest='c_real', help='real part of the complex constant c',
                        metavar='C_REAL', default=-0.4)

    parser.add_argument('--c-imag', type=float,
                        dest='c_imag', help='imaginary part of the complex constant c',
                        metavar='C_IMAG', default=0.6)

    parser.add_argument('--x-min', type=float,
                        dest='x_min', help='minimum x coordinate of the viewport',
                        metavar='X_MIN', default=-1.5)

    parser.add_argument('--x-max', type=float,
                        dest='x_max', help='maximum x coordinate of the viewport',
                        metavar='X_MAX', default=1.5)

    parser.add_argument('--y-min', type=float,
                        dest='y_min', help='minimum y coordinate of the viewport',
                        metavar='Y_MIN', default=-1.5)

    parser.add_argument('--y-max', type=float,
                        dest='y_max', help='maximum y coordinate of the viewport',
                        metavar='Y_MAX', default=1.5)

    parser.add_argument('-o', '--output', type=str,
                        dest='output', help='output file path. The image format follows the extension.',
                        metavar='OUTPUT', default='output/julia_set.png')

    parser.add_argument('--workers', type=int, default=None,
                        help='number of worker threads computing rows. Defaults to the thread pool default.')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose output, including a progress bar.')

    return parser


def params_from_options(opt, parser: ArgumentParser) -> RenderParameters:
    if opt.workers is not None and opt.workers < 1:
        parser.error("--workers must be at least 1.")

    viewport = Viewport(x_min=opt.x_min, x_max=opt.x_max, y_min=opt.y_min, y_max=opt.y_max)
    try:
        return RenderParameters(
            width=opt.width,
            height=opt.height,
            max_iterations=opt.iterations,
            c=complex(opt.c_real, opt.c_imag),
            viewport=viewport,
        )
    except ValueError as exc:
        parser.error(str(exc))


def ensure_output_dir(output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)


def write_image(pixels, output_path: Path) -> None:
    """Encode ``pixels`` as an RGB image at ``output_path``."""

    image = PIL.Image.fromarray(pixels)
    image.save(str(output_path))


class RowProgressBar:
    """Progress callback that advances a tqdm bar to the completed row count."""

    def __init__(self, total_rows: int):
        self._bar = tqdm(total=total_rows, unit="rows",
                         bar_format='{l_bar}{bar:40}| {n_fmt}/{total_fmt} rows [{elapsed}<{remaining}]')

    def __call__(self, completed: int) -> None:
        if completed > self._bar.n:
            self._bar.update(completed - self._bar.n)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._bar.close()
        return False


def print_header(params: RenderParameters, output: str) -> None:
    viewport = params.viewport
    log("Julia Set Generator")
    log("==================")
    log(f"Resolution: {params.width}x{params.height}")
    log(f"Complex constant c: {params.c.real} + {params.c.imag}i")
    log(f"Max iterations: {params.max_iterations}")
    log(f"Bounds: x[{viewport.x_min}, {viewport.x_max}], y[{viewport.y_min}, {viewport.y_max}]")
    log(f"Output: {output}")
    log()


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    params = params_from_options(opt, parser)
    if params.viewport.is_degenerate():
        warnings.warn(
            "Viewport bounds are empty or inverted (x_min >= x_max or y_min >= y_max); "
            "the rendered image will not be meaningful.",
            UserWarning,
            stacklevel=2,
        )

    print_header(params, opt.output)

    output_path = Path(opt.output).expanduser()
    try:
        ensure_output_dir(output_path)
    except OSError as exc:
        print(f"✗ Failed to create output directory: {exc}", file=sys.stderr)
        return 1

    if VERBOSE:
        with RowProgressBar(params.height) as progress:
            result = render_frame(params, workers=opt.workers, progress=progress)
        log("Calculation complete")
    else:
        result = render_frame(params, workers=opt.workers)

    try:
        write_image(result.pixels, output_path)
    except (OSError, ValueError) as exc:
        print(f"✗ Error saving image: {exc}", file=sys.stderr)
        return 1

    if VERBOSE:
        print(f"✓ Image saved successfully to: {opt.output}")
    else:
        print(f"Image saved to: {opt.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
