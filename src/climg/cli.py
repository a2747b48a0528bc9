import argparse
import re
import sys

from climg.converter import ImageDecodeError, image_to_blocks, load_pixels
from climg.terminal import get_terminal_size
from climg.tonemap import DEFAULT_EXPOSURE, InvalidExposure, validate_exposure

# Leading numeric literal, read the way strtof reads it (trailing junk ignored)
_HEX_PREFIX = re.compile(r"\s*[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

EXPOSURE_HINT = 'Exposure must be float > 0 (e.g. "1.2", "4", default is 3)'


def parse_exposure(text: str | None) -> float:
    """Parse the optional exposure argument, falling back to the default with a notice on stdout."""
    if text is None:
        return DEFAULT_EXPOSURE
    try:
        if match := _HEX_PREFIX.match(text):
            value = float.fromhex(match.group())
        elif match := _FLOAT_PREFIX.match(text):
            value = float(match.group())
        else:
            raise InvalidExposure(f"Not a number: {text!r}")
        return validate_exposure(value)
    except (InvalidExposure, OverflowError):
        print(EXPOSURE_HINT)
        return DEFAULT_EXPOSURE


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="climg", description="Preview an image as shade blocks in the terminal")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "exposure",
        nargs="?",
        default=None,
        help=f"Brightness multiplier, a float > 0 (default: {DEFAULT_EXPOSURE:g})",
    )
    # Exposure values that look like options ("-abc", "-1e3") land in the leftovers
    args, extra = parser.parse_known_args(argv)
    if extra:
        if args.exposure is not None or len(extra) > 1:
            parser.error(f"unrecognized arguments: {' '.join(extra)}")
        args.exposure = extra[0]

    exposure = parse_exposure(args.exposure)

    try:
        pixels = load_pixels(args.image)
    except ImageDecodeError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    sys.stdout.write(image_to_blocks(pixels, get_terminal_size(), exposure=exposure))
    sys.stdout.flush()
