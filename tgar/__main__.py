import os
import sys
import argparse

from tgar.header import check_dimensions
from tgar.patterns import gradient
from tgar.tga import BGRAImage, PixelCountMismatch

description = (
    "Write 32-bit BGRA images as uncompressed TGA files. "
    "Wraps raw BGRA dumps (e.g. GPU texture readbacks) or generates test patterns."
)

epilog = (
    "Raw input must be tightly packed BGRA, 4 bytes per pixel, rows top to bottom. "
    "Its size must be exactly 4*width*height bytes."
)

parser = argparse.ArgumentParser(prog="tgar", description=description, epilog=epilog)

cmdgroup = parser.add_mutually_exclusive_group(required=True)

cmdgroup.add_argument(
    '-r', "--raw", metavar='FILE', type=str,
    help="Convert a raw BGRA pixel dump to TGA.")

cmdgroup.add_argument(
    '-g', "--gradient", action='store_true',
    help="Write a red/green gradient test pattern.")

parser.add_argument(
    '-W', "--width", type=int, required=True,
    help="Image width in pixels (0-65535).")

parser.add_argument(
    '-H', "--height", type=int, required=True,
    help="Image height in pixels (0-65535).")

parser.add_argument(
    '-o', metavar='outpath', type=str,
    help="Destination file. If omitted, writes <STEM>.tga in the current working directory.")

parser.add_argument(
    '-q', "--quiet", action='store_true',
    help="Don't print progress.")


def default_outpath(stem: str) -> str:
    stem = os.path.basename(stem)
    stem = stem.removesuffix(".bgra").removesuffix(".raw")
    return os.path.join(os.getcwd(), stem + ".tga")


def do_raw(args) -> BGRAImage:
    with open(args.raw, 'rb') as file:
        bgra = file.read()
    return BGRAImage.from_bgra_bytes(args.width, args.height, bgra)


def do_gradient(args) -> BGRAImage:
    return BGRAImage.encode(args.width, args.height, gradient(args.width, args.height))


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)

    if args.raw:
        outpath = args.o or default_outpath(args.raw)
    else:
        outpath = args.o or default_outpath(f"gradient_{args.width}x{args.height}")

    try:
        check_dimensions(args.width, args.height)

        if args.raw:
            image = do_raw(args)
        else:
            image = do_gradient(args)

        with open(outpath, 'wb') as file:
            file.write(image.view())
    except PixelCountMismatch as exc:
        print(f"Pixel count mismatch: {exc}")
        return 1
    except ValueError as exc:
        print(f"Invalid dimensions: {exc}")
        return 1
    except OSError as exc:
        print(f"I/O error: {exc}")
        return 1

    if not args.quiet:
        try:
            shown = os.path.relpath(outpath, '.')
        except ValueError:
            # e.g. different drive on Windows
            shown = outpath
        print(F"Wrote \"{shown}\"")

    return 0


if __name__ == "__main__":
    sys.exit(main())
