"""Command-line entry point that renders a fractal to an image file."""

from __future__ import annotations

import argparse
import sys

from fractalia.escape import FRACTALS, get_fractal
from fractalia.ifs import SYSTEMS
from fractalia.koch import nearest_vertex, star_vertices
from fractalia.raster import KOCH_EXTENT, escape_image, ifs_image, koch_image
from fractalia.viewport import Direction, Session

KOCH = "koch"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fractalia", description="Render a fractal to an image file."
    )
    parser.add_argument(
        "name", choices=sorted([*FRACTALS, *SYSTEMS, KOCH]), help="fractal to draw"
    )
    parser.add_argument("-o", "--output", help="image file (default: <name>.png)")
    parser.add_argument("--width", type=int, default=700)
    parser.add_argument("--height", type=int, default=700)
    parser.add_argument(
        "--scheme", type=int, default=0, help="colour scheme 0..5 (escape-time)"
    )
    parser.add_argument(
        "--keys",
        default="",
        help="comma-separated key presses: q, a, c, w, s, up, down, left, right",
    )
    parser.add_argument("--points", type=int, help="points to trace (IFS)")
    parser.add_argument("--seed", type=int, help="random seed (IFS)")
    parser.add_argument("--iteration", type=int, default=0, help="Koch iteration")
    parser.add_argument(
        "--click",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="window position to find the nearest snowflake vertex to (Koch)",
    )
    return parser


def _parse_keys(text: str) -> list[str | Direction]:
    keys: list[str | Direction] = []
    for token in (part.strip() for part in text.split(",")):
        if not token:
            continue
        lowered = token.lower()
        if lowered in {d.value for d in Direction}:
            keys.append(Direction(lowered))
        elif len(token) == 1:
            keys.append(token)
        else:
            raise ValueError(f"unknown key {token!r}")
    return keys


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    output = args.output or f"{args.name}.png"
    try:
        if args.name in FRACTALS:
            fractal = get_fractal(args.name)
            session = Session(fractal.default_viewport(), args.scheme)
            for key in _parse_keys(args.keys):
                if not session.handle_key(key):
                    parser.error(f"key {key!r} has no binding")
            image = escape_image(
                fractal, session.viewport, args.width, args.height, session.scheme
            )
        elif args.name in SYSTEMS:
            image = ifs_image(args.name, args.points, args.width, args.height, args.seed)
        else:
            image = koch_image(args.iteration, args.width, args.height)
            if args.click is not None:
                half = KOCH_EXTENT // 2
                x, y = args.click
                distance, _ = nearest_vertex(
                    x - half, y - half, star_vertices(args.iteration)
                )
                print(f"nearest distance: {distance}")
        image.save(output)
    except (ValueError, OSError) as error:
        print(f"fractalia: {error}", file=sys.stderr)
        return 1
    print(f"wrote {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())