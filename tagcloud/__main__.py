"""
tagcloud — entry point.

Usage:
    python -m tagcloud layout --center 100 100 --size 5x2
    python -m tagcloud layout --center 100 100 --size 5x2 --size 10x20 --count 50
    python -m tagcloud layout --center 100 100 --size 2x1 --count 10 --grow 1 1

Builds one cloud and prints its rectangles (plus density metrics) as JSON.
Sizes are cycled through until --count rectangles are placed; --grow adds
(DW, DH) to every size for each placement made so far.  Rectangles after
the first stay at non-negative coordinates unless --allow-negative is given.
"""

import json
import logging
import sys

from tagcloud.layout import CircularCloudLayouter, InvalidArgumentError, Size, layout_to_dict

USAGE = ("Usage: python -m tagcloud layout --center X Y --size WxH [--size WxH ...] "
         "[--count N] [--grow DW DH] [--allow-negative] [--verbose]")


class UsageError(Exception):
    pass


def parse_size(text: str) -> Size:
    """Parse ``WxH`` into a Size (validity is checked by the layouter)."""
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise UsageError(f"Bad size {text!r}, expected WxH")
    try:
        return Size(int(parts[0]), int(parts[1]))
    except ValueError:
        raise UsageError(f"Bad size {text!r}, expected WxH") from None


def _int_arg(args: list[str], i: int, flag: str) -> int:
    if i >= len(args):
        raise UsageError(f"{flag} needs a value")
    try:
        return int(args[i])
    except ValueError:
        raise UsageError(f"{flag} expects an integer, got {args[i]!r}") from None


def parse_layout_args(args: list[str]) -> dict:
    opts = {"center": None, "sizes": [], "count": None, "grow": (0, 0),
            "non_negative": True, "verbose": False}
    i = 0
    while i < len(args):
        a = args[i]
        if a == "--center":
            opts["center"] = (_int_arg(args, i + 1, a), _int_arg(args, i + 2, a))
            i += 3
        elif a == "--size":
            if i + 1 >= len(args):
                raise UsageError("--size needs a value")
            opts["sizes"].append(parse_size(args[i + 1]))
            i += 2
        elif a == "--count":
            opts["count"] = _int_arg(args, i + 1, a)
            i += 2
        elif a == "--grow":
            opts["grow"] = (_int_arg(args, i + 1, a), _int_arg(args, i + 2, a))
            i += 3
        elif a == "--allow-negative":
            opts["non_negative"] = False
            i += 1
        elif a == "--verbose":
            opts["verbose"] = True
            i += 1
        else:
            raise UsageError(f"Unknown option: {a}")
    if opts["center"] is None:
        raise UsageError("--center is required")
    if not opts["sizes"]:
        raise UsageError("at least one --size is required")
    if opts["count"] is None:
        opts["count"] = len(opts["sizes"])
    return opts


def run_layout(opts: dict) -> dict:
    layouter = CircularCloudLayouter(opts["center"], non_negative=opts["non_negative"])
    sizes = opts["sizes"]
    dw, dh = opts["grow"]
    for n in range(opts["count"]):
        base = sizes[n % len(sizes)]
        layouter.place_next(Size(base.width + n * dw, base.height + n * dh))
    return layout_to_dict(layouter, with_metrics=True)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    cmd = args[0] if args else ""

    if cmd != "layout":
        print(f"Unknown command: {cmd}" if cmd else USAGE, file=sys.stderr)
        if cmd:
            print(USAGE, file=sys.stderr)
        return 1

    try:
        opts = parse_layout_args(args[1:])
    except UsageError as e:
        print(f"error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if opts["verbose"] else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = run_layout(opts)
    except InvalidArgumentError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
