"""
Print a complex number in every display form.

Run:
    python -m complexplane 1 1 --digits 6 --root 2
"""
import argparse
import sys

from .complex import Complex
from .config import DEFAULT_FRACTION_DIGITS
from .errors import InvalidArgument


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="complexplane", description="Show a complex number in all display forms")
    p.add_argument("re", type=float, nargs="?", default=0.0)
    p.add_argument("im", type=float, nargs="?", default=0.0)
    p.add_argument("--digits", type=int, default=DEFAULT_FRACTION_DIGITS, help="maximum fraction digits")
    p.add_argument("--power", type=int, default=None, help="raise to this integer power first")
    p.add_argument("--root", type=int, default=None, help="take the principal root of this index first")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        z = Complex(args.re, args.im)
        if args.power is not None:
            z = z ** args.power
        if args.root is not None:
            z = z.root(args.root)

        print(f"algebraic     : {z.to_algebraic_form(args.digits)}")
        print(f"trigonometric : {z.to_trigonometric_form(args.digits)}")
        print(f"exponential   : {z.to_exponential_form(args.digits)}")
    except InvalidArgument as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"quadrant      : {z.quadrant.name.lower()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
