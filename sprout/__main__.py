from __future__ import annotations

import argparse
import sys

from sprout.driver import run
from sprout.errors import SproutError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sprout",
        description="Compile a Sprout program to Python one form at a time, running each form as it goes.",
    )
    parser.add_argument("file", help="Sprout source file")
    parser.add_argument("--prelude", default=None,
                        help="Standard library file loaded first (default: bundled std/core.lisp, or SPROUT_PRELUDE_PATH).")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Fail on forms that cannot be grown instead of emitting None.")
    parser.add_argument("-v", "--verbose", action="store_true", default=None,
                        help="Also print each form and its IR as comments.")
    args = parser.parse_args(argv)

    try:
        run(args.file, prelude_path=args.prelude, strict=args.strict, verbose=args.verbose)
    except OSError as exc:
        print(f"error: cannot read {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 2
    except SproutError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
