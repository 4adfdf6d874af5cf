from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from simplysp import config
from simplysp.errors import SimplyspNestingError, SimplyspSyntaxError
from simplysp.interpreter import Interpreter
from simplysp.printer import to_str


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="simplysp", description="Prefix arithmetic calculator REPL.")
    ap.add_argument("-e", "--eval", dest="expr", help="evaluate one expression, print it and exit")
    ap.add_argument("file", nargs="?", type=Path, help="evaluate each line of FILE and print the results")
    ap.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                    help="logging level (default: WARNING)")
    ap.add_argument("--version", action="version", version=f"simplysp {config.VERSION}")
    return ap


def eval_file(path: Path) -> int:
    interp = Interpreter(source_name=str(path))
    status = 0
    with path.open(encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line.strip():
                continue
            try:
                print(interp.rep(line))
            except (SimplyspSyntaxError, SimplyspNestingError) as err:
                print(err)
                status = 1
    return status


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.expr is not None:
        try:
            print(Interpreter(source_name="<expr>").rep(args.expr))
        except (SimplyspSyntaxError, SimplyspNestingError) as err:
            print(err)
            return 1
        return 0

    if args.file is not None:
        return eval_file(args.file)

    from simplysp.repl import Repl
    Repl().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
