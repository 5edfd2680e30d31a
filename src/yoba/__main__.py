from __future__ import annotations

import argparse
import sys

from .runtime.core import DEFAULT_MAX_CALL_DEPTH, RuntimeContext
from .runtime.errors import EvalError
from .runtime.interpreter import run_for_cli
from .runtime.statement_executor import print_stats
from .writer import IndentingWriter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="yoba", description="yoba language interpreter")
    parser.add_argument("program", nargs="?", help="Source file path (stdin when omitted)")
    parser.add_argument("--source", help="Literal program text instead of a file")
    parser.add_argument("--stats", action="store_true", help="Dump every variable after the run")
    parser.add_argument("--debug", action="store_true", help="Trace evaluation to stderr")
    parser.add_argument(
        "--max-call-depth",
        type=int,
        default=DEFAULT_MAX_CALL_DEPTH,
        help="Nested call limit, 0 disables the guard",
    )
    args = parser.parse_args(argv)

    if args.source is not None:
        source_text = args.source
    elif args.program is not None:
        try:
            with open(args.program, "r", encoding="utf-8") as handle:
                source_text = handle.read()
        except OSError as exc:
            print(f"Failed to read {args.program}: {exc}", file=sys.stderr)
            return 1
    else:
        source_text = sys.stdin.read()

    context = RuntimeContext(
        writer=IndentingWriter(enabled=args.debug),
        out=sys.stdout.buffer,
        max_call_depth=args.max_call_depth or None,
    )
    state = run_for_cli(source_text, context=context, stderr=sys.stderr)
    if state is None:
        return 1

    if args.stats:
        try:
            print_stats(state)
            state.context.emit("\n")
        except EvalError as error:
            print(f"Runtime error: {error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
