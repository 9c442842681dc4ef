"""
Interactive console for Sprig.

Each top-level form is read, evaluated against the session's root
environment, and echoed as `=> <value>`. A failing form is reported as an
`error: ...` line and the session carries on with the next form.

Usage:
    python -m sprig [--max-depth N] [--log-level LEVEL] [--prompt TEXT]
    sprig [options]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable

from sprig import SExpression, __version__
from sprig.config import get_log_level
from sprig.errors import SprigError, SprigIncompleteInput, SprigSyntaxError
from sprig.interpreter import Interpreter
from sprig.printer import format_error, format_read_error, to_repr
from sprig.reader.parser import read_all
from sprig.runtime_context import write_stdout

logger = logging.getLogger(__name__)


def is_incomplete(source: str) -> bool:
    """True if `source` ends inside a list, a string or after a quote."""
    try:
        read_all(source)
    except SprigIncompleteInput:
        return True
    except SprigSyntaxError:
        return False
    return False


class Console:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        write: Callable[[str], None] | None = None,
    ):
        self.write = write or write_stdout
        # print output and the => echo go to the same sink
        self.interpreter = interpreter or Interpreter(output=self.write)

    def feed(self, source: str) -> bool:
        """Evaluate each form of `source` as soon as it is read; return False if any failed.

        Forms before a read error still run. Reading stops at the error.
        """
        forms = self.interpreter.read(source)
        ok = True
        while True:
            try:
                expr = next(forms)
            except StopIteration:
                return ok
            except SprigSyntaxError as err:
                logger.debug("read failed: %s", err)
                self.write(format_read_error(err))
                return False
            if not self.run(expr):
                ok = False

    def run(self, expr: SExpression) -> bool:
        try:
            self.write(f"=> {to_repr(self.interpreter.eval_form(expr))}")
        except SprigError as err:
            logger.debug("%s in %s", type(err).__name__, to_repr(expr))
            self.write(format_error(err))
            return False
        except RecursionError:
            # rendering a value or an error scope can still exhaust the host stack
            logger.debug("recursion too deep in %s", type(expr).__name__)
            self.write("error: host stack exhausted: recursion too deep")
            return False
        return True

    def interact(self, lines: Iterable[str], prompt: Callable[[str], None] | None = None) -> None:
        """Feed lines, joining continuation lines until the input is complete."""
        buffer: list[str] = []
        if prompt:
            prompt("> ")
        for line in lines:
            buffer.append(line.rstrip("\n"))
            source = "\n".join(buffer)
            if is_incomplete(source):
                if prompt:
                    prompt(". ")
                continue
            buffer.clear()
            if source.strip():
                self.feed(source)
            if prompt:
                prompt("> ")
        if buffer:
            # input ended mid-form; report it like any other read error
            self.feed("\n".join(buffer))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprig",
        description="Interactive console for the Sprig S-expression language.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="maximum nesting of function calls (default: $SPRIG_MAX_DEPTH or 400)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $SPRIG_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--prompt",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="show a prompt (default: only when stdin is a terminal)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or get_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    console = Console(Interpreter(max_depth=args.max_depth))
    show_prompt = args.prompt if args.prompt is not None else sys.stdin.isatty()

    def prompt(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    try:
        console.interact(sys.stdin, prompt if show_prompt else None)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
