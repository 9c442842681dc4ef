"""Per-session evaluation context.

A Context is created once by the embedding entry point and threaded through
every evaluate call, special form and builtin. Nothing is process-global: two
Interpreters in one process never see each other's bindings or output.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable

from sprig.config import DEFAULT_MAX_DEPTH
from sprig.types.environment import Environment


def write_stdout(text: str) -> None:
    sys.stdout.write(text + "\n")


@dataclass
class Context:
    root: Environment
    output: Callable[[str], None] = write_stdout
    max_depth: int = DEFAULT_MAX_DEPTH
    # current nesting of closure calls
    depth: int = 0

    def write(self, text: str) -> None:
        self.output(text)
