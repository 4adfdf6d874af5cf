"""
Interactive read-eval-print loop.

Line editing and persistent history come from prompt_toolkit. The loop's state
(prompt, line source, running flag) lives on the Repl object so the evaluator
core stays free of ambient state, and tests can drive it with a plain callable.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from simplysp import config
from simplysp.errors import SimplyspNestingError, SimplyspSyntaxError
from simplysp.interpreter import Interpreter
from simplysp.printer import println
from simplysp.types.value import dispose

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]


def prompt_session_reader(history_path: Path | None = None) -> LineReader:
    path = history_path if history_path is not None else config.get_history_path()
    session: PromptSession = PromptSession(history=FileHistory(str(path)))
    return session.prompt


class Repl:
    def __init__(
        self,
        read_line: LineReader | None = None,
        prompt: str | None = None,
        out: TextIO | None = None,
        interpreter: Interpreter | None = None,
    ):
        self.read_line = read_line if read_line is not None else prompt_session_reader()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.out = out if out is not None else sys.stdout
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.running = False

    def print_banner(self) -> None:
        for line in config.banner():
            self.out.write(line + "\n")

    def step(self, line: str) -> None:
        """Evaluate one input line and print its result, or the error that stopped it."""
        try:
            result = self.interp.eval(line)
        except (SimplyspSyntaxError, SimplyspNestingError) as err:
            self.out.write(f"{err}\n")
            return
        println(result, self.out)
        dispose(result)

    def run(self) -> None:
        self.print_banner()
        self.running = True
        while self.running:
            try:
                line = self.read_line(self.prompt)
            except (KeyboardInterrupt, EOFError):
                logger.debug("input closed, leaving repl")
                self.running = False
                break
            self.step(line)
