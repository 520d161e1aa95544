from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, TextIO

from sanguinius import SExpression, LispValue
from sanguinius.config import get_prompt
from sanguinius.errors import SanguiniusError, SanguiniusEvalError, SanguiniusReadError
from sanguinius.evaluation.evaluator import evaluate
from sanguinius.printer import to_string
from sanguinius.reader.parser import Reader
from sanguinius.runtime_context import get_global_environment, make_global_environment
from sanguinius.types.environment import Environment

logger = logging.getLogger(__name__)

BANNER = "Welcome to Sanguinius v0.13. Use ctrl-c to exit"


class Interpreter:
    """
    Reads, evaluates and writes Sanguinius forms against one environment.
    By default that is the process-wide global environment, so definitions
    persist across Interpreter instances; pass isolated=True for a private one.
    """
    def __init__(self, env: Environment | None = None, isolated: bool = False):
        if env is None:
            env = make_global_environment() if isolated else get_global_environment()
        self.env = env

    def read(self, source: str | TextIO) -> Iterator[SExpression]:
        """Yield each datum in `source` in turn."""
        return Reader(source).read_all()

    def eval_form(self, form: SExpression) -> LispValue:
        """Evaluate one datum; host stack exhaustion becomes an evaluation error."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("eval %s", to_string(form))
        try:
            return evaluate(form, self.env)
        except RecursionError:
            raise SanguiniusEvalError("maximum recursion depth exceeded") from None

    def eval(self, code: str | TextIO) -> LispValue | None:
        """Evaluate every datum in `code` and return the last value (None if there were none)."""
        result = None
        for form in self.read(code):
            result = self.eval_form(form)
        return result

    def eval_to_string(self, code: str | TextIO) -> str:
        result = self.eval(code)
        return "" if result is None else to_string(result)

    def load(self, path: str | Path) -> None:
        with open(path, encoding="utf-8") as f:
            self.eval(f)

    def repl(self, input_stream: TextIO, output: TextIO, prompt: str | None = None) -> None:
        """Read one datum at a time, print its value or the error, until end of input.

        The prompt defaults to SANGUINIUS_PROMPT (see config.get_prompt).
        """
        if prompt is None:
            prompt = get_prompt()
        reader = Reader(input_stream)
        while True:
            output.write(prompt)
            output.flush()
            try:
                form = reader.read()
            except SanguiniusReadError as e:
                logger.debug("read error: %s", e)
                output.write(f"error: {e}\n")
                reader.stream.skip_line()
                continue
            if form is None:
                output.write("\n")
                return
            try:
                text = to_string(self.eval_form(form))
            except SanguiniusError as e:
                logger.debug("evaluation error: %s", e)
                output.write(f"error: {e}\n")
                continue
            output.write(text)
            output.write("\n")
