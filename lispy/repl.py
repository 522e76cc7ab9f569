"""Interactive read-eval-print loop for Lispy."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Readline support for line editing and history
try:
    import readline
    READLINE_AVAILABLE = True
except ImportError:
    READLINE_AVAILABLE = False

from lispy import __version__
from lispy.config import get_history_file, get_prompt
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter

logger = logging.getLogger(__name__)

BANNER = f"Lispy version {__version__}\nPress ^C to exit."


def eval_line(interp: Interpreter, line: str) -> str:
    """Evaluate one line of input and return the text to print."""
    try:
        return str(interp.eval(line))
    except LispySyntaxError as ex:
        return f"Parse error: {ex}"


def _setup_history() -> None:
    if not READLINE_AVAILABLE:
        return
    history = get_history_file()
    try:
        readline.read_history_file(history)
    except OSError:
        pass  # no history yet


def _save_history() -> None:
    if not READLINE_AVAILABLE:
        return
    try:
        readline.write_history_file(get_history_file())
    except OSError as ex:
        logger.debug("could not save history: %s", ex)


def run_repl(interp: Interpreter, out: TextIO = sys.stdout) -> None:
    print(BANNER, file=out)
    _setup_history()
    prompt = get_prompt()
    try:
        while True:
            try:
                line = input(prompt)
            except EOFError:
                print(file=out)
                break
            if not line.strip():
                continue
            print(eval_line(interp, line), file=out)
    except KeyboardInterrupt:
        print(file=out)
    finally:
        _save_history()
