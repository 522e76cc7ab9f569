from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from lispy import LispValue
from lispy.builtin import register
from lispy.config import get_prelude_path
from lispy.evaluation import evaluate
from lispy.reader import read, read_forms
from lispy.types import Environment, Error, ExprList

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Lispy code.
    Maintains the global Environment across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                self.load(get_prelude_path())
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                logger.warning("prelude not found at %s", get_prelude_path())
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> LispValue:
        """Evaluate each top-level form of `code`, stopping at the first Error."""
        result: LispValue = ExprList()
        for form in read_forms(code):
            result = evaluate(self.env, form)
            if isinstance(result, Error):
                logger.warning("prelude form failed: %s", result.message)
                return result
        return result

    def load(self, path: str | Path) -> LispValue:
        source = Path(path).read_text(encoding="utf-8")
        logger.debug("loading %s", path)
        return self.eval_prelude(source)

    def eval(self, code: str) -> LispValue:
        """Evaluate a line of input as one top-level S-expression."""
        return evaluate(self.env, read(code))
