"""Application engine for Lispy.

This module centralizes function application semantics for the interpreter:
- Builtins are called directly with the evaluated argument list. Any
  LispyError they raise is turned into an Error value here, so failures stay
  ordinary values for the caller.
- Lambdas bind arguments positionally into their private frame. A trailing
  rest parameter absorbs whatever is left as a Q-expression.
- Too few arguments yields a partially applied Lambda (currying); too many
  yields an Error.
- A saturated Lambda evaluates its body in its own frame, falling back to the
  call-site environment for anything the frame does not bind.
"""

from __future__ import annotations

import logging

from lispy import LispValue
from lispy.errors import LispyError
from lispy.types import (
    Builtin,
    Environment,
    Error,
    ExprList,
    FixedParam,
    Lambda,
    QuoteList,
    RestParam,
)
from lispy.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


def apply_builtin(env: Environment, fn: Builtin, args: ExprList) -> LispValue:
    try:
        return fn(env, args)
    except LispyError as ex:
        logger.debug("builtin %s failed: %s", fn.name, ex)
        return Error(str(ex))


def apply_lambda(env: Environment, fn: Lambda, args: ExprList) -> LispValue:
    """Apply a Lispy Lambda value.

    Parameters:
    - env: The environment at the call site. Used as the fallback frame for
      body evaluation only; it is never recorded in the Lambda.
    - fn: The Lambda being applied. It is owned by this call and is updated in
      place as arguments are bound.
    - args: The already-evaluated argument values.
    """
    given = len(args)
    total = fn.arity
    params = list(fn.params)

    while len(args):
        if not params:
            return Error(
                f"Function passed too many arguments: expected {total}, got {given}"
            )
        param = params.pop(0)
        if isinstance(param, RestParam):
            rest = QuoteList()
            rest.extend(args)
            fn.env.put_local(param.name, rest)
            break
        fn.env.put_local(param.name, args.pop(0))

    # Zero variadic arguments still bind the rest parameter.
    if params and isinstance(params[0], RestParam):
        fn.env.put_local(params.pop(0).name, QuoteList())

    if params:
        logger.debug("partial application: %d of %d parameters bound", total - len(params), total)
        return Lambda(tuple(params), fn.body, fn.env)

    body = ExprList(fn.body.copy().cells)
    return evaluate(fn.env.reparented(env), body)


def apply(env: Environment, fn: Builtin | Lambda, args: ExprList) -> LispValue:
    """Apply either a Builtin or a Lambda to evaluated arguments."""
    if isinstance(fn, Builtin):
        return apply_builtin(env, fn, args)
    if isinstance(fn, Lambda):
        return apply_lambda(env, fn, args)
    return Error(f"Cannot apply non-function {fn.type_name}")
