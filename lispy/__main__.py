"""
Lispy - command line entry point
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from lispy import __version__
from lispy.config import get_log_level
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.repl import eval_line, run_repl
from lispy.types import Error


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog='lispy',
        description='Lispy - a small Lisp with S-expressions and Q-expressions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                       # Interactive mode
  %(prog)s script.lspy           # Load a script
  %(prog)s -e "+ 1 2 3"          # Evaluate an expression
  %(prog)s script.lspy -i        # Load a script, then go interactive
        """
    )
    parser.add_argument('scripts', nargs='*', help='Lispy files to load, in order')
    parser.add_argument('-e', '--eval', dest='expressions', action='append', default=[],
                        metavar='EXPR', help='Evaluate EXPR and print the result')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='Start interactive mode after loading scripts')
    parser.add_argument('--no-prelude', action='store_true',
                        help='Do not load the bundled prelude')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'Lispy {__version__}')
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')

    status = 0
    for script in args.scripts:
        try:
            result = interp.load(script)
        except OSError as ex:
            print(f"Could not load {script}: {ex}", file=sys.stderr)
            return 1
        except LispySyntaxError as ex:
            print(f"Parse error in {script}: {ex}", file=sys.stderr)
            return 1
        if isinstance(result, Error):
            print(result)
            status = 1

    for expr in args.expressions:
        print(eval_line(interp, expr))

    if args.interactive or not (args.scripts or args.expressions):
        run_repl(interp)
    return status


if __name__ == "__main__":
    sys.exit(main())
