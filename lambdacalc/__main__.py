"""Runs a lambdacalc script, or the interactive shell when no file is given. Called from the lambdacalc console script
or as python -m lambdacalc.
"""

import argparse
import logging

from lambdacalc.lang.context import ExecutionContext
from lambdacalc.lang.error import ErrorHandler
from lambdacalc.lang.shell import Shell
from lambdacalc.typed.context import TypedExecutionContext


def main(argv=None):
    """Runs lambdacalc interpreter."""
    parser = argparse.ArgumentParser(prog="lambdacalc", description="Lambda calculus interpreter")
    parser.add_argument("file", help="file to run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--typed", action="store_true", help="use the simply-typed calculus with Bool and Nat")
    parser.add_argument("--no-prelude", action="store_true", help="start without the standard aliases")
    parser.add_argument("--max-steps", type=int, default=ExecutionContext.MAX_STEPS,
                        help="reduction passes allowed per evaluation (default: %(default)s)")
    parser.add_argument("--verbose", action="store_true", help="print every reduction step")
    parser.add_argument("--debug", action="store_true", help="log engine internals")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    with ErrorHandler() as error_handler:
        context_type = TypedExecutionContext if args.typed else ExecutionContext
        if args.no_prelude:
            context = context_type(args.max_steps)
        else:
            context = context_type.standard(args.max_steps)

        if args.file is not None:
            Shell(context, error_handler, args.verbose).run_file(args.file)
        else:
            Shell(context, ErrorHandler(fatal=False), args.verbose).cmdloop()


if __name__ == "__main__":
    main()
