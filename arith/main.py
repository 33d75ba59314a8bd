"""Uses the arith language to interpret .arith files, evaluate a single statement, or run in command-line mode. Also
uses error handling context manager. Called from the arith console script.
"""

import argparse
import logging

from arith.lang.error import ErrorHandler
from arith.lang.numerical import number
from arith.lang.shell import Shell
from arith.lang.session import Session


EXAMPLE = "( 2 + ( 3 * 4 ) )"


def run(sess):
    """Prints the value of every statement in sess."""
    for value in sess.run():
        print(number(value))


def main(argv=None):
    """Runs arith interpreter. Called from arith console script."""
    parser = argparse.ArgumentParser(prog="arith", description="Whitespace-delimited arithmetic interpreter.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    source.add_argument("-c", "--command", help="statement to evaluate, e.g. '( 2 + 3 ) * 4'")
    source.add_argument("--example", action="store_true", help=f"evaluate the example expression '{EXAMPLE}'")
    parser.add_argument("-v", "--verbose", action="store_true", help="log tokens, trees and values")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    with ErrorHandler() as error_handler:
        if args.file is not None:
            run(Session(error_handler, args.file))

        elif args.command is not None or args.example:
            sess = Session(error_handler, Session.CMD_FILE)
            sess.add(EXAMPLE if args.example else args.command, 1)
            run(sess)

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
