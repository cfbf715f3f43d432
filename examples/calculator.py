"""
Batch calculator built on top of the infix library.

Evaluates each line of the given files (or of standard input) and prints one
result per line, using the same messages as the interactive program.

Usage:
    python examples/calculator.py [FILE ...]
"""
import fileinput
import sys

import infix
from infix.tokens import TokenType


def eval_lines(lines):
    """
    Evaluate a sequence of lines. Blank lines and commands are skipped.

    Yields the (line, result) pair for each evaluated line. Result is None if
    the line contains an invalid expression.
    """
    for line in lines:
        reader = infix.TokenReader.from_string(line, out=lambda msg: None)
        token = reader.next_token()
        if token.type not in (TokenType.VALUE, TokenType.OPERATOR):
            continue
        try:
            yield line.strip(), infix.evaluate(token, reader)
        except infix.EvaluationError as ex:
            infix.log.info(f"{line.strip()}: {ex}")
            yield line.strip(), None


def main(files=()):
    for line, result in eval_lines(fileinput.input(files)):
        print(f"{line} = {'error' if result is None else result}")


if __name__ == '__main__':
    main(sys.argv[1:])
