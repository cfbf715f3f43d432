import sys

from .evaluator import process_expression
from .lexer import TokenReader
from .logging import log, debug_from_env
from .tokens import TokenType

BANNER = "Starting Expression Evaluation Program"
PROMPT = "\nEnter Expression: "
HELP = """The commands for this program are:

q - to quit the program
? - to list the accepted commands
or any infix mathematical expression using operators of (), *, /, +, -"""


def print_commands():
    print(HELP)


def eval_loop(debug=False, readline=None):
    """
    Keep asking a new expression and prints its result.

    Return when input is exhausted and raises SystemExit(1) on the quit
    command.
    """
    while True:
        print(PROMPT, end="", flush=True)

        reader = TokenReader(readline)
        token = reader.next_token()
        kind = token.type

        if kind is TokenType.QUIT:
            print("Quitting Program")
            raise SystemExit(1)
        elif kind is TokenType.HELP:
            print_commands()
            reader.discard_rest_of_line()
        elif kind is TokenType.ERROR:
            print("Invalid Input - For a list of valid commands, type ?")
            reader.discard_rest_of_line()
        elif kind is TokenType.EOLN:
            print("Blank Line - Do Nothing")
        elif kind is TokenType.EOF:
            log.info("input exhausted")
            print()
            return
        else:
            process_expression(token, reader, debug=debug)


def lexer_interact(readline=None):
    """
    Keep asking a new expressions from lexer and prints the token stream.
    """
    while True:
        print("expr: ", end="", flush=True)
        tokens = list(TokenReader(readline))
        if tokens[-1].type is TokenType.EOF or len(tokens) == 1:
            break
        print(tokens[:-1])


def main(argv=None):
    """
    Entry point for the infix command.

    The -d flag may appear anywhere in the argument list and enables the
    evaluation trace.
    """
    argv = sys.argv[1:] if argv is None else argv
    debug = "-d" in argv or debug_from_env()
    if debug:
        print("Debugging mode ON.")
    print(BANNER)
    eval_loop(debug=debug)
