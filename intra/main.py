"""intra — intergalactic numeral and price translator.

Reads queries from a file, or interactively from a prompt, and writes one
line per answer. Lines that only teach the engine something produce no
output; lines that can't be answered produce ERROR_STR.

Usage:
    python -m intra notes.txt
    python -m intra notes.txt -o answers.txt
    python -m intra -log intra.log
"""

import sys

from intra.engine import QueryEngine
from intra.errors import QueryError

ERROR_STR = "I have no idea what you are talking about"
PROMPT = "> "


def log(msg):
    print(msg, flush=True)


def answer(engine, line, source):
    """Run one line through the engine. Returns the text to show, or None."""
    try:
        return engine.query(line, source=source)
    except QueryError:
        return ERROR_STR


def run_file(engine, in_file, out_file):
    """Answer every line of in_file, writing replies to out_file."""
    for line in in_file:
        response = answer(engine, line.rstrip("\n"), "[file]")
        if response is not None:
            out_file.write(response + "\n")


def run_interactive(engine):
    """Prompt loop. Ends on Ctrl-C or end of input."""
    while True:
        try:
            line = input(PROMPT)
        except KeyboardInterrupt:
            print("^C")
            break
        except EOFError:
            print("^D")
            break

        response = answer(engine, line, "[prompt]")
        if response is not None:
            print(response, flush=True)


def _parse_args(argv):
    """Split argv into (path, output, log_path). Raises ValueError on bad usage."""
    path = output = log_path = None
    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg in ("-o", "--output", "-log", "--log"):
            if not args:
                raise ValueError(f"{arg} needs a file name")
            if arg in ("-o", "--output"):
                output = args.pop(0)
            else:
                log_path = args.pop(0)
        elif arg.startswith("-"):
            raise ValueError(f"Unknown option {arg}")
        elif path is None:
            path = arg
        else:
            raise ValueError(f"Unexpected argument {arg}")
    return path, output, log_path


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        path, output, log_path = _parse_args(argv)
    except ValueError as e:
        log(f"{e}\n{__doc__.strip()}")
        return 2

    if log_path is not None:
        try:
            open(log_path, "a").close()
        except OSError as e:
            log(f"Warning: not logging, can't write {log_path}: {e}")
            log_path = None

    engine = QueryEngine(log_path=log_path)

    if path is None:
        run_interactive(engine)
        return 0

    try:
        with open(path) as in_file:
            if output is None:
                run_file(engine, in_file, sys.stdout)
            else:
                with open(output, "w") as out_file:
                    run_file(engine, in_file, out_file)
    except OSError as e:
        log(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
