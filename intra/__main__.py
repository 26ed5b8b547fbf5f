"""Entry point for `python -m intra`."""

import sys


def _parse_cmd(text):
    """Classify a single input and print the result in test_cases.txt format."""
    from intra.engine import QueryEngine

    p = QueryEngine().classify(text)

    print(f"> {text}")

    if p is None:
        print("query: none")
        return

    print(f"query: {p.query}")
    for key, val in p.args.items():
        print(f"{key}: {val}")


if __name__ == "__main__" or not sys.argv[0]:
    if len(sys.argv) >= 3 and sys.argv[1] == "-parse":
        _parse_cmd(" ".join(sys.argv[2:]))
    else:
        from intra.main import main
        sys.exit(main())
