"""Define digit: teach the engine one dialect word.

Handles:
    "glob is I"
    "prok IS V"

The word must be all lowercase and the digit one of I V X L C D M. A word
can be defined once, and each digit can belong to only one word.
"""

from intra.errors import DigitAlreadyExists, WordAlreadyExists
from intra.queries.parse import Parse
from intra.queries.template import TemplatePattern

_PATTERN = TemplatePattern("$word:word is $digit:digit")


def parse(text):
    fields = _PATTERN.match(text)
    if fields is None:
        return None
    return Parse(query="define_digit", args=fields)


def handle(p, engine):
    word, digit = p.args["word"], p.args["digit"]
    if engine.dictionary.contains(word):
        raise WordAlreadyExists(word)
    if digit in engine.used_digits:
        raise DigitAlreadyExists(digit)
    engine.dictionary.insert(word, digit)
    engine.used_digits.add(digit)
    return None


if __name__ == "__main__":
    tests = ["glob is I", "prok IS V", "Glob is I", "glob is i", "glob is IV", "how much is glob?"]
    for t in tests:
        result = parse(t)
        if result:
            print(f"  {t!r:30s} => {result.query} {result.args}")
        else:
            print(f"  {t!r:30s} => None")
