"""Numeral value: what is a dialect number worth?

Handles:
    "how much is pish tegj glob glob?"
    "How much is glob prok ?"
"""

from intra import roman
from intra.queries.parse import Parse
from intra.queries.template import TemplatePattern

_PATTERN = TemplatePattern("how much is $number:words?", anchored=False)


def parse(text):
    fields = _PATTERN.match(text)
    if fields is None:
        return None
    return Parse(query="numeral_value", args=fields)


def handle(p, engine):
    number = p.args["number"]
    n = roman.value(engine.dictionary.translate(number))
    return f"{number} is {n}"
