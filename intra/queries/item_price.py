"""Item price: how many credits do some units of an item cost?

Handles:
    "how many credits is glob prok Silver?"
    "How many Credits is pish glob prok Dark Matter?"
"""

from decimal import Decimal

from intra import roman
from intra.errors import UnrecognizedItem
from intra.queries.parse import Parse
from intra.queries.template import TemplatePattern

_PATTERN = TemplatePattern("how many credits is $number:words $item:item?", anchored=False)


def _fmt_credits(amount):
    """Format a Decimal without trailing fraction zeros or exponent."""
    return format(amount.normalize(), "f")


def parse(text):
    fields = _PATTERN.match(text)
    if fields is None:
        return None
    return Parse(query="item_price", args=fields)


def handle(p, engine):
    number, item = p.args["number"], p.args["item"]
    count = roman.value(engine.dictionary.translate(number))

    unit_price = engine.prices.get(item)
    if unit_price is None:
        raise UnrecognizedItem(item)

    total = Decimal(count) * unit_price
    return f"{number} {item} is {_fmt_credits(total)} Credits"


if __name__ == "__main__":
    tests = [
        "how many credits is glob prok Silver?",
        "How many Credits is pish glob prok Dark Matter?",
        "how many credits is Silver?",
        "how much is glob prok Silver?",
    ]
    for t in tests:
        result = parse(t)
        if result:
            print(f"  {t!r:50s} => {result.query} {result.args}")
        else:
            print(f"  {t!r:50s} => None")
