"""Define item price: record what a number of units of an item cost.

Handles:
    "glob glob Silver is 34 Credits"
    "pish pish Iron is 3910 credits"
    "glob prok Dark Matter is 57800 Credits"

The price is stored per unit, so the dialect number is decoded and the
credits divided by it. An item can only be priced once.
"""

from decimal import Decimal

from intra import roman
from intra.errors import ItemAlreadyExists, UnrecognizedQuery
from intra.queries.parse import Parse
from intra.queries.template import TemplatePattern

_PATTERN = TemplatePattern("$number:words $item:item is $credits:integer credits")


def parse(text):
    fields = _PATTERN.match(text)
    if fields is None:
        return None
    return Parse(query="define_price", args=fields)


def handle(p, engine):
    count = roman.value(engine.dictionary.translate(p.args["number"]))
    if count == 0:
        raise UnrecognizedQuery(p.text)

    item = p.args["item"]
    unit_price = Decimal(p.args["credits"]) / Decimal(count)
    if not engine.prices.insert_if_absent(item, unit_price):
        raise ItemAlreadyExists(item)
    return None


if __name__ == "__main__":
    tests = [
        "glob glob Silver is 34 Credits",
        "glob prok Gold is 57800 Credits",
        "pish pish Iron is 3910 Credits",
        "glob glob Dark Matter is 12 credits",
        "Silver is 34 Credits",
        "glob glob Silver is 34.5 Credits",
    ]
    for t in tests:
        result = parse(t)
        if result:
            print(f"  {t!r:45s} => {result.query} {result.args}")
        else:
            print(f"  {t!r:45s} => None")
