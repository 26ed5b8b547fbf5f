"""Parse object for the query system.

Each query module's parse(text) returns a Parse (or None).
The engine takes the first Parse in query order and passes it to
handle(parse, engine).
"""

from dataclasses import dataclass, field


@dataclass
class Parse:
    query: str            # e.g. "define_digit", "item_price"
    args: dict = field(default_factory=dict)
    text: str = ""         # the input line — set by engine
    module: object = None  # reference to the module — set by engine
