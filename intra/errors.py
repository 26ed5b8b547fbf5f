"""Errors raised while answering a query.

Every failure aborts the single query that caused it and leaves the engine
state untouched. The front end decides what the user sees.
"""


class QueryError(Exception):
    pass


class InvalidRomanNumeral(QueryError):
    def __init__(self, text=""):
        self.text = text
        super().__init__(f"{text!r} is not a valid roman numeral")


class UnrecognizedWord(QueryError):
    def __init__(self, word):
        self.word = word
        super().__init__(f"Unrecognized word: {word!r}")


class UnrecognizedQuery(QueryError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"Unrecognized query: {text!r}")


class UnrecognizedItem(QueryError):
    def __init__(self, item):
        self.item = item
        super().__init__(f"Unrecognized item: {item!r}")


class WordAlreadyExists(QueryError):
    def __init__(self, word):
        self.word = word
        super().__init__(f"Word {word!r} is already defined")


class DigitAlreadyExists(QueryError):
    def __init__(self, digit):
        self.digit = digit
        super().__init__(f"Digit {digit!r} is already assigned to a word")


class ItemAlreadyExists(QueryError):
    def __init__(self, item):
        self.item = item
        super().__init__(f"Item {item!r} already has a price")
