"""Canonical Roman numerals, I through MMMCMXCIX.

A RomanNumeral can only be built through parse(), so holding one means the
digits are in canonical form:

    >>> roman = parse("XLII")
    >>> value(roman)
    42
    >>> parse("XXXXXX")
    Traceback (most recent call last):
        ...
    intra.errors.InvalidRomanNumeral: 'XXXXXX' is not a valid roman numeral
"""

import re

from intra.errors import InvalidRomanNumeral

_DIGIT_VALUES = {
    "I": 1, "V": 5, "X": 10, "L": 50,
    "C": 100, "D": 500, "M": 1000,
}

# Digits that may stand in front of a larger one
_SUBTRACTIVE = ("I", "X", "C")

_CANONICAL = re.compile(
    r"^M{0,3}(C[MD]|D?C{0,3})(X[CL]|L?X{0,3})(I[XV]|V?I{0,3})$")


class RomanNumeral:
    """A validated Roman numeral. Build with parse()."""

    __slots__ = ("_digits",)

    def __init__(self, digits):
        self._digits = digits

    @property
    def digits(self):
        return self._digits

    def __int__(self):
        return value(self)

    def __str__(self):
        return self._digits

    def __repr__(self):
        return f"RomanNumeral({self._digits!r})"

    def __eq__(self, other):
        if not isinstance(other, RomanNumeral):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self):
        return hash(self._digits)


def is_canonical(text):
    """True if text is a non-empty numeral in canonical form."""
    return bool(text) and _CANONICAL.fullmatch(text) is not None


def parse(text):
    """Validate text and return a RomanNumeral, or raise InvalidRomanNumeral."""
    if not is_canonical(text):
        raise InvalidRomanNumeral(text)
    return RomanNumeral(text)


def digit_value(digit):
    return _DIGIT_VALUES.get(digit, 0)


def value(roman):
    """Decode a RomanNumeral to its integer value.

    Scans left to right holding a pending digit that may still pair with the
    next one. A pair of equal digits is added together; a smaller digit in
    front of a larger one is subtracted from it.
    """
    total = 0
    pending = None

    for current in roman.digits:
        if pending is None:
            if current in _SUBTRACTIVE:
                pending = current
            else:
                total += digit_value(current)
            continue

        last = digit_value(pending)
        this = digit_value(current)
        if pending == current:
            total += this + last
            pending = None
        elif last < this:
            total += this - last
            pending = None
        else:
            total += last
            pending = current

    if pending is not None:
        total += digit_value(pending)

    return total


# --- Standalone test ---

if __name__ == "__main__":
    tests = ["I", "III", "IV", "XIV", "XXVI", "XLII", "CXXIV", "MMMCMIX",
             "", "IIII", "MMMM", "XM"]
    for t in tests:
        try:
            print(f"  {t!r:15s} => {value(parse(t))}")
        except InvalidRomanNumeral as e:
            print(f"  {t!r:15s} => {e}")
