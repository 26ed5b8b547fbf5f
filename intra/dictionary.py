"""Dialect dictionary: intergalactic words to Roman digits.

    >>> d = Dictionary({"glob": "I", "prok": "V", "pish": "X", "tegj": "L"})
    >>> d.translate("pish tegj glob glob")
    RomanNumeral('XLII')
"""

from intra import roman
from intra.errors import UnrecognizedWord


class Dictionary:
    """Maps each dialect word to a single Roman digit character.

    insert() overwrites without checking; keeping words and digits unique is
    up to the engine.
    """

    def __init__(self, mapping=None):
        self._map = dict(mapping or {})

    def insert(self, word, digit):
        self._map[word] = digit

    def contains(self, word):
        return word in self._map

    def __contains__(self, word):
        return self.contains(word)

    def __len__(self):
        return len(self._map)

    def known_digits(self):
        """Set of digits already assigned to some word."""
        return set(self._map.values())

    def translate(self, text):
        """Translate whitespace-separated dialect words to a RomanNumeral.

        Raises UnrecognizedWord for the first unknown word, and
        InvalidRomanNumeral if the digits don't form a canonical numeral.
        """
        digits = []
        for word in text.split():
            digit = self._map.get(word)
            if digit is None:
                raise UnrecognizedWord(word)
            digits.append(digit)
        return roman.parse("".join(digits))

    def __repr__(self):
        return f"Dictionary({self._map!r})"
