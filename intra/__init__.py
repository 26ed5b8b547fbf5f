"""Intergalactic numerals: dialect words to Roman numerals, and what things cost."""

from intra.dictionary import Dictionary
from intra.engine import QueryEngine
from intra.prices import PriceBook
from intra.roman import RomanNumeral

__version__ = "0.1.0"
