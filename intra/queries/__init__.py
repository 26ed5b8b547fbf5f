from intra.queries import define_digit, define_price, numeral_value, item_price

# Tried in this order; the first query that parses wins.
ALL_QUERIES = [
    define_digit, define_price, numeral_value, item_price,
]
