"""Query engine: parses input with the query forms in order, dispatches to the first match.

Each query module must provide:
    parse(text: str) -> Parse | None       # classify + extract args, return None if no match
    handle(parse: Parse, engine) -> str | None
                                           # run the query against the engine's state;
                                           # None means state changed and there is no reply

A handler either raises a QueryError before touching any state, or applies
exactly one change. A failed query therefore never leaves the dictionary or
price book half updated.
"""

from datetime import datetime

from intra.dictionary import Dictionary
from intra.errors import QueryError, UnrecognizedQuery
from intra.prices import PriceBook
from intra.queries import ALL_QUERIES


class QueryEngine:
    """One session: a Dictionary, a PriceBook, and the set of digits in use.

    Args:
        dictionary: Optional pre-built Dictionary (or plain word -> digit dict).
        prices: Optional pre-built PriceBook (or plain item -> price dict).
        log_path: If given, every query appends a 2-line entry to this file.
        queries: Query modules to try, in order. Defaults to ALL_QUERIES.
    """

    def __init__(self, dictionary=None, prices=None, log_path=None, queries=None):
        if not isinstance(dictionary, Dictionary):
            dictionary = Dictionary(dictionary)
        if not isinstance(prices, PriceBook):
            prices = PriceBook(prices)
        self.dictionary = dictionary
        self.prices = prices
        self.used_digits = dictionary.known_digits()
        self.log_path = log_path
        self._queries = list(ALL_QUERIES if queries is None else queries)

    def classify(self, text):
        """Return the Parse of the first query form that matches text, or None."""
        for query in self._queries:
            p = query.parse(text)
            if p is not None:
                p.module = query
                p.text = text
                return p
        return None

    def query(self, text, source="[input]"):
        """Answer one line of input.

        Args:
            text: The raw input line.
            source: Source tag for logging, e.g. "[file]" or "[prompt]".

        Returns:
            The reply text, or None if the line only changed state.

        Raises:
            QueryError: The line was not understood or could not be answered.
        """
        p = self.classify(text)
        if p is None:
            self._log_request(text, None, source)
            raise UnrecognizedQuery(text)

        try:
            response = p.module.handle(p, self)
        except QueryError as e:
            self._log_request(text, p, source, error=e)
            raise

        self._log_request(text, p, source)
        return response

    def _log_request(self, text, p, source, error=None):
        """Append a compact 2-line entry to the log file, if there is one."""
        if self.log_path is None:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        if p is None:
            parse_line = "  -> none"
        else:
            parts = [p.query]
            for k, v in p.args.items():
                parts.append(f"{k}={v!r}")
            if error is not None:
                parts.append(f"error={type(error).__name__}")
            parse_line = f"  -> {', '.join(parts)}"
        try:
            with open(self.log_path, "a") as f:
                f.write(f"{ts} {source}  {text}\n{parse_line}\n")
        except OSError:
            pass
