"""Template-based pattern matching for query parsing.

Converts patterns like "how much is $number:words?" into a compiled regex,
matches it against an input line, and returns the extracted fields.

Syntax:
    $name:kind    — captures text of the given kind into a named field
    literal text  — matches literally (case-insensitive, flexible whitespace)
    ? ! . ,       — match literally, optionally preceded by whitespace

Patterns are anchored to the whole line unless built with anchored=False.

Field kinds are case-sensitive, since case is what tells dialect words from
item names:
    word     one lowercase word              "glob"
    words    run of lowercase words          "pish tegj glob"
    digit    one Roman digit                 "X"
    item     capitalized name, greedy        "Iron", "Dark Matter"
    integer  decimal digits                  "3910"

Examples:
    >>> p = TemplatePattern("$word:word is $digit:digit")
    >>> p.match("glob IS I")
    {'word': 'glob', 'digit': 'I'}
    >>> p.match("Glob is I") is None
    True
"""

import re

FIELD_KINDS = {
    "word": r"[a-z]+",
    "words": r"[a-z]+(?:\s+[a-z]+)*",
    "digit": r"[IVXLCDM]",
    "item": r"[A-Z].*",
    "integer": r"\d+",
}

_FIELD_RE = re.compile(r"\$([a-zA-Z_]\w*):([a-z]+)")
_PUNCTUATION = "?!.,"


class TemplatePattern:
    """A compiled template pattern that can match text and extract named fields.

    An anchored pattern must match the whole line. An unanchored one matches
    the first place in the line where it fits, so "Tell me, how much is glob?"
    still finds "how much is glob?".
    """

    def __init__(self, template, anchored=True):
        self.template = template
        self.anchored = anchored
        self._regex, self._fields = _compile(template, anchored)

    def match(self, text):
        """Match text against this pattern. Returns dict of fields or None."""
        if self.anchored:
            m = self._regex.match(text.strip())
        else:
            m = self._regex.search(text)
        if m is None:
            return None
        return {name: m.group(name).strip() for name in self._fields}

    def __repr__(self):
        return f"TemplatePattern({self.template!r})"


# --- Compilation internals ---

def _compile(template, anchored=True):
    """Compile a template string to a (compiled_regex, field_names) tuple."""
    parts = []
    fields = []
    literal = []

    def flush_literal():
        if literal:
            parts.append("(?i:" + re.escape("".join(literal)) + ")")
            literal.clear()

    i = 0
    s = template
    while i < len(s):
        if s[i] == "$":
            m = _FIELD_RE.match(s, i)
            if m is None:
                raise ValueError(f"Bad field at position {i} in {template!r}")
            name, kind = m.groups()
            if kind not in FIELD_KINDS:
                raise ValueError(f"Unknown field kind {kind!r} in {template!r}")
            if name in fields:
                raise ValueError(f"Duplicate field {name!r} in {template!r}")
            flush_literal()
            fields.append(name)
            parts.append(f"(?P<{name}>{FIELD_KINDS[kind]})")
            i = m.end()
        elif s[i].isspace():
            flush_literal()
            while i < len(s) and s[i].isspace():
                i += 1
            parts.append(r"\s+")
        elif s[i] in _PUNCTUATION:
            flush_literal()
            parts.append(r"\s*" + re.escape(s[i]))
            i += 1
        else:
            literal.append(s[i])
            i += 1
    flush_literal()

    pattern = "".join(parts)
    if anchored:
        pattern = "^" + pattern + "$"
    return re.compile(pattern), fields
