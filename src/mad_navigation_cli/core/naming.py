import re

# Words are either capitalised/lowercase runs (``Profile``, ``user2``) or
# acronyms not followed by a lowercase letter (``HTTP`` in ``HTTPServer``).
_WORD_RE = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")


def split_words(raw: str) -> list[str]:
    return _WORD_RE.findall(raw)


def to_kebab_case(raw: str) -> str:
    """Convert a route name to its lowercase-hyphenated form.

    ``UserProfile`` -> ``user-profile``, ``HTTPServer`` -> ``http-server``.
    Already converted input is returned unchanged.
    """
    return "-".join(word.lower() for word in split_words(raw))
