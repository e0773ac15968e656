"""Conversion of user input into the upstream search mini-language.

The upstream API understands operators such as ``from:handle`` and
parenthetical grouping. Input that already uses them is forwarded untouched.
"""


def normalize_query(query: str) -> str:
    """Rewrite a bare ``@handle`` into ``(from:handle)``.

    Anything containing ``(`` or ``:`` is assumed to be in the mini-language
    already; plain keywords pass through unchanged.
    """
    if query.startswith("@") and "(" not in query:
        return f"(from:{query[1:]})"
    return query


def user_query(username: str) -> str:
    """Build the query returning tweets authored by ``username``."""
    handle = username[1:] if username.startswith("@") else username
    # "@" on its own yields "(from:)"; the upstream decides whether that is valid
    return f"(from:{handle})"
