"""Shell-like argument splitting for simulator command lines."""

from __future__ import annotations

QUOTES = ("'", '"')


def split_args(line: str) -> list[str]:
    """
    Split a command line on whitespace, honouring quotes.

    Single and double quotes group words and are dropped from the result;
    a quote of the other kind inside a quoted run is kept literally. An
    unterminated quote runs to the end of the line. Empty tokens are
    dropped.

    Example:
        dbt ls --select "staging marts"  ->  ['dbt', 'ls', '--select', 'staging marts']
    """
    args: list[str] = []
    current: list[str] = []
    in_quote: str | None = None

    for ch in line:
        if ch in QUOTES and (in_quote is None or in_quote == ch):
            in_quote = ch if in_quote is None else None
            continue
        if ch.isspace() and in_quote is None:
            if current:
                args.append("".join(current))
            current = []
            continue
        current.append(ch)

    if current:
        args.append("".join(current))
    return args
