"""Placeholder expansion and command-line tokenizing."""

import re
from collections.abc import Mapping

QUOTE_CHARS = ("'", '"')


def expand_variables(text: str, environment: Mapping[str, str]) -> str:
    """Replace every ``{name}`` placeholder whose name is in ``environment``.

    Expansion is a single pass: substituted values are never rescanned,
    and placeholders for unknown names are left as they are. There is no
    escape syntax.
    """
    if not environment:
        return text

    keys = sorted(environment, key=lambda k: (-len(k), k))
    pattern = re.compile("|".join(re.escape("{" + key + "}") for key in keys))
    return pattern.sub(lambda m: environment[m.group(0)[1:-1]], text)


def tokenize_command(command: str) -> list[str]:
    """Split a command line into argv tokens.

    Whitespace outside quotes separates tokens. A single or double quote
    starts a span that ends at the next quote of the same kind; inside it
    everything is literal. Backslashes have no special meaning, and empty
    tokens are dropped.

        >>> tokenize_command("git commit -m 'first commit'")
        ['git', 'commit', '-m', 'first commit']
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None

    for char in command:
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
        elif char in QUOTE_CHARS:
            quote = char
        elif char.isspace():
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens
