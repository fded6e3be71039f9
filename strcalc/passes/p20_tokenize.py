"""
Pass 20 — Tokenization

Splits the body on the separator set and trims each token.
"""

from typing import Iterable

from strcalc.core.context import CalcContext
from strcalc.core.logging import get_pass_logger

PASS_NAME = "p20_tokenize"
log = get_pass_logger(PASS_NAME)

# Unicode White_Space. str.strip() with no argument would also drop
# the U+001C..U+001F separator controls, which are not whitespace.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_on_separators(text: str, separators: Iterable[str]) -> list[str]:
    """
    Split text at every character that is a separator.

    Each separator character is its own split point, so with several
    separators active they are interchangeable. Empty text yields no
    tokens; otherwise n separators always yield n + 1 pieces.
    """
    if not text:
        return []

    seps = set(separators)
    pieces: list[str] = []
    start = 0
    for i, c in enumerate(text):
        if c in seps:
            pieces.append(text[start:i])
            start = i + 1
    pieces.append(text[start:])
    return pieces


def tokenize(ctx: CalcContext) -> CalcContext:
    """Split ``ctx.body`` into whitespace-trimmed tokens."""
    ctx.tokens = [piece.strip(WHITESPACE) for piece in split_on_separators(ctx.body, ctx.separators)]

    log.verbose("tokenized", tokens=len(ctx.tokens))
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="tokenized",
        after=f"{len(ctx.tokens)} tokens",
    )
    return ctx
