"""
Pass 00 — Delimiter Resolution

Decides which separators apply and strips the custom header:
- Input starting with the header marker ("//") declares one custom
  separator: "//<c>\\n<numbers>"
- Anything else uses the default separators (comma and newline)
"""

from strcalc.core.context import CalcContext
from strcalc.core.errors import InvalidInputError
from strcalc.core.logging import get_pass_logger
from strcalc.ir.enums import SeparatorMode

PASS_NAME = "p00_resolve_delimiter"
log = get_pass_logger(PASS_NAME)


def resolve_delimiter(ctx: CalcContext) -> CalcContext:
    """
    Resolve the separator set and the text left to tokenize.

    The custom header is assumed to be exactly four characters. The
    character after the separator is only checked when the profile sets
    ``strict_header``.

    Raises:
        InvalidInputError: If the header has no separator character, or
            (strict profile only) the separator is not followed by a newline
    """
    text = ctx.raw_text
    settings = ctx.settings
    marker = settings.header_marker

    if not text.startswith(marker):
        ctx.mode = SeparatorMode.DEFAULT
        ctx.separators = tuple(settings.default_separators)
        ctx.body = text
        log.verbose("default_separators", separators=list(ctx.separators))
        ctx.add_trace(
            pass_name=PASS_NAME,
            action="resolved_default_separators",
            after=repr("".join(ctx.separators)),
        )
        return ctx

    sep_index = len(marker)
    if len(text) <= sep_index:
        raise InvalidInputError("custom separator header is incomplete")

    sep = text[sep_index]
    header_end = sep_index + 2  # separator + line terminator

    if settings.strict_header and text[sep_index + 1:header_end] != "\n":
        raise InvalidInputError("custom separator must be followed by a newline")

    ctx.mode = SeparatorMode.CUSTOM
    ctx.separators = (sep,)
    ctx.body = text[header_end:]

    log.verbose("custom_separator", separator=sep, body_chars=len(ctx.body))
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="resolved_custom_separator",
        before=repr(text[:header_end]),
        after=repr(sep),
    )

    return ctx
