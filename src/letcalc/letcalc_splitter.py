"""
Token splitting helpers used by the letcalc parser.

All functions here are pure: they never mutate their input and always return
fresh lists. They perform no validation; callers decide whether the chunks
they get back are well formed.

Functions:
    split_tokens(tokens, delimiter, max_chunks=None) -> list[list[Token]]
        Partition a token sequence on a delimiter token type.
    split_by_top_level_operator(tokens, operator_types) -> TokenSplitResult | None
        Find the rightmost operator outside any parentheses and split around it.
    is_fully_parenthesized(tokens) -> bool
        True when a single parenthesized group spans the whole sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from typing import NamedTuple

from letcalc.letcalc_tokens import Token, TokenType

log = logging.getLogger(__name__)


class TokenSplitResult(NamedTuple):
    """One top-level operator split; `left + [operator] + right` is the input."""

    left: list[Token]
    operator: Token
    right: list[Token]


def split_tokens(
    tokens: Sequence[Token],
    delimiter: TokenType,
    max_chunks: int | None = None,
) -> list[list[Token]]:
    """Split `tokens` into chunks separated by `delimiter` tokens.

    Delimiters are dropped. Once `max_chunks - 1` chunks are complete, the
    remainder of the input, delimiters included, is appended verbatim to the
    current chunk. An empty trailing chunk is never produced, but empty
    interior chunks (two delimiters in a row) are kept.

    Args:
        tokens: The token sequence to split.
        delimiter: Token type that separates chunks.
        max_chunks: Upper bound on the number of chunks. `None` or 0 is unbounded.

    Returns:
        list[list[Token]]: The chunks in input order.

    Example:
        `x = a = b` split on EQUAL with `max_chunks=2` gives `[x]` and `[a = b]`.
    """
    chunks: list[list[Token]] = []
    current: list[Token] = []

    for i, tok in enumerate(tokens):
        if max_chunks and len(chunks) == max_chunks - 1:
            current.extend(tokens[i:])
            break

        if tok.type == delimiter:
            chunks.append(current)
            current = []
        else:
            current.append(tok)

    if current:
        chunks.append(current)

    return chunks


def split_by_top_level_operator(
    tokens: Sequence[Token],
    operator_types: Collection[TokenType],
) -> TokenSplitResult | None:
    """Split around the rightmost operator of `operator_types` at paren depth 0.

    The scan runs right to left, so `depth` counts how many groups we are
    inside *as seen from the right*: RPAREN opens a group (+1) and LPAREN
    closes it (-1). Do not flip this to the left-to-right convention; a match
    is only taken at depth exactly 0, and a negative depth (unmatched LPAREN)
    simply never matches.

    Picking the rightmost operator makes it the outermost node, which yields
    left-associative trees for same-tier operators (`a - b - c` is
    `(a - b) - c`).

    Args:
        tokens: The token range to inspect.
        operator_types: Operator token types eligible as the split point.

    Returns:
        TokenSplitResult | None: The split, or None if no top-level operator exists.
    """
    depth = 0
    for i in range(len(tokens) - 1, -1, -1):
        tok = tokens[i]
        if tok.type == TokenType.RPAREN:
            depth += 1
        elif tok.type == TokenType.LPAREN:
            depth -= 1

        if depth == 0 and tok.type in operator_types:
            log.debug("Top-level %s at index %d of %d", tok.type, i, len(tokens))
            return TokenSplitResult(list(tokens[:i]), tok, list(tokens[i + 1 :]))

    return None


def is_fully_parenthesized(tokens: Sequence[Token]) -> bool:
    """Return True if one parenthesized group spans all of `tokens`.

    The depth (LPAREN +1, RPAREN -1, scanning left to right) must return to 0
    at the last token and not before, so `(a) + (b)` is rejected. Unbalanced
    input is reported as not fully parenthesized rather than as an error.
    """
    if not tokens:
        return False
    if tokens[0].type != TokenType.LPAREN or tokens[-1].type != TokenType.RPAREN:
        return False

    depth = 0
    last = len(tokens) - 1
    for i, tok in enumerate(tokens):
        if tok.type == TokenType.LPAREN:
            depth += 1
        elif tok.type == TokenType.RPAREN:
            depth -= 1

        if depth == 0 and i < last:
            return False

    return depth == 0


__all__ = [
    "TokenSplitResult",
    "is_fully_parenthesized",
    "split_by_top_level_operator",
    "split_tokens",
]
