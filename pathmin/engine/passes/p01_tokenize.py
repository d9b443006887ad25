"""P01 — Tokenizer.

Normalize separators in the raw d attribute, then split it into one token per
command letter with its numeric operands parsed.
"""

from __future__ import annotations

import logging
import math
import re

from pathmin.engine.context import COMMAND_CODES, PathContext, Token
from pathmin.engine.errors import PathDataError
from pathmin.engine.registry import Stage, path_pass
from pathmin.utils.numbers import parse_number

logger = logging.getLogger(__name__)

# e/E belong to number exponents, never to commands
_LETTER = r"A-DF-Za-df-z"

_GLUED_DECIMAL_RE = re.compile(r"(\.\d+)(?=\.\d)")
_SPACE_BEFORE_LETTER_RE = re.compile(rf"\s+([{_LETTER}])")
_SPACE_BEFORE_MINUS_RE = re.compile(r"\s+-")
_TOKEN_RE = re.compile(rf"([{_LETTER}])([^{_LETTER}]*)")
# A field is an optional sign plus a run of non-space, non-sign characters;
# a sign right after an exponent marker stays inside the field.
_FIELD_RE = re.compile(r"[+-]?(?:[^\s+-]|(?<=[eE])[+-])+|[+-]")
# e/E with no mantissa in front is a letter, not part of a number
_STRAY_EXPONENT_RE = re.compile(r"[+-]?[eE]")


def normalize_path_text(d: str) -> str:
    """Apply the separator rules that make the grammar splittable."""
    d = d.replace(",", " ")
    d = _GLUED_DECIMAL_RE.sub(r"\1 ", d)  # 1.5.5 → 1.5 .5
    d = _SPACE_BEFORE_LETTER_RE.sub(r"\1", d)
    d = _SPACE_BEFORE_MINUS_RE.sub("-", d)
    return d.strip()


def split_fields(text: str) -> list[str]:
    return _FIELD_RE.findall(text)


def tokenize(d: str, strict: bool = False) -> list[Token]:
    """Split normalized path text into command tokens."""
    if not d:
        return []
    if not re.match(rf"[{_LETTER}]", d):
        raise PathDataError("path data must start with a command letter", d[:16])

    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(d):
        code, text = match.group(1), match.group(2).strip()
        if code not in COMMAND_CODES:
            raise PathDataError("unknown path command", match.group(0)[:16])

        operands: list[float] = []
        for field in split_fields(text):
            if _STRAY_EXPONENT_RE.match(field):
                raise PathDataError("unknown path command", field)
            value = parse_number(field)
            if math.isnan(value):
                if strict:
                    raise PathDataError("malformed number", field)
                logger.debug("Malformed operand %r in %s%s", field, code, text)
            operands.append(value)

        tokens.append(Token(code=code, text=text, operands=operands))
    return tokens


@path_pass(
    id="P01",
    stage=Stage.TOKENIZE,
    description="Split raw path data into command tokens",
)
def tokenize_path(ctx: PathContext) -> None:
    ctx.normalized = normalize_path_text(ctx.raw or "")
    ctx.tokens = tokenize(ctx.normalized, strict=ctx.config.strict_numbers)
