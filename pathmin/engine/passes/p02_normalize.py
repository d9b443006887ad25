"""P02 — Command Normalizer.

Enforce one segment per command: a token carrying several operand groups is
split into consecutive commands with the same code. Extra groups after a move
are implicit line-tos.
"""

from __future__ import annotations

from pathmin.engine.context import ARITY, Command, PathContext, Token
from pathmin.engine.errors import PathDataError
from pathmin.engine.registry import Stage, path_pass


def split_token(token: Token) -> list[Command]:
    kind = token.code.lower()
    arity = ARITY[kind]
    count = len(token.operands)

    if arity == 0:
        if count:
            raise PathDataError("close command takes no operands", token.code + token.text)
        return [Command(code=token.code)]

    if count == 0 or count % arity:
        raise PathDataError(
            f"'{token.code}' expects a multiple of {arity} operands, got {count}",
            token.code + token.text,
        )

    commands: list[Command] = []
    for i in range(0, count, arity):
        code = token.code
        if kind == "m" and i > 0:
            code = "L" if token.code.isupper() else "l"
        commands.append(Command(code=code, operands=list(token.operands[i : i + arity])))
    return commands


def normalize_commands(tokens: list[Token]) -> list[Command]:
    commands: list[Command] = []
    for token in tokens:
        commands.extend(split_token(token))

    if commands and commands[0].kind != "m":
        raise PathDataError("path data must begin with a move", tokens[0].code + tokens[0].text)
    return commands


@path_pass(
    id="P02",
    stage=Stage.NORMALIZE,
    dependencies=["P01"],
    description="Split multi-group tokens into atomic commands",
)
def normalize_path(ctx: PathContext) -> None:
    ctx.commands = normalize_commands(ctx.tokens)
