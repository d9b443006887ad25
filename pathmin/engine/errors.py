"""Errors raised for path data the optimizer refuses to rewrite."""

from __future__ import annotations


class PathDataError(ValueError):
    """Path data violates a precondition (unknown command, bad operand count, ...)."""

    def __init__(self, message: str, token: str = "") -> None:
        self.token = token
        if token:
            message = f"{message}: {token!r}"
        super().__init__(message)
