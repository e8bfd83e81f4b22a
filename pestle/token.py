"""Tokens that mark where matched rules start and end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .position import Position

__all__ = ["Start", "End", "Token"]

R = TypeVar("R")


@dataclass(frozen=True)
class Start(Generic[R]):
    """The position where a matched rule starts."""

    rule: R
    pos: Position


@dataclass(frozen=True)
class End(Generic[R]):
    """The position where a matched rule ends."""

    rule: R
    pos: Position


Token = Union[Start, End]