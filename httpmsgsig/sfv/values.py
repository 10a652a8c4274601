"""Structured field value types: tokens, parameters, items and inner lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Token:
    """An unquoted identifier, kept apart from quoted strings."""

    value: str

    def __str__(self) -> str:
        return self.value


BareItem = Union[bool, int, str, bytes, Token]


@dataclass
class Parameter:
    """A key/value pair attached to an item or an inner list."""

    key: str
    value: BareItem = True


@dataclass
class Item:
    """A bare item together with its parameters."""

    value: BareItem
    parameters: List[Parameter] = field(default_factory=list)


@dataclass
class InnerList:
    """A parenthesised sequence of items with parameters of its own."""

    items: List[Item] = field(default_factory=list)
    parameters: List[Parameter] = field(default_factory=list)