"""Serialisation of structured field values to their canonical text."""

from __future__ import annotations

import base64
from typing import Iterable, Mapping, Union

from .values import BareItem, InnerList, Item, Parameter, Token

_TOKEN_PUNCTUATION = frozenset("*_-.:/%")


def serialize_string(value: str) -> str:
    """Quote ``value``, escaping backslashes and double quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def serialize_bare_item(value: BareItem) -> str:
    """Serialise a boolean, integer, token, string or byte sequence."""
    if isinstance(value, bool):
        return "?1" if value else "?0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Token):
        return value.value
    if isinstance(value, str):
        return serialize_string(value)
    if isinstance(value, (bytes, bytearray)):
        return ":" + base64.b64encode(bytes(value)).decode("ascii") + ":"
    raise TypeError(f"unsupported bare item type: {type(value).__name__}")


def serialize_parameters(parameters: Iterable[Parameter]) -> str:
    """Serialise parameters; boolean true values are written bare."""
    return "".join(
        f";{param.key}" if param.value is True
        else f";{param.key}={serialize_bare_item(param.value)}"
        for param in parameters
    )


def serialize_item(item: Item) -> str:
    """Serialise an item with its parameters."""
    return serialize_bare_item(item.value) + serialize_parameters(item.parameters)


def serialize_inner_list(inner_list: InnerList) -> str:
    """Serialise an inner list with its parameters."""
    body = " ".join(serialize_item(item) for item in inner_list.items)
    return f"({body})" + serialize_parameters(inner_list.parameters)


def _serialize_member(member: Union[Item, InnerList], what: str) -> str:
    if isinstance(member, Item):
        return serialize_item(member)
    if isinstance(member, InnerList):
        return serialize_inner_list(member)
    raise TypeError(f"invalid {what} type: {type(member).__name__}")


def serialize_dictionary(dictionary: Mapping[str, Union[Item, InnerList]]) -> str:
    """Serialise a dictionary; boolean true items without parameters are bare keys."""
    parts = []
    for key, value in dictionary.items():
        if isinstance(value, Item) and value.value is True and not value.parameters:
            parts.append(key)
        else:
            parts.append(f"{key}={_serialize_member(value, 'dictionary value')}")
    return ", ".join(parts)


def serialize_list(members: Iterable[Union[Item, InnerList]]) -> str:
    """Serialise a list of items and inner lists."""
    return ", ".join(_serialize_member(member, "list member") for member in members)


def is_valid_token(value: str) -> bool:
    """Return True if ``value`` is a syntactically valid token."""
    if not value:
        return False
    first, rest = value[0], value[1:]
    if not (first.isalpha() or first == "*"):
        return False
    return all(
        char.isalpha() or char.isdecimal() or char in _TOKEN_PUNCTUATION
        for char in rest
    )