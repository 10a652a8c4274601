"""Parsers for structured field items, lists and dictionaries."""

from __future__ import annotations

import string
from typing import Dict, List, Optional, Union

from .lexer import Limits, Scanner
from .values import BareItem, InnerList, Item, Parameter

_ALPHA = frozenset(string.ascii_letters)
_INTEGER_START = frozenset(string.digits) | {"-"}

Member = Union[Item, InnerList]


class Parser(Scanner):
    """Parses items, lists and dictionaries from a header value."""

    def parse_bare_item(self) -> BareItem:
        """Parse a boolean, integer, string, byte sequence or token."""
        if self.at_eof():
            raise self.error("expected bare item, got EOF")
        char = self.peek()
        if char == "?":
            return self.parse_boolean()
        if char in _INTEGER_START:
            return self.parse_integer()
        if char == '"':
            return self.parse_string()
        if char == ":":
            return self.parse_byte_sequence()
        if char == "*" or char in _ALPHA:
            return self.parse_token()
        raise self.error("invalid bare item start character")

    def parse_parameters(self) -> List[Parameter]:
        """Parse zero or more ``;key`` or ``;key=value`` parameters in order."""
        params: List[Parameter] = []
        limit = self.limits.max_parameters
        while self.peek() == ";":
            if limit > 0 and len(params) >= limit:
                raise self.error(f"parameters count {len(params) + 1} exceeds limit {limit}")
            self.offset += 1
            key = self.parse_token().value
            value: BareItem = True
            if self.peek() == "=":
                self.offset += 1
                value = self.parse_bare_item()
            params.append(Parameter(key, value))
        return params

    def parse_inner_list(self) -> InnerList:
        """Parse a parenthesised, space-separated inner list and its parameters."""
        if not self.consume("("):
            raise self.error("expected '(' at start of inner list")
        items: List[Item] = []
        limit = self.limits.max_inner_list_members
        while True:
            self.skip_sp()
            if self.peek() == ")":
                break
            if limit > 0 and len(items) >= limit:
                raise self.error(f"inner list members {len(items) + 1} exceeds limit {limit}")
            items.append(self.parse_item())
        if not self.consume(")"):
            raise self.error("expected ')' at end of inner list")
        return InnerList(items, self.parse_parameters())

    def parse_item(self) -> Item:
        """Parse a bare item followed by its parameters."""
        value = self.parse_bare_item()
        return Item(value, self.parse_parameters())

    def _parse_member(self) -> Member:
        if self.peek() == "(":
            return self.parse_inner_list()
        return self.parse_item()

    def _next_member(self, kind: str) -> bool:
        """Consume a separating comma; return False when the structure ends."""
        self.skip_ows()
        if self.peek() != ",":
            return False
        self.offset += 1
        self.skip_ows()
        if self.at_eof():
            raise self.error(f"trailing comma in {kind} not allowed")
        return True

    def parse_list(self) -> List[Member]:
        """Parse a comma-separated list of items and inner lists."""
        self.check_input_length()
        members: List[Member] = []
        limit = self.limits.max_dictionary_members
        while not self.at_eof():
            if limit > 0 and len(members) >= limit:
                raise self.error(f"list members {len(members) + 1} exceeds limit {limit}")
            members.append(self._parse_member())
            if not self._next_member("list"):
                break
        return members

    def parse_dictionary(self) -> Dict[str, Member]:
        """Parse a dictionary; keys keep first-seen order and the last value wins."""
        self.check_input_length()
        result: Dict[str, Member] = {}
        limit = self.limits.max_dictionary_members
        while not self.at_eof():
            if limit > 0 and len(result) >= limit:
                raise self.error(f"dictionary members {len(result) + 1} exceeds limit {limit}")
            key = self.parse_token().value
            char = self.peek()
            if char in (" ", "\t"):
                raise self.error("whitespace not allowed before '=' in dictionary")
            if char == "=":
                self.offset += 1
                value = self._parse_member()
            else:
                value = Item(True, [])
            result[key] = value
            if not self._next_member("dictionary"):
                break
        return result


def parse_item(data: str, limits: Optional[Limits] = None) -> Item:
    """Parse an item from ``data``."""
    return Parser(data, limits).parse_item()


def parse_list(data: str, limits: Optional[Limits] = None) -> List[Member]:
    """Parse a list from ``data``."""
    return Parser(data, limits).parse_list()


def parse_dictionary(data: str, limits: Optional[Limits] = None) -> Dict[str, Member]:
    """Parse a dictionary from ``data``."""
    return Parser(data, limits).parse_dictionary()