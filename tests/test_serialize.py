import pytest

from httpmsgsig.sfv.lexer import default_limits, no_limits
from httpmsgsig.sfv.parser import parse_dictionary, parse_list
from httpmsgsig.sfv.serialize import (
    is_valid_token,
    serialize_bare_item,
    serialize_dictionary,
    serialize_inner_list,
    serialize_item,
    serialize_list,
    serialize_parameters,
    serialize_string,
)
from httpmsgsig.sfv.values import InnerList, Item, Parameter, Token


@pytest.mark.parametrize(
    "item, expected",
    [
        (Item(True), "?1"),
        (Item(False), "?0"),
        (Item(42), "42"),
        (Item(-123), "-123"),
        (Item(Token("application/json")), "application/json"),
        (Item(Token("text/html:level-1")), "text/html:level-1"),
        (Item("hello world"), '"hello world"'),
        (Item('hello "world"'), '"hello \\"world\\""'),
        (Item(b"hello"), ":aGVsbG8=:"),
        (Item(Token("test"), [Parameter("flag", True)]), "test;flag"),
        (Item(Token("test"), [Parameter("name", Token("value"))]), "test;name=value"),
        (
            Item(123, [Parameter("a", True), Parameter("b", Token("text")), Parameter("c", 456)]),
            "123;a;b=text;c=456",
        ),
        (
            Item(123, [Parameter("a", False), Parameter("b", Token("text")), Parameter("c", 456)]),
            "123;a=?0;b=text;c=456",
        ),
    ],
)
def test_serialize_item(item, expected):
    assert serialize_item(item) == expected


@pytest.mark.parametrize(
    "inner_list, expected",
    [
        (InnerList([]), "()"),
        (InnerList([Item(1)]), "(1)"),
        (InnerList([Item(1), Item(2), Item(3)]), "(1 2 3)"),
        (InnerList([Item(Token("token")), Item(42), Item(True)]), "(token 42 ?1)"),
        (
            InnerList([Item(1), Item(2)], [Parameter("level", 5), Parameter("safe", True)]),
            "(1 2);level=5;safe",
        ),
        (
            InnerList([
                Item(Token("a"), [Parameter("x", 1)]),
                Item(Token("b"), [Parameter("y", 2)]),
                Item(Token("c"), [Parameter("z", False)]),
            ]),
            "(a;x=1 b;y=2 c;z=?0)",
        ),
    ],
)
def test_serialize_inner_list(inner_list, expected):
    assert serialize_inner_list(inner_list) == expected


@pytest.mark.parametrize(
    "dictionary, expected",
    [
        ({}, ""),
        ({"a": Item(1)}, "a=1"),
        ({"a": Item(1), "b": Item(-2), "c": Item(True), "d": Item(False)}, "a=1, b=-2, c, d=?0"),
        ({"a": Item(2), "b": Item(Token("b-string")), "d": Item(False)}, "a=2, b=b-string, d=?0"),
        ({"flag": Item(True), "other": Item(Token("value"))}, "flag, other=value"),
        ({"flag": Item(True, [Parameter("x", 1)])}, "flag=?1;x=1"),
        ({"list": InnerList([Item(1), Item(2)])}, "list=(1 2)"),
        (
            {"a": Item(Token("token")), "b": InnerList([Item(1)]), "c": Item(True)},
            "a=token, b=(1), c",
        ),
        (
            {
                "a": Item(1, [Parameter("x", 10)]),
                "b": InnerList([Item(2)], [Parameter("y", 20)]),
            },
            "a=1;x=10, b=(2);y=20",
        ),
    ],
)
def test_serialize_dictionary(dictionary, expected):
    assert serialize_dictionary(dictionary) == expected


def test_serialize_dictionary_rejects_bad_value():
    with pytest.raises(TypeError, match="invalid dictionary value type"):
        serialize_dictionary({"a": 1})


@pytest.mark.parametrize(
    "value, expected",
    [
        ("token", True),
        ("my-token", True),
        ("my_token", True),
        ("token123", True),
        ("text/html:level-1", True),
        ("application/json", True),
        ("*token", True),
        ("to*ken", True),
        ("to%ken", True),
        ("token.v1", True),
        ("", False),
        ("123token", False),
        ("hello world", False),
        ("hello,world", False),
        ("key=value", False),
        ("a;b", False),
        ('hello"world', False),
        ("hello(world)", False),
    ],
)
def test_is_valid_token(value, expected):
    assert is_valid_token(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello", '"hello"'),
        ("hello world", '"hello world"'),
        ('hello "world"', '"hello \\"world\\""'),
        ("hello\\world", '"hello\\\\world"'),
        ('say "hello\\world"', '"say \\"hello\\\\world\\""'),
        ("", '""'),
    ],
)
def test_serialize_string(value, expected):
    assert serialize_string(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "?1"),
        (False, "?0"),
        (42, "42"),
        (-999, "-999"),
        (Token("token"), "token"),
        ("hello world", '"hello world"'),
        (bytes([1, 2, 3]), ":AQID:"),
        (b"", "::"),
    ],
)
def test_serialize_bare_item(value, expected):
    assert serialize_bare_item(value) == expected


def test_serialize_bare_item_rejects_unsupported_type():
    with pytest.raises(TypeError, match="unsupported bare item type"):
        serialize_bare_item(1.5)


@pytest.mark.parametrize(
    "params, expected",
    [
        ([], ""),
        ([Parameter("flag", True)], ";flag"),
        ([Parameter("flag", False)], ";flag=?0"),
        ([Parameter("name", Token("value"))], ";name=value"),
        ([Parameter("count", 42)], ";count=42"),
        (
            [
                Parameter("a", True),
                Parameter("b", Token("text")),
                Parameter("c", 123),
                Parameter("d", False),
            ],
            ";a;b=text;c=123;d=?0",
        ),
    ],
)
def test_serialize_parameters(params, expected):
    assert serialize_parameters(params) == expected


@pytest.mark.parametrize(
    "text",
    ["a=1, b=2, c=3", "flag, other=value", "list=(1 2 3), item=token", "a=1;x=10, b=(1 2);y=20, c"],
)
def test_dictionary_round_trip(text):
    assert serialize_dictionary(parse_dictionary(text, no_limits())) == text


@pytest.mark.parametrize(
    "members, expected",
    [
        ([], ""),
        ([Item(Token("foo"))], "foo"),
        ([Item(Token("a")), Item(Token("b")), Item(Token("c"))], "a, b, c"),
        (
            [Item(Token("a"), [Parameter("p", 1)]), Item(Token("b"), [Parameter("q", 2)])],
            "a;p=1, b;q=2",
        ),
        ([InnerList([Item(Token("a")), Item(Token("b"))])], "(a b)"),
        (
            [
                InnerList([Item(Token("a")), Item(Token("b"))]),
                InnerList([Item(Token("c")), Item(Token("d"))]),
            ],
            "(a b), (c d)",
        ),
        (
            [
                Item(Token("foo")),
                InnerList([Item(Token("a")), Item(Token("b"))]),
                Item(Token("bar")),
            ],
            "foo, (a b), bar",
        ),
        ([Item(1), Item(2), Item(3)], "1, 2, 3"),
    ],
)
def test_serialize_list(members, expected):
    assert serialize_list(members) == expected


def test_serialize_list_rejects_bad_member():
    with pytest.raises(TypeError, match="invalid list member type"):
        serialize_list([Token("a")])


@pytest.mark.parametrize(
    "text",
    ["a, b, c", "1, 2, 3", "(a b), (c d)", "foo;p=1, bar;q=2", "(a b);x=1, (c d);y=2"],
)
def test_list_round_trip(text):
    assert serialize_list(parse_list(text, default_limits())) == text