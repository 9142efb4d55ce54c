#!/usr/bin/env python3
"""
Tests for printing token trees back to text.
"""

import pytest
from named_functions.frontend.printer import render
from named_functions.shared import Delimiter, Spacing, Ident, Punct, Literal, Group


class TestRender:
    """Spacing rules"""

    @pytest.mark.parametrize("source, expected", [
        ("a::b", "a :: b"),
        ("x -> y", "x -> y"),
        ("foo(a, b)", "foo (a , b)"),
        ("{}", "{ }"),
        ("{a}", "{ a }"),
        ("[1; 2]", "[1 ; 2]"),
        ("&'a str", "&'a str"),
        ('println!("{}", x)', 'println ! ("{}" , x)'),
    ])
    def test_from_source(self, parser, source, expected):
        assert render(parser.parse(source)) == expected

    def test_empty(self):
        assert render([]) == ""

    def test_invisible_group(self):
        tokens = [Ident("a"), Group(Delimiter.NONE, [Ident("b"), Ident("c")]), Ident("d")]
        assert render(tokens) == "a b c d"

    def test_joint_punct_before_group(self):
        tokens = [Punct("#", Spacing.JOINT), Group(Delimiter.BRACKET, [Ident("test")])]
        assert render(tokens) == "#[test]"

    def test_group_str(self):
        assert str(Group(Delimiter.PARENTHESIS, [Literal("1"), Punct(","), Literal("2")])) == "(1 , 2)"


class TestRoundTrip:
    """Printed output reads back as the same tree"""

    @pytest.mark.parametrize("source", [
        "fn main() { let v: Vec<u8> = vec![1, 2, 3]; println!(\"{:?}\", v); }",
        "impl<'a> Iterator for It<'a> { type Item = &'a str; fn next(&mut self) -> Option<Self::Item> { None } }",
        "#[cfg(test)] mod tests { use super::*; #[test] fn t() { assert_eq!(1 + 1, 2); } }",
        "match x { 0..=9 => 'd', _ => '?' }",
    ])
    def test_round_trip(self, parser, source):
        tree = parser.parse(source)
        assert parser.parse(render(tree)) == tree
