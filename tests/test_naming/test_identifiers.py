"""Tests for identifier to component-name conversion."""

import pytest

from bemgen.naming.identifiers import split_words, to_component_name


class TestToComponentName:
    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("my-block", "MyBlock"),
            ("icon", "Icon"),
            ("page-header-nav", "PageHeaderNav"),
            ("snake_case_name", "SnakeCaseName"),
            ("nav-item2", "NavItem2"),
            ("already-Mixed", "AlreadyMixed"),
            ("fooBar", "FooBar"),
            ("HTMLParser", "HtmlParser"),
        ],
    )
    def test_conversion(self, identifier, expected):
        assert to_component_name(identifier) == expected

    def test_empty_string(self):
        assert to_component_name("") == ""

    def test_only_delimiters(self):
        assert to_component_name("--__") == ""

    def test_idempotent_on_component_names(self):
        assert to_component_name(to_component_name("my-block")) == "MyBlock"


class TestSplitWords:
    def test_splits_on_delimiters(self):
        assert split_words("a-b_c d") == ["a", "b", "c", "d"]

    def test_splits_digits(self):
        assert split_words("col12x") == ["col", "12", "x"]
