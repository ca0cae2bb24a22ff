"""Tests for source validation rules and the validator."""

from pathlib import Path

import pytest

from bemgen.builder.classify import classify
from bemgen.config import GeneratorConfig
from bemgen.discovery import StylesheetFile
from bemgen.model.diagnostic import Diagnostic, Severity
from bemgen.naming import get_parser
from bemgen.validation import ValidationError, validate, validate_or_raise
from bemgen.validation.rules import (
    BlockSource,
    check_block_has_styles,
    check_block_matches_directory,
    check_duplicate_modifiers,
    check_file_names,
)

SUFFIX = ".post.css"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _source(block: str, *relpaths: str) -> BlockSource:
    sheets = [
        StylesheetFile(path=Path("/src") / block / rel, css_path=f"./css/{rel}")
        for rel in relpaths
    ]
    return BlockSource(name=block, stylesheets=sheets, parser=get_parser(), suffix=SUFFIX)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestCheckFileNames:
    def test_valid_names(self):
        assert check_file_names(_source("b", "b.post.css", "b__e_m_v.post.css")) == []

    def test_invalid_name(self):
        diags = check_file_names(_source("b", "b.post.css", "B-Bad.post.css"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].path == "/src/b/B-Bad.post.css"
        assert "B-Bad.post.css" in diags[0].message


class TestCheckBlockMatchesDirectory:
    def test_matching(self):
        assert check_block_matches_directory(_source("b", "b.post.css")) == []

    def test_foreign_block(self):
        diags = check_block_matches_directory(_source("b", "b.post.css", "other_x_y.post.css"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert "'other'" in diags[0].message


class TestCheckDuplicateModifiers:
    def test_no_duplicates(self):
        src = _source("b", "b_theme_red.post.css", "b__e_theme_red.post.css")
        assert check_duplicate_modifiers(src) == []

    def test_duplicate_pair(self):
        src = _source("b", "a/b_theme_red.post.css", "z/b_theme_red.post.css")
        diags = check_duplicate_modifiers(src)
        assert len(diags) == 1
        assert diags[0].path == "/src/b/z/b_theme_red.post.css"
        assert "/src/b/a/b_theme_red.post.css" in diags[0].message

    def test_malformed_names_skipped(self):
        assert check_duplicate_modifiers(_source("b", "Bad.post.css")) == []


class TestCheckBlockHasStyles:
    def test_empty_block(self):
        diags = check_block_has_styles(_source("b"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO

    def test_block_with_styles(self):
        assert check_block_has_styles(_source("b", "b.post.css")) == []


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidator:
    def test_clean_tree(self, source_root, write_styles):
        write_styles("my-block", "my-block.post.css", "my-block__icon.post.css")
        assert validate(source_root) == []

    def test_collects_across_blocks(self, source_root, write_styles):
        write_styles("alpha", "Alpha.post.css")
        write_styles("beta", "beta.post.css", "gamma.post.css")
        (source_root / "empty").mkdir()
        diags = validate(source_root)
        rules = sorted(d.rule for d in diags)
        assert rules == [
            "check_block_has_styles",
            "check_block_matches_directory",
            "check_file_names",
        ]

    def test_respects_config_suffix(self, source_root, write_styles):
        write_styles("menu", "menu.css", "menu--open.css")
        config = GeneratorConfig(suffix=".css", naming="two-dashes")
        assert validate(source_root, config) == []

    def test_extra_rules(self, source_root, write_styles):
        write_styles("my-block", "my-block.post.css")

        def always(source: BlockSource) -> list[Diagnostic]:
            return [Diagnostic(rule="always", severity=Severity.INFO, message="hi", block=source.name)]

        diags = validate(source_root, extra_rules=[always])
        assert [d.rule for d in diags] == ["always"]

    def test_validate_or_raise(self, source_root, write_styles):
        write_styles("my-block", "Nope.post.css")
        with pytest.raises(ValidationError) as excinfo:
            validate_or_raise(source_root)
        assert len(excinfo.value.diagnostics) == 1

    def test_validate_or_raise_returns_warnings(self, source_root, write_styles):
        write_styles("my-block", "other.post.css")
        diags = validate_or_raise(source_root)
        assert [d.severity for d in diags] == [Severity.WARNING]


class TestDiagnosticStr:
    def test_with_path(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="bad", path="/x.css")
        assert str(d) == "ERROR [file=/x.css]: bad"

    def test_with_block(self):
        d = Diagnostic(rule="r", severity=Severity.INFO, message="m", block="b")
        assert str(d) == "INFO [block=b]: m"


class TestBlockSource:
    def test_classifications_match_classify(self):
        source = _source("b", "b.post.css", "b__e_m_v.post.css", "B-Bad.post.css")
        expected = [classify(sheet, source.parser, SUFFIX) for sheet in source.stylesheets[:2]]
        assert source.classifications() == expected

    def test_malformed_lists_unparsable_files(self):
        source = _source("b", "b.post.css", "B-Bad.post.css")
        assert [sheet.basename for sheet in source.malformed()] == ["B-Bad.post.css"]

    def test_every_stylesheet_is_classified_or_malformed(self):
        source = _source("b", "b.post.css", "x_y.post.css", "Nope.post.css", "b__e.post.css")
        assert len(source.classifications()) + len(source.malformed()) == len(source.stylesheets)
