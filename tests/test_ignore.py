"""Tests for ignore-rule resolution and matching."""

from pathlib import Path

from superagents.analyzer.ignore import (
    DEFAULT_IGNORES,
    IgnoreRules,
    read_ignore_file,
    resolve_ignore_rules,
)


class TestResolveIgnoreRules:
    """Tests for building the effective pattern list."""

    def test_defaults_without_ignore_file(self, tmp_path: Path) -> None:
        """A project without .gitignore gets only the built-in rules."""
        assert resolve_ignore_rules(tmp_path) == list(DEFAULT_IGNORES)

    def test_builtins_come_first(self, tmp_path: Path) -> None:
        """Project rules are appended after the built-ins, in file order."""
        (tmp_path / ".gitignore").write_text("vendor/\n*.log\n")

        rules = resolve_ignore_rules(tmp_path)

        assert rules[: len(DEFAULT_IGNORES)] == list(DEFAULT_IGNORES)
        assert rules[len(DEFAULT_IGNORES):] == ["vendor/", "*.log"]

    def test_skips_blank_comment_and_negated_lines(self, tmp_path: Path) -> None:
        """Blank lines, comments and negations are not rules."""
        (tmp_path / ".gitignore").write_text("# build output\n\n  \ntmp/\n!keep.txt\n")

        assert read_ignore_file(tmp_path) == ["tmp/"]

    def test_extra_rules_appended_last(self, tmp_path: Path) -> None:
        """Configured extra patterns follow the ignore file's rules."""
        (tmp_path / ".gitignore").write_text("vendor/\n")

        rules = resolve_ignore_rules(tmp_path, ["generated/"])

        assert rules[-2:] == ["vendor/", "generated/"]

    def test_unreadable_ignore_file_is_empty(self, tmp_path: Path) -> None:
        """An ignore path that cannot be read behaves like a missing file."""
        (tmp_path / ".gitignore").mkdir()

        assert read_ignore_file(tmp_path) == []
        assert resolve_ignore_rules(tmp_path) == list(DEFAULT_IGNORES)

    def test_defaults_cover_dependency_and_build_dirs(self) -> None:
        """Built-ins exclude version control, dependencies and build output."""
        for rule in (".git/", "node_modules/", "dist/", "build/", ".next/"):
            assert rule in DEFAULT_IGNORES


class TestIgnoreRules:
    """Tests for the gitignore-style matcher."""

    def test_excludes_files_under_dependency_cache(self) -> None:
        """Files below node_modules are excluded."""
        rules = IgnoreRules(DEFAULT_IGNORES)

        assert rules.is_excluded("node_modules/react/index.js")
        assert rules.is_excluded("packages/web/node_modules/x/y.js")

    def test_keeps_source_files(self) -> None:
        """Ordinary source files are not excluded."""
        rules = IgnoreRules(DEFAULT_IGNORES)

        assert not rules.is_excluded("src/app.ts")
        assert not rules.is_excluded("package.json")

    def test_matches_directories(self) -> None:
        """Directory rules match the directory itself."""
        rules = IgnoreRules(DEFAULT_IGNORES)

        assert rules.matches_dir("dist")
        assert rules.matches_dir("coverage/")
        assert not rules.matches_dir("src")

    def test_double_star_rule_excludes_nested_files(self) -> None:
        """``vendor/**`` excludes every file below vendor/."""
        rules = IgnoreRules(["vendor/**"])

        assert rules.is_excluded("vendor/legacy.ts")
        assert rules.is_excluded("vendor/components/Old.tsx")
        assert not rules.is_excluded("src/vendor.ts")

    def test_file_glob_rule(self) -> None:
        """Extension globs match at any depth."""
        rules = IgnoreRules(["*.log"])

        assert rules.is_excluded("debug.log")
        assert rules.is_excluded("logs/server/debug.log")
        assert not rules.is_excluded("src/log.ts")

    def test_for_project_reads_ignore_file(self, tmp_path: Path) -> None:
        """The classmethod resolves rules from the project root."""
        (tmp_path / ".gitignore").write_text("secret/\n")

        rules = IgnoreRules.for_project(tmp_path)

        assert "secret/" in rules.patterns
        assert rules.is_excluded("secret/keys.json")
