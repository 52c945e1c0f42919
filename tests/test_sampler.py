"""Tests for representative file sampling."""

from pathlib import Path

from superagents.analyzer.ignore import IgnoreRules, resolve_ignore_rules
from superagents.analyzer.sampler import (
    TRUNCATION_MARKER,
    FileSampler,
    sample_files,
    truncate_lines,
)
from superagents.config import SamplingLimits
from superagents.models import Framework, Pattern, PatternType, ProjectType


def make_pattern(*paths: str, type: PatternType = PatternType.COMPONENTS) -> Pattern:
    return Pattern(type=type, paths=paths, confidence=1.0, description="test")


class TestTruncateLines:
    """Tests for the line cap."""

    def test_short_content_unchanged(self) -> None:
        """Content within the cap is returned as is."""
        assert truncate_lines("a\nb\n", 5) == "a\nb\n"

    def test_marker_appended_on_own_line(self) -> None:
        """The marker follows the kept lines on a line of its own."""
        assert truncate_lines("a\nb\nc\n", 2) == f"a\nb\n{TRUNCATION_MARKER}"

    def test_only_newline_separates_lines(self) -> None:
        """Form feeds and Unicode line separators stay inside their line."""
        content = "".join(f"a\x0cb\u2028c{i}\n" for i in range(400))

        assert truncate_lines(content, 500) == content

    def test_truncated_form_feed_content_keeps_cap_lines(self) -> None:
        """Over the cap, exactly the first ``max_lines`` newline-separated lines survive."""
        original = [f"x\x0cy{i}" for i in range(10)]

        result = truncate_lines("\n".join(original) + "\n", 4)

        assert result.split("\n") == original[:4] + [TRUNCATION_MARKER]

    def test_trailing_newline_not_counted(self) -> None:
        """A file of exactly ``max_lines`` terminated lines is not truncated."""
        assert truncate_lines("a\nb\n", 2) == "a\nb\n"


class TestFileSampler:
    """Tests for sampling order, caps and admission."""

    def test_800_lines_truncated_to_500(self, make_project) -> None:
        """An oversized file keeps exactly 500 original lines plus the marker."""
        original = [f"const line{i} = {i};" for i in range(800)]
        root = make_project({"src/index.ts": "\n".join(original) + "\n"})

        files = sample_files(
            root, ProjectType.UNKNOWN, None, [], IgnoreRules([]), SamplingLimits()
        )

        lines = files[0].content.splitlines()
        assert len(lines) == 501
        assert lines[:500] == original[:500]
        assert lines[-1] == TRUNCATION_MARKER

    def test_priority_order(self, nextjs_project: Path) -> None:
        """Manifest, type config, framework config, patterns, then entry points."""
        ignore = IgnoreRules(resolve_ignore_rules(nextjs_project))
        patterns = [make_pattern("components/Button.tsx")]

        files = FileSampler(nextjs_project, ignore).sample(
            ProjectType.NEXTJS, Framework.NEXTJS, patterns
        )

        assert [f.path for f in files] == [
            "package.json",
            "tsconfig.json",
            "next.config.js",
            "components/Button.tsx",
            "app/layout.tsx",
            "app/page.tsx",
        ]
        assert files[3].purpose == "Example components"

    def test_at_most_three_files_per_pattern(self, make_project) -> None:
        """Only the first few paths of a pattern are tried, in pattern order."""
        names = [f"components/C{i}.tsx" for i in range(5)]
        root = make_project({name: "x\n" for name in names})

        files = FileSampler(root, IgnoreRules([])).sample(
            ProjectType.UNKNOWN, None, [make_pattern(*names)]
        )

        assert [f.path for f in files] == names[:3]

    def test_file_cap(self, make_project) -> None:
        """Sampling stops at the configured maximum."""
        names = [f"src/services/s{i}.ts" for i in range(3)]
        root = make_project({"package.json": "{}", **{n: "x\n" for n in names}})

        files = FileSampler(root, IgnoreRules([]), SamplingLimits(max_files=2)).sample(
            ProjectType.UNKNOWN, None, [make_pattern(*names, type=PatternType.SERVICES)]
        )

        assert [f.path for f in files] == ["package.json", "src/services/s0.ts"]

    def test_no_duplicate_paths(self, make_project) -> None:
        """A path found by several patterns is sampled once."""
        root = make_project({"lib/utils.test.ts": "x\n"})
        patterns = [
            make_pattern("lib/utils.test.ts", type=PatternType.UTILS),
            make_pattern("lib/utils.test.ts", type=PatternType.TESTS),
        ]

        files = FileSampler(root, IgnoreRules([])).sample(ProjectType.UNKNOWN, None, patterns)

        assert [f.path for f in files] == ["lib/utils.test.ts"]

    def test_oversized_file_skipped(self, make_project) -> None:
        """Files above the byte cap are skipped silently."""
        root = make_project({"package.json": "{" + " " * 100 + "}", "index.js": "x\n"})

        files = FileSampler(root, IgnoreRules([]), SamplingLimits(max_file_bytes=50)).sample(
            ProjectType.UNKNOWN, None, []
        )

        assert [f.path for f in files] == ["index.js"]

    def test_ignored_candidates_skipped(self, make_project) -> None:
        """Candidates excluded by the ignore rules are never read."""
        root = make_project({".gitignore": "vendor/**\n", "vendor/components/Legacy.tsx": "x\n"})
        ignore = IgnoreRules(resolve_ignore_rules(root))

        files = FileSampler(root, ignore).sample(
            ProjectType.UNKNOWN, None, [make_pattern("vendor/components/Legacy.tsx")]
        )

        assert files == []

    def test_framework_only_config(self, make_project) -> None:
        """Nuxt config is sampled from the framework when the type says nothing."""
        root = make_project({"nuxt.config.js": "export default {}\n"})

        files = FileSampler(root, IgnoreRules([])).sample(
            ProjectType.UNKNOWN, Framework.NUXTJS, []
        )

        assert [(f.path, f.purpose) for f in files] == [("nuxt.config.js", "Nuxt configuration")]

    def test_error_keeps_collected_files(self, make_project) -> None:
        """An unexpected failure stops sampling but keeps what was gathered."""
        root = make_project({"package.json": "{}", "tsconfig.json": "{}"})

        def exploding_patterns():
            raise RuntimeError("boom")
            yield

        files = FileSampler(root, IgnoreRules([])).sample(
            ProjectType.UNKNOWN, None, exploding_patterns()
        )

        assert [f.path for f in files] == ["package.json", "tsconfig.json"]

    def test_directory_candidate_skipped(self, make_project) -> None:
        """A candidate path that is a directory is not sampled."""
        root = make_project({"index.ts/README.md": "x\n"})

        assert FileSampler(root, IgnoreRules([])).sample(ProjectType.UNKNOWN, None, []) == []

    def test_non_utf8_file_sampled_with_replacement(self, make_project) -> None:
        """Latin-1 bytes do not drop the file; they decode to U+FFFD."""
        root = make_project({})
        (root / "index.js").write_bytes(b"// caf\xe9\nexport {}\n")

        files = FileSampler(root, IgnoreRules([])).sample(ProjectType.UNKNOWN, None, [])

        assert [f.path for f in files] == ["index.js"]
        assert files[0].content == "// caf\ufffd\nexport {}\n"

    def test_crlf_line_endings_preserved(self, make_project) -> None:
        """Sampled content keeps the file's original line endings."""
        root = make_project({})
        (root / "index.js").write_bytes(b"a\r\nb\r\n")

        files = FileSampler(root, IgnoreRules([])).sample(ProjectType.UNKNOWN, None, [])

        assert files[0].content == "a\r\nb\r\n"
