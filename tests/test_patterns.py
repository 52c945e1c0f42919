"""Tests for structural pattern detection."""

from pathlib import Path

import pytest

from superagents.analyzer import patterns as patterns_module
from superagents.analyzer.ignore import IgnoreRules, resolve_ignore_rules
from superagents.analyzer.patterns import PATTERN_PROBES, detect_patterns
from superagents.models import PatternType


def patterns_by_type(root: Path) -> dict:
    ignore = IgnoreRules(resolve_ignore_rules(root))
    return {p.type: p for p in detect_patterns(root, ignore)}


class TestDetectPatterns:
    """Tests for the glob probes."""

    def test_api_routes_and_components(self, make_project) -> None:
        """App Router routes and component files are detected with full weight."""
        root = make_project({
            "app/api/users/route.ts": "",
            "app/api/orders/[id]/route.ts": "",
            "src/components/Button.tsx": "",
        })

        found = patterns_by_type(root)

        routes = found[PatternType.API_ROUTES]
        assert routes.paths == ("app/api/orders/[id]/route.ts", "app/api/users/route.ts")
        assert routes.confidence == 1.0
        assert found[PatternType.COMPONENTS].paths == ("src/components/Button.tsx",)

    def test_generic_directories_weigh_less(self, make_project) -> None:
        """Naming-convention probes carry lower confidence."""
        root = make_project({
            "src/services/billing.ts": "",
            "src/helpers/format.js": "",
            "src/entities/user.ts": "",
        })

        found = patterns_by_type(root)

        assert found[PatternType.SERVICES].confidence == 0.9
        assert found[PatternType.UTILS].confidence == 0.7
        assert found[PatternType.MODELS].paths == ("src/entities/user.ts",)

    def test_test_file_suffixes(self, make_project) -> None:
        """``.test.`` and ``.spec.`` files are tests."""
        root = make_project({"src/a.test.ts": "", "src/b.spec.js": "", "src/c.ts": ""})

        found = patterns_by_type(root)

        assert found[PatternType.TESTS].paths == ("src/a.test.ts", "src/b.spec.js")

    def test_server_actions(self, make_project) -> None:
        """actions files under app/ are server actions."""
        root = make_project({"app/checkout/actions.ts": ""})

        assert PatternType.SERVER_ACTIONS in patterns_by_type(root)

    def test_patterns_without_matches_are_omitted(self, make_project) -> None:
        """Only probes with at least one match appear."""
        root = make_project({"README.md": "# hi\n"})

        assert patterns_by_type(root) == {}

    def test_scan_order_files_before_subdirectories(self, make_project) -> None:
        """Paths keep the sorted top-down walk order."""
        root = make_project({
            "components/forms/Input.tsx": "",
            "components/Card.tsx": "",
            "components/Alert.tsx": "",
        })

        paths = patterns_by_type(root)[PatternType.COMPONENTS].paths

        assert paths == (
            "components/Alert.tsx",
            "components/Card.tsx",
            "components/forms/Input.tsx",
        )

    def test_idempotent(self, nextjs_project: Path) -> None:
        """Two runs over an unchanged tree give identical results."""
        ignore = IgnoreRules(resolve_ignore_rules(nextjs_project))

        first = detect_patterns(nextjs_project, ignore)
        second = detect_patterns(nextjs_project, ignore)

        assert first == second
        assert first

    def test_ignored_vendor_files_excluded(self, make_project) -> None:
        """A ``vendor/**`` rule removes matches that would otherwise count."""
        root = make_project({
            ".gitignore": "vendor/**\n",
            "vendor/components/Legacy.tsx": "",
            "components/Button.tsx": "",
        })

        found = patterns_by_type(root)

        assert found[PatternType.COMPONENTS].paths == ("components/Button.tsx",)

    def test_dependency_cache_never_scanned(self, make_project) -> None:
        """Files in node_modules do not produce patterns."""
        root = make_project({"node_modules/ui/components/Button.tsx": ""})

        assert patterns_by_type(root) == {}

    def test_failing_matcher_counts_as_no_match(
        self, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A glob match error is swallowed instead of aborting detection."""
        root = make_project({"components/Button.tsx": ""})

        def broken_match(*args, **kwargs):
            raise ValueError("bad glob")

        monkeypatch.setattr("superagents.analyzer.patterns.match_files", broken_match)

        assert detect_patterns(root, IgnoreRules([])) == []

    def test_failing_walk_yields_no_patterns(
        self, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An unreadable tree yields an empty result rather than an error."""
        root = make_project({"components/Button.tsx": ""})

        def broken_walk(*args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr("superagents.analyzer.patterns.walk_files", broken_walk)

        assert detect_patterns(root, IgnoreRules([])) == []

    def test_tree_walked_once_for_all_patterns(
        self, make_project, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Every pattern matches against a single directory walk."""
        root = make_project({
            "components/Button.tsx": "",
            "hooks/useAuth.ts": "",
            "app/api/users/route.ts": "",
        })
        calls: list[Path] = []
        real_walk = patterns_module.walk_files

        def counting_walk(project_root, ignore):
            calls.append(project_root)
            return real_walk(project_root, ignore)

        monkeypatch.setattr("superagents.analyzer.patterns.walk_files", counting_walk)

        found = detect_patterns(root, IgnoreRules([]))

        assert len(found) >= 2
        assert calls == [root]

    def test_every_probe_has_a_weight(self) -> None:
        """All probe weights lie in (0, 1]."""
        for probe in PATTERN_PROBES:
            assert 0.0 < probe.confidence <= 1.0
