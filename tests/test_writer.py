"""Tests for writing generated configuration."""

from pathlib import Path

import pytest

from superagents.models import GeneratedFile, GeneratedOutputs
from superagents.output.format_adapter import build_frontmatter, get_skill_globs
from superagents.output.writer import output_exists, write_outputs


@pytest.fixture
def outputs() -> GeneratedOutputs:
    return GeneratedOutputs(
        claude_md="# Shop\n",
        agents=(GeneratedFile("backend-engineer", "# Backend\n"),),
        skills=(GeneratedFile("prisma", "# Prisma"),),
    )


class TestWriteClaude:
    """Tests for the .claude/ layout."""

    def test_writes_every_file(self, tmp_path: Path, outputs: GeneratedOutputs) -> None:
        """Agents, skills and CLAUDE.md land in their folders."""
        summary = write_outputs(outputs, tmp_path)

        assert (tmp_path / ".claude" / "agents" / "backend-engineer.md").read_text() == "# Backend\n"
        assert (tmp_path / ".claude" / "skills" / "prisma.md").read_text() == "# Prisma\n"
        assert (tmp_path / "CLAUDE.md").read_text() == "# Shop\n"
        assert summary.total_files == 3
        assert summary.agents == ("backend-engineer",)
        assert summary.output_dir == tmp_path / ".claude"

    def test_refuses_to_overwrite(self, tmp_path: Path, outputs: GeneratedOutputs) -> None:
        """An existing .claude/ is kept unless overwriting."""
        (tmp_path / ".claude").mkdir()

        with pytest.raises(FileExistsError):
            write_outputs(outputs, tmp_path)

    def test_existing_claude_md_alone_counts_as_output(
        self, tmp_path: Path, outputs: GeneratedOutputs
    ) -> None:
        """A hand-written CLAUDE.md without .claude/ is not overwritten silently."""
        (tmp_path / "CLAUDE.md").write_text("# Mine\n")

        assert output_exists(tmp_path, "claude")
        assert not output_exists(tmp_path, "cursor")
        with pytest.raises(FileExistsError):
            write_outputs(outputs, tmp_path)
        assert (tmp_path / "CLAUDE.md").read_text() == "# Mine\n"

    def test_nothing_written_yet(self, tmp_path: Path) -> None:
        """A fresh project has no claude output."""
        assert not output_exists(tmp_path, "claude")

    def test_overwrite_keeps_hooks(self, tmp_path: Path, outputs: GeneratedOutputs) -> None:
        """Stale agents are replaced but hooks survive."""
        claude = tmp_path / ".claude"
        (claude / "agents").mkdir(parents=True)
        (claude / "agents" / "old.md").write_text("old")
        (claude / "hooks").mkdir()
        (claude / "hooks" / "pre.sh").write_text("echo hi")

        write_outputs(outputs, tmp_path, overwrite=True)

        assert not (claude / "agents" / "old.md").exists()
        assert (claude / "hooks" / "pre.sh").exists()
        assert output_exists(tmp_path, "claude")


class TestWriteCursor:
    """Tests for the .cursor/rules layout."""

    def test_mdc_rules_with_frontmatter(self, tmp_path: Path, outputs: GeneratedOutputs) -> None:
        """Every rule file starts with frontmatter naming its globs."""
        summary = write_outputs(outputs, tmp_path, target="cursor")

        rules = tmp_path / ".cursor" / "rules"
        project = (rules / "project.mdc").read_text()
        skill = (rules / "skills" / "prisma.mdc").read_text()
        assert project.startswith('---\nname: "Project Context"')
        assert project.endswith("# Shop\n")
        assert '  - "prisma/**/*"' in skill
        assert (rules / "agents" / "backend-engineer.mdc").exists()
        assert summary.output_dir == rules
        assert not (tmp_path / "CLAUDE.md").exists()

    def test_refuses_to_overwrite(self, tmp_path: Path, outputs: GeneratedOutputs) -> None:
        """Existing rules are kept unless overwriting."""
        (tmp_path / ".cursor" / "rules").mkdir(parents=True)

        with pytest.raises(FileExistsError):
            write_outputs(outputs, tmp_path, target="cursor")

    def test_unknown_target(self, tmp_path: Path, outputs: GeneratedOutputs) -> None:
        """Only claude and cursor layouts exist."""
        with pytest.raises(ValueError, match="Unknown target"):
            write_outputs(outputs, tmp_path, target="vim")


class TestFormatAdapter:
    """Tests for Cursor frontmatter helpers."""

    def test_frontmatter_without_globs(self) -> None:
        """Optional fields are omitted."""
        assert build_frontmatter("x") == '---\nname: "x"\n---'

    def test_unknown_skill_matches_everything(self) -> None:
        """Skills without a glob mapping apply to all files."""
        assert get_skill_globs("cobol") == ["**/*"]
