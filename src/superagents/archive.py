"""Export and import of generated configuration for team sharing.

An archive is a zip with ``metadata.json``, the ``.claude/`` tree and, if
present, ``CLAUDE.md``.
"""

from __future__ import annotations

import json
import shutil
import tempfile
import zipfile
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path

from superagents import __version__
from superagents.paths import (
    AGENTS_DIR,
    CLAUDE_DIR,
    CLAUDE_MD,
    HOOKS_DIR,
    SKILLS_DIR,
    get_claude_dir,
    get_claude_md_path,
)

METADATA_FILE = "metadata.json"


@dataclass
class ExportMetadata:
    version: str
    exported_at: str
    project_root: str
    agents: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    has_hooks: bool = False
    has_claude_md: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> ExportMetadata:
        return cls(
            version=str(data.get("version", "unknown")),
            exported_at=str(data.get("exported_at", "unknown")),
            project_root=str(data.get("project_root", "unknown")),
            agents=list(data.get("agents", [])),
            skills=list(data.get("skills", [])),
            has_hooks=bool(data.get("has_hooks", False)),
            has_claude_md=bool(data.get("has_claude_md", False)),
        )

    @classmethod
    def unknown(cls) -> ExportMetadata:
        return cls(version="unknown", exported_at="unknown", project_root="unknown")


@dataclass
class ImportResult:
    metadata: ExportMetadata
    files_written: int


def _markdown_names(directory: Path) -> list[str]:
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*.md"))


def export_config(project_path: Path, output_path: Path) -> ExportMetadata:
    """Zip the project's generated configuration.

    Raises:
        FileNotFoundError: If the project has no .claude/ directory
    """
    claude_dir = get_claude_dir(project_path)
    claude_md = get_claude_md_path(project_path)

    if not claude_dir.is_dir():
        raise FileNotFoundError(
            "No .claude/ configuration found. Run superagents generate first."
        )

    metadata = ExportMetadata(
        version=__version__,
        exported_at=datetime.now().isoformat(),
        project_root=project_path.name,
        agents=_markdown_names(claude_dir / AGENTS_DIR),
        skills=_markdown_names(claude_dir / SKILLS_DIR),
        has_hooks=(claude_dir / HOOKS_DIR).exists(),
        has_claude_md=claude_md.is_file(),
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(output_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(METADATA_FILE, json.dumps(metadata.to_dict(), indent=2))
        for file in sorted(claude_dir.rglob("*")):
            if file.is_file():
                zf.write(file, file.relative_to(project_path).as_posix())
        if metadata.has_claude_md:
            zf.write(claude_md, CLAUDE_MD)

    return metadata


def _is_safe_member(name: str) -> bool:
    """Reject absolute paths and ``..`` segments in archive entries."""
    path = Path(name)
    return not path.is_absolute() and ".." not in path.parts


def _count_files(directory: Path) -> int:
    return sum(1 for p in directory.rglob("*") if p.is_file())


def import_config(
    archive_path: Path, project_path: Path, overwrite: bool = False
) -> ImportResult:
    """Restore configuration from an exported archive.

    Raises:
        FileNotFoundError: If the archive does not exist
        FileExistsError: If .claude/ exists and ``overwrite`` is False
        ValueError: If the archive contains unsafe paths
    """
    if not archive_path.is_file():
        raise FileNotFoundError(f"File not found: {archive_path}")

    claude_dir = get_claude_dir(project_path)
    if claude_dir.exists() and not overwrite:
        raise FileExistsError(
            "Existing .claude/ configuration found. Use --force to overwrite."
        )

    files_written = 0
    metadata: ExportMetadata | None = None

    with zipfile.ZipFile(archive_path) as zf:
        unsafe = [name for name in zf.namelist() if not _is_safe_member(name)]
        if unsafe:
            raise ValueError(f"Archive contains unsafe paths: {', '.join(unsafe)}")

        with tempfile.TemporaryDirectory(dir=project_path) as temp:
            temp_dir = Path(temp)
            zf.extractall(temp_dir)

            metadata_path = temp_dir / METADATA_FILE
            if metadata_path.is_file():
                metadata = ExportMetadata.from_dict(
                    json.loads(metadata_path.read_text(encoding="utf-8"))
                )

            extracted_claude = temp_dir / CLAUDE_DIR
            if extracted_claude.is_dir():
                if claude_dir.exists():
                    shutil.rmtree(claude_dir)
                shutil.move(str(extracted_claude), str(claude_dir))
                files_written += _count_files(claude_dir)

            extracted_md = temp_dir / CLAUDE_MD
            if extracted_md.is_file():
                shutil.move(str(extracted_md), str(get_claude_md_path(project_path)))
                files_written += 1

    return ImportResult(metadata=metadata or ExportMetadata.unknown(), files_written=files_written)


def preview_config(archive_path: Path) -> ExportMetadata | None:
    """Read an archive's metadata without extracting it.

    Raises:
        FileNotFoundError: If the archive does not exist
    """
    if not archive_path.is_file():
        raise FileNotFoundError(f"File not found: {archive_path}")

    with zipfile.ZipFile(archive_path) as zf:
        if METADATA_FILE not in zf.namelist():
            return None
        return ExportMetadata.from_dict(json.loads(zf.read(METADATA_FILE)))
