"""End-to-end runs of the hook entry point against real project trees."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

import microdoc
from microdoc.cli.main import main


def _run(root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], **env: str) -> str:
    monkeypatch.setenv("CLAUDE_PROJECT_DIR", str(root))
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    assert main([]) == 0
    return capsys.readouterr().out


def test_non_git_project_with_broad_glob_skips_dependency_dirs(
    project_root: Path,
    write_doc,
    isolated_env: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    isolated_env.setenv("GIT_CEILING_DIRECTORIES", str(project_root.parent))
    write_doc("docs/readme.md", "---\ndescription: Readme\n---\n# Readme")
    write_doc("node_modules/pkg/index.md", "---\ndescription: Package\n---\n")
    write_doc("docs/a/b/c/deep.md", "---\ndescription: |\n  Deep doc\n  second line\n---\n")

    out = _run(project_root, isolated_env, capsys, CLAUDE_MICRODOC_GLOB="**/*.md")

    assert '<doc path="docs/readme.md">Readme</doc>' in out
    assert '<doc path="docs/a/b/c/deep.md">Deep doc\nsecond line</doc>' in out
    assert "node_modules" not in out


def test_non_git_project_multiple_globs_and_missing_description(
    project_root: Path,
    write_doc,
    isolated_env: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    isolated_env.setenv("GIT_CEILING_DIRECTORIES", str(project_root.parent))
    write_doc("docs/no-desc.md", "---\ntitle: No Desc\n---\n# Body")
    write_doc("notes/meeting.md", "---\ndescription: >\n  Meeting\n  notes\n---\n")

    out = _run(project_root, isolated_env, capsys, CLAUDE_MICRODOC_GLOB="docs/**/*.md,notes/**/*.md")

    assert '<doc path="docs/no-desc.md"/>' in out
    assert '<doc path="notes/meeting.md">Meeting notes</doc>' in out
    assert "(no description)" not in out


def test_git_project_respects_gitignore_and_untracked(
    git_root: Path,
    write_doc,
    isolated_env: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (git_root / ".gitignore").write_text("vendor/\n", encoding="utf-8")
    write_doc("docs/a.md", "---\ndescription: Doc A\n---\n")
    write_doc("vendor/b.md", "---\ndescription: Vendor B\n---\n")
    subprocess.run(["git", "add", "."], cwd=git_root, check=True, capture_output=True)
    subprocess.run(["git", "commit", "-q", "-m", "init"], cwd=git_root, check=True, capture_output=True)
    write_doc("docs/new.md", "---\ndescription: New untracked\n---\n")

    out = _run(git_root, isolated_env, capsys, CLAUDE_MICRODOC_GLOB="**/*.md")

    assert '<doc path="docs/a.md">Doc A</doc>' in out
    assert '<doc path="docs/new.md">New untracked</doc>' in out
    assert "vendor/b.md" not in out


def test_module_entry_point_runs(project_root: Path, write_doc) -> None:
    write_doc("docs/api.md", "---\ndescription: REST API endpoints\n---\n")

    completed = subprocess.run(
        [sys.executable, "-m", "microdoc", "--root", str(project_root)],
        capture_output=True,
        text=True,
        env={
            "GIT_CEILING_DIRECTORIES": str(project_root.parent),
            "PATH": "",
            "PYTHONPATH": str(Path(microdoc.__file__).resolve().parents[1]),
        },
        check=False,
    )

    assert completed.returncode == 0
    assert '<doc path="docs/api.md">REST API endpoints</doc>' in completed.stdout
