from __future__ import annotations

import os
import time
from pathlib import Path

import pytest

from rsc_scanner.discovery import (
    DEFAULT_EXCLUDES,
    DEFAULT_POLICY,
    DirectoryWalker,
    ExclusionPolicy,
    find_manifest_dirs,
    list_entries,
    walk_directories,
)

from conftest import write_file, write_manifest


class TestExclusionPolicy:
    @pytest.mark.parametrize("name", sorted(DEFAULT_EXCLUDES))
    def test_default_names_excluded(self, name: str) -> None:
        assert DEFAULT_POLICY.is_excluded(name)

    def test_match_is_exact_name(self) -> None:
        assert not DEFAULT_POLICY.is_excluded("node_modules_backup")
        assert not DEFAULT_POLICY.is_excluded("src")

    def test_extended_keeps_defaults(self) -> None:
        policy = DEFAULT_POLICY.extended(["coverage"])
        assert policy.is_excluded("coverage")
        assert policy.is_excluded("node_modules")
        assert not DEFAULT_POLICY.is_excluded("coverage")


class TestWalkDirectories:
    def test_start_path_first_and_lexical_order(self, tmp_path: Path) -> None:
        for rel in ("b/x", "a/y", "a/z"):
            (tmp_path / rel).mkdir(parents=True)

        walked = walk_directories(tmp_path)

        assert walked == [
            tmp_path,
            tmp_path / "a",
            tmp_path / "a" / "y",
            tmp_path / "a" / "z",
            tmp_path / "b",
            tmp_path / "b" / "x",
        ]

    def test_excluded_names_pruned_at_any_depth(self, tmp_path: Path) -> None:
        for name in DEFAULT_EXCLUDES:
            (tmp_path / name / "inner").mkdir(parents=True)
            (tmp_path / "pkg" / "deep" / name / "inner").mkdir(parents=True)

        walked = walk_directories(tmp_path)

        for path in walked:
            assert not set(path.relative_to(tmp_path).parts) & DEFAULT_EXCLUDES
        assert tmp_path / "pkg" / "deep" in walked

    def test_injected_policy(self, tmp_path: Path) -> None:
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "skipme").mkdir()

        walked = walk_directories(tmp_path, ExclusionPolicy(frozenset({"skipme"})))

        assert tmp_path / "node_modules" in walked
        assert tmp_path / "skipme" not in walked

    def test_files_are_not_emitted(self, tmp_path: Path) -> None:
        write_file(tmp_path / "index.js", "")
        assert walk_directories(tmp_path) == [tmp_path]

    def test_symlinked_directories_not_followed(self, tmp_path: Path) -> None:
        (tmp_path / "real").mkdir()
        os.symlink(tmp_path, tmp_path / "real" / "loop")

        walked = walk_directories(tmp_path)

        assert walked == [tmp_path, tmp_path / "real"]

    def test_unlistable_start_yields_only_itself(self, tmp_path: Path) -> None:
        missing = tmp_path / "gone"
        assert walk_directories(missing) == [missing]

    def test_list_entries_reports_failure_as_none(self, tmp_path: Path) -> None:
        not_a_dir = write_file(tmp_path / "file.txt", "x")
        assert list_entries(not_a_dir) is None
        assert list_entries(tmp_path / "missing") is None

    def test_expired_deadline_truncates(self, tmp_path: Path) -> None:
        (tmp_path / "a").mkdir()
        walker = DirectoryWalker(deadline=time.monotonic() - 1)

        assert list(walker.walk(tmp_path)) == []
        assert walker.truncated


class TestFindManifestDirs:
    def test_nested_manifests_are_independent(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {"name": "root"})
        write_manifest(tmp_path / "packages" / "ui", {"name": "ui"})
        (tmp_path / "docs").mkdir()

        targets = find_manifest_dirs(tmp_path, label_prefix="plugins/acme")

        assert [t.path for t in targets] == [tmp_path, tmp_path / "packages" / "ui"]
        assert [t.label for t in targets] == ["plugins/acme", "plugins/acme/packages/ui"]

    def test_manifest_inside_excluded_dir_ignored(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {})
        write_manifest(tmp_path / "node_modules" / "react", {"name": "react"})
        write_manifest(tmp_path / "build", {"name": "out"})

        targets = find_manifest_dirs(tmp_path)

        assert [t.path for t in targets] == [tmp_path]
        assert targets[0].label == "."

    def test_manifest_must_be_a_file(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").mkdir()
        assert find_manifest_dirs(tmp_path) == []

    def test_no_manifests(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        assert find_manifest_dirs(tmp_path) == []
