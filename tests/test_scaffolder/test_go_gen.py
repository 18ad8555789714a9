"""Tests for the Go project generator and its templates.

Covers:
- Required directories and files for short names and module paths
- go.mod module identity
- main.go / main_test.go content
- README, LICENSE, .gitignore content
- Template determinism
"""

from __future__ import annotations

import re

import pytest

from projstarter.scaffolder import AlreadyExistsError, ParsedName
from projstarter.scaffolder import go_templates


pytestmark = pytest.mark.unit


GO_FILES = [
    "cmd/{name}/main.go",
    "cmd/{name}/main_test.go",
    "go.mod",
    "README.md",
    "LICENSE",
    ".gitignore",
]


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestGoGenerate:
    def test_short_name(self, go_generator, output_dir):
        root = go_generator.generate("myapp")

        assert root == output_dir / "myapp"
        main_go = (root / "cmd" / "myapp" / "main.go").read_text(encoding="utf-8")
        assert "func main()" in main_go
        assert "myapp" in main_go
        go_mod = (root / "go.mod").read_text(encoding="utf-8")
        assert go_mod.splitlines()[0] == "module myapp"

    def test_module_path(self, go_generator, output_dir):
        root = go_generator.generate("github.com/user/myapp")

        assert root == output_dir / "myapp"
        assert not (output_dir / "github.com").exists()
        assert (root / "cmd" / "myapp" / "main.go").is_file()
        go_mod = (root / "go.mod").read_text(encoding="utf-8")
        assert go_mod.splitlines()[0] == "module github.com/user/myapp"

    def test_creates_all_required_directories(self, go_generator, output_dir):
        root = go_generator.generate("test-dirs")

        for rel in ("", "cmd/test-dirs", "internal"):
            assert (root / rel).is_dir(), rel
        assert list((root / "internal").iterdir()) == []

    def test_creates_all_required_files(self, go_generator):
        root = go_generator.generate("test-files")

        for rel in GO_FILES:
            path = root / rel.format(name="test-files")
            assert path.is_file(), rel
            assert path.stat().st_size > 0, rel

    def test_tree_is_exactly_the_layout(self, go_generator, tree_snapshot):
        root = go_generator.generate("exact")

        expected = {rel.format(name="exact") for rel in GO_FILES}
        expected |= {"cmd", "cmd/exact", "internal"}
        assert tree_snapshot(root) == expected

    def test_existing_directory_fails(self, go_generator, output_dir, tree_snapshot):
        (output_dir / "existing").mkdir()
        before = tree_snapshot(output_dir)

        with pytest.raises(AlreadyExistsError, match="already exists"):
            go_generator.generate("existing")
        assert tree_snapshot(output_dir) == before

    def test_module_path_collides_on_short_name(self, go_generator, output_dir):
        (output_dir / "myapp").mkdir()
        with pytest.raises(AlreadyExistsError, match="already exists"):
            go_generator.generate("github.com/other/myapp")

    def test_next_steps(self, go_generator):
        steps = go_generator.next_steps(ParsedName("github.com/u/svc", "svc"))
        assert steps == ["cd svc", "go mod tidy && go run ./cmd/svc"]


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestMainGoTemplate:
    @pytest.fixture
    def content(self) -> str:
        return go_templates.main_go("testapp")

    def test_package_main(self, content):
        assert content.startswith("package main\n")

    def test_has_main_function(self, content):
        assert "func main()" in content

    def test_logging_setup(self, content):
        assert '"log/slog"' in content
        assert '"github.com/lmittmann/tint"' in content
        assert "func init()" in content
        assert "slog.SetDefault" in content

    def test_includes_project_name(self, content):
        assert 'slog.Info("Starting testapp")' in content
        assert 'fmt.Println("Hello from testapp!")' in content

    def test_balanced_braces(self, content):
        assert content.count("{") == content.count("}")
        assert content.count("(") == content.count(")")


class TestMainTestGoTemplate:
    def test_is_passing_test(self):
        content = go_templates.main_test_go("testapp")
        assert content.startswith("package main\n")
        assert 'import "testing"' in content
        assert re.search(r"func Test\w+\(t \*testing\.T\)", content)
        assert "t.Fatal" not in content and "t.Error" not in content

    def test_does_not_shadow_test_main(self):
        # TestMain must take *testing.M in Go.
        assert "func TestMain(" not in go_templates.main_test_go("testapp")


class TestGoModTemplate:
    def test_declares_module(self):
        content = go_templates.go_mod("gitlab.com/org/team/project")
        assert content.splitlines()[0] == "module gitlab.com/org/team/project"

    def test_go_version(self):
        assert f"\ngo {go_templates.GO_VERSION}\n" in go_templates.go_mod("x")

    def test_requires_tint(self):
        assert f"require github.com/lmittmann/tint {go_templates.TINT_VERSION}" in go_templates.go_mod("x")


class TestReadmeTemplate:
    def test_mentions_name_and_commands(self):
        content = go_templates.readme("svc", "github.com/u/svc")
        assert content.startswith("# svc\n")
        assert "github.com/u/svc" in content
        assert "go run ./cmd/svc" in content
        assert "go test ./..." in content
        assert content.count("```") % 2 == 0


class TestLicenseTemplate:
    def test_explicit_year(self):
        content = go_templates.license_text(1999)
        assert content.startswith("MIT License\n")
        assert "Copyright (c) 1999" in content

    def test_defaults_to_current_year(self, current_year):
        assert f"Copyright (c) {current_year}" in go_templates.license_text()

    def test_only_year_varies(self):
        a = go_templates.license_text(2020).replace("2020", "YEAR")
        b = go_templates.license_text(2031).replace("2031", "YEAR")
        assert a == b


class TestGitignoreTemplate:
    @pytest.mark.parametrize("pattern", ["bin/", "*.test", "go.work", ".DS_Store"])
    def test_patterns(self, pattern):
        assert pattern in go_templates.gitignore().splitlines()


class TestDeterminism:
    def test_templates_are_repeatable(self):
        calls = [
            lambda: go_templates.main_go("a"),
            lambda: go_templates.main_test_go("a"),
            lambda: go_templates.go_mod("example.com/a"),
            lambda: go_templates.readme("a", "example.com/a"),
            lambda: go_templates.license_text(2024),
            go_templates.gitignore,
        ]
        for call in calls:
            assert call() == call()

    def test_file_plan_is_repeatable(self, go_generator):
        parsed = go_generator.parse("example.com/a")
        assert go_generator.files(parsed) == go_generator.files(parsed)
