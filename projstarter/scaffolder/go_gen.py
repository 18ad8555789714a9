"""Go service skeleton generator.

Produces::

    <dir>/
        cmd/<dir>/main.go
        cmd/<dir>/main_test.go
        internal/
        go.mod
        README.md
        LICENSE
        .gitignore

The name may be a bare name (``myapp``) or a full module path
(``github.com/user/myapp``); the project root is always the last segment.
"""

from __future__ import annotations

from . import go_templates
from .generator import FileSpec, ParsedName, ProjectGenerator, parse_project_name


class GoGenerator(ProjectGenerator):
    """Generates a Go module with a ``cmd/<name>`` entry point."""

    label = "Go"

    def parse(self, raw_name: str) -> ParsedName:
        return parse_project_name(raw_name)

    def directories(self, parsed: ParsedName) -> list[str]:
        short = parsed.directory_name
        return [f"cmd/{short}", "internal"]

    def files(self, parsed: ParsedName) -> list[FileSpec]:
        short = parsed.directory_name
        module = parsed.module_path
        return [
            FileSpec(f"cmd/{short}/main.go", go_templates.main_go(short)),
            FileSpec(f"cmd/{short}/main_test.go", go_templates.main_test_go(short)),
            FileSpec("go.mod", go_templates.go_mod(module)),
            FileSpec("README.md", go_templates.readme(short, module)),
            FileSpec("LICENSE", go_templates.license_text()),
            FileSpec(".gitignore", go_templates.gitignore()),
        ]

    def next_steps(self, parsed: ParsedName) -> list[str]:
        short = parsed.directory_name
        return [
            f"cd {short}",
            f"go mod tidy && go run ./cmd/{short}",
        ]
