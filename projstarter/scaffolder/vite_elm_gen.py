"""Vite + Elm + Tailwind front-end skeleton generator.

The project name is used verbatim as the root directory, the ``package.json``
name and the page title.
"""

from __future__ import annotations

from . import vite_elm_templates as tpl
from .generator import FileSpec, ParsedName, ProjectGenerator


class ViteElmGenerator(ProjectGenerator):
    """Generates a Vite app with an Elm counter styled by Tailwind CSS."""

    label = "Vite + Elm + Tailwind"

    def directories(self, parsed: ParsedName) -> list[str]:
        return ["src", "public"]

    def files(self, parsed: ParsedName) -> list[FileSpec]:
        name = parsed.directory_name
        return [
            FileSpec("package.json", tpl.package_json(name)),
            FileSpec("vite.config.js", tpl.vite_config()),
            FileSpec("index.html", tpl.index_html(name)),
            FileSpec("src/main.js", tpl.main_js()),
            FileSpec("src/style.css", tpl.style_css()),
            FileSpec("src/Main.elm", tpl.main_elm()),
            FileSpec("elm.json", tpl.elm_json()),
            FileSpec("elm-tooling.json", tpl.elm_tooling_json()),
            FileSpec(".gitignore", tpl.gitignore()),
            FileSpec("README.md", tpl.readme(name)),
        ]

    def next_steps(self, parsed: ParsedName) -> list[str]:
        return [
            f"cd {parsed.directory_name}",
            "npm install && npm run dev",
        ]
