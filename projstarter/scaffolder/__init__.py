"""projstarter scaffolder -- writes new project skeletons to disk.

Quick usage::

    from projstarter.scaffolder import GoGenerator, ViteElmGenerator

    GoGenerator().generate("github.com/user/myapp")   # -> ./myapp
    ViteElmGenerator(output_dir="/tmp").generate("my-elm-app")
"""

from projstarter.scaffolder.generator import (
    AlreadyExistsError,
    FileSpec,
    InvalidProjectNameError,
    ParsedName,
    ProjectGenerator,
    ScaffoldError,
    ScaffoldFilesystemError,
    ScaffoldPlan,
    parse_project_name,
)
from projstarter.scaffolder.go_gen import GoGenerator
from projstarter.scaffolder.templates import TemplateRenderer
from projstarter.scaffolder.vite_elm_gen import ViteElmGenerator

__all__ = [
    "AlreadyExistsError",
    "FileSpec",
    "GoGenerator",
    "InvalidProjectNameError",
    "ParsedName",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldFilesystemError",
    "ScaffoldPlan",
    "TemplateRenderer",
    "ViteElmGenerator",
    "parse_project_name",
]
