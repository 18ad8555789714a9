"""Shared scaffolding machinery.

A generator turns a user-supplied project name into a directory tree of
rendered files.  :class:`ProjectGenerator` owns the sequence every project
type follows (parse the name, check the target, create directories, write
files); subclasses only describe *which* directories and files they need.

The existence check and the directory creation that follows it are two
separate filesystem calls.  Two invocations racing on the same target can both
pass the check; the tool is meant for a single operator, so no locking is done.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


SEPARATOR = "/"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every failure raised while scaffolding a project."""


class InvalidProjectNameError(ScaffoldError, ValueError):
    """Raised when a project name cannot be mapped to a directory."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"invalid project name {name!r}: {reason}")


class AlreadyExistsError(ScaffoldError):
    """Raised when the target directory (or any entry at that path) exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"directory '{path.name}' already exists")


class ScaffoldFilesystemError(ScaffoldError):
    """Raised when a directory or file could not be created (or the target inspected).

    The original ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, kind: str, path: Path, cause: OSError) -> None:
        self.kind = kind
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        verb = "inspect" if kind == "target" else "create"
        super().__init__(f"failed to {verb} {kind} {path}: {reason}")


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedName:
    """A project name split into its module identity and local folder name."""

    module_path: str
    directory_name: str


@dataclass(frozen=True)
class FileSpec:
    """One file to write, relative to the project root (POSIX separators)."""

    relative_path: str
    content: str


@dataclass
class ScaffoldPlan:
    """Everything a generator would create for a given name."""

    parsed: ParsedName
    directories: list[str] = field(default_factory=list)
    files: list[FileSpec] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Name parsing
# ---------------------------------------------------------------------------


def parse_project_name(raw: str) -> ParsedName:
    """Split *raw* into a module path and a directory name.

    ``"myapp"`` maps to ``("myapp", "myapp")`` and
    ``"github.com/user/myapp"`` maps to ``("github.com/user/myapp", "myapp")``.

    Raises:
        InvalidProjectNameError: If the name is empty, starts or ends with a
            separator, contains an empty segment, or uses ``.``/``..`` as a
            segment.
    """
    name = raw.strip()
    if not name:
        raise InvalidProjectNameError(raw, "name is empty")
    if name.startswith(SEPARATOR) or name.endswith(SEPARATOR):
        raise InvalidProjectNameError(raw, "name must not start or end with '/'")

    segments = name.split(SEPARATOR)
    for segment in segments:
        if not segment:
            raise InvalidProjectNameError(raw, "name contains an empty path segment")
        if segment in (".", ".."):
            raise InvalidProjectNameError(raw, f"'{segment}' is not a valid path segment")

    return ParsedName(module_path=name, directory_name=segments[-1])


def parse_directory_name(raw: str) -> ParsedName:
    """Use *raw* as both the module identity and the directory name.

    For project types without a module path the name must already be a
    single path segment.
    """
    name = raw.strip()
    if not name:
        raise InvalidProjectNameError(raw, "name is empty")
    if SEPARATOR in name or "\\" in name:
        raise InvalidProjectNameError(raw, "name must not contain path separators")
    if name in (".", ".."):
        raise InvalidProjectNameError(raw, f"'{name}' is not a valid directory name")
    return ParsedName(module_path=name, directory_name=name)


# ---------------------------------------------------------------------------
# Base generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Base class for project generators.

    Subclasses implement :meth:`directories` and :meth:`files`, and may
    override :meth:`parse` when the project type accepts module paths.

    Attributes:
        output_dir: Directory the project root is created in.
    """

    #: Human-readable project type, used in console output.
    label: str = "project"

    def __init__(self, output_dir: str | Path | None = None) -> None:
        self.output_dir = Path(output_dir) if output_dir is not None else Path.cwd()

    # -- Hooks -------------------------------------------------------------

    def parse(self, raw_name: str) -> ParsedName:
        """Validate *raw_name* and split it into module path and directory name."""
        return parse_directory_name(raw_name)

    def directories(self, parsed: ParsedName) -> list[str]:
        """Directories to create, relative to the project root."""
        raise NotImplementedError

    def files(self, parsed: ParsedName) -> list[FileSpec]:
        """Rendered files to write, relative to the project root."""
        raise NotImplementedError

    def next_steps(self, parsed: ParsedName) -> list[str]:
        """Shell commands suggested to the user after generation."""
        return [f"cd {parsed.directory_name}"]

    # -- Public API --------------------------------------------------------

    def target(self, parsed: ParsedName) -> Path:
        """Path of the project root for *parsed*."""
        return self.output_dir / parsed.directory_name

    def target_exists(self, parsed: ParsedName) -> bool:
        """Whether anything (including a dangling symlink) occupies the target.

        Raises:
            ScaffoldFilesystemError: If the target cannot be inspected, e.g.
                the name is too long or the parent is unreadable.
        """
        return _path_taken(self.target(parsed))

    def plan(self, raw_name: str) -> ScaffoldPlan:
        """Describe what :meth:`generate` would create, without touching disk."""
        parsed = self.parse(raw_name)
        return ScaffoldPlan(
            parsed=parsed,
            directories=self.directories(parsed),
            files=self.files(parsed),
        )

    def generate(self, raw_name: str) -> Path:
        """Create the project described by *raw_name*.

        Returns:
            Path to the generated project root.

        Raises:
            InvalidProjectNameError: If *raw_name* is rejected by :meth:`parse`.
            AlreadyExistsError: If anything already exists at the target.
            ScaffoldFilesystemError: On the first directory or file that could
                not be created.  Earlier writes are left in place.
        """
        parsed = self.parse(raw_name)
        root = self.target(parsed)
        self._check_target(root)
        self._create_directories(root, self.directories(parsed))
        self._write_files(root, self.files(parsed))
        return root

    # -- Filesystem steps --------------------------------------------------

    def _check_target(self, root: Path) -> None:
        if _path_taken(root):
            raise AlreadyExistsError(root)

    def _create_directories(self, root: Path, directories: list[str]) -> list[Path]:
        created: list[Path] = []
        for relative in ["", *directories]:
            path = root / relative if relative else root
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ScaffoldFilesystemError("directory", path, exc) from exc
            created.append(path)
        return created

    def _write_files(self, root: Path, files: list[FileSpec]) -> list[Path]:
        written: list[Path] = []
        for spec in files:
            path = root.joinpath(*spec.relative_path.split(SEPARATOR))
            try:
                path.write_text(spec.content, encoding="utf-8")
            except OSError as exc:
                raise ScaffoldFilesystemError("file", path, exc) from exc
            written.append(path)
        return written


def _path_taken(path: Path) -> bool:
    # lstat() so a dangling symlink still counts as taken.
    try:
        path.lstat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise ScaffoldFilesystemError("target", path, exc) from exc
    return True
