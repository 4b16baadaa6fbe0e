"""Output sinks and the artifact writer.

``ArtifactWriter`` decides where each artifact lives; the sink decides how
bytes reach their destination. ``FileSystemSink`` writes under a root
directory, ``MemorySink`` keeps everything in a dict (used by ``--dry-run``
and tests).
"""

import logging
import os
import posixpath
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .config import GeneratorConfig
from .errors import OutputSinkError
from .ir import ArtifactCategory, IRArtifact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputFile:
    """A rendered artifact and its path relative to the output root."""
    relative_path: str
    contents: str


@runtime_checkable
class OutputSink(Protocol):
    """Protocol for persisting generated files.

    Paths are POSIX-style and relative to the sink's root.
    """

    def ensure_directory(self, path: str) -> None:
        """Create ``path`` (and parents) if it does not exist."""
        ...

    def write_file(self, path: str, text: str) -> None:
        """Write ``text`` to ``path``, replacing any existing content."""
        ...


class FileSystemSink:
    """Writes files below a root directory on disk."""

    def __init__(self, root: str):
        self.root = root

    def _full_path(self, path: str) -> str:
        return os.path.join(self.root, *path.split("/"))

    def ensure_directory(self, path: str) -> None:
        full_path = self._full_path(path)
        try:
            os.makedirs(full_path, exist_ok=True)
        except OSError as e:
            raise OutputSinkError(full_path, e.strerror or str(e)) from e

    def write_file(self, path: str, text: str) -> None:
        full_path = self._full_path(path)
        try:
            with open(full_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise OutputSinkError(full_path, e.strerror or str(e)) from e


class MemorySink:
    """Keeps written files in memory."""

    def __init__(self):
        self.directories: set[str] = set()
        self.files: dict[str, str] = {}

    def ensure_directory(self, path: str) -> None:
        while path and path not in self.directories:
            self.directories.add(path)
            path = posixpath.dirname(path)

    def write_file(self, path: str, text: str) -> None:
        directory = posixpath.dirname(path)
        if directory and directory not in self.directories:
            raise OutputSinkError(path, "directory does not exist")
        self.files[path] = text


class ArtifactWriter:
    """Maps artifacts to output paths and writes them through a sink."""

    def __init__(self, sink: OutputSink, config: GeneratorConfig | None = None):
        self.sink = sink
        self.config = config or GeneratorConfig()

    def directory_for(self, artifact: IRArtifact) -> str:
        return self.config.directories[artifact.category]

    def module_path_for(self, name: str, category: ArtifactCategory) -> str:
        """Return where an artifact called ``name`` lives, without extension."""
        return f"{self.config.directories[category]}/{name}"

    def module_path(self, artifact: IRArtifact) -> str:
        """Return the artifact's path without the file extension."""
        return self.module_path_for(artifact.name, artifact.category)

    def path_for(self, artifact: IRArtifact) -> str:
        """Return the deterministic relative path of ``artifact``."""
        return self.module_path(artifact) + self.config.file_extension

    def write(self, artifact: IRArtifact, contents: str) -> OutputFile:
        """Write rendered ``contents`` for ``artifact`` and return the file."""
        output = OutputFile(self.path_for(artifact), contents)
        self.sink.ensure_directory(posixpath.dirname(output.relative_path))
        self.sink.write_file(output.relative_path, output.contents)
        logger.debug("Wrote %s", output.relative_path)
        return output
