"""Project file access: discovery, reading and bundle creation."""

import fnmatch
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from ..utils.config import PathsConfig

K = TypeVar('K')
V = TypeVar('V')

logger = logging.getLogger(__name__)


class FileAccessError(Exception):
    """Raised when a project file can't be read or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ProjectFileManager:
    """
    Finds and reads templates and bundles of a project.

    Layout (defaults):
        <project>/public/templates/**/<name>.dust
        <project>/locales/<locale>/**/<name>.properties

    Names are '/'-separated paths relative to their root with the
    extension stripped, so the same template has one name on every OS.
    """

    def __init__(
        self,
        project_dir: Path,
        paths: Optional[PathsConfig] = None,
        ignore: Sequence[str] = (),
        use_threads: bool = True,
        max_workers: int = 4,
    ):
        """
        Initialize file manager.

        Args:
            project_dir: Project root directory
            paths: Paths configuration (roots, extensions, locale depth)
            ignore: fnmatch patterns matched against project-relative paths
            use_threads: Read files on a thread pool
            max_workers: Thread pool size
        """
        self.project_dir = Path(project_dir)
        self.paths = paths or PathsConfig()
        self.ignore = list(ignore)
        self.use_threads = use_threads
        self.max_workers = max_workers

    @property
    def templates_dir(self) -> Path:
        return self.project_dir / self.paths.templates

    @property
    def bundles_dir(self) -> Path:
        return self.project_dir / self.paths.bundles

    def is_ignored(self, path: Path) -> bool:
        """Check a path against the ignore patterns."""
        if not self.ignore:
            return False

        try:
            relative = path.relative_to(self.project_dir).as_posix()
        except ValueError:
            relative = path.as_posix()

        return any(fnmatch.fnmatchcase(relative, pattern) for pattern in self.ignore)

    # Discovery

    def find_templates(self) -> List[str]:
        """Names of all templates, sorted."""
        if not self.templates_dir.is_dir():
            logger.warning(f"Templates directory not found: {self.templates_dir}")
            return []

        return self._find_names(self.templates_dir, self.paths.template_ext)

    def find_locales(self) -> List[str]:
        """Names of all locale directories, sorted."""
        if not self.bundles_dir.is_dir():
            logger.warning(f"Bundles directory not found: {self.bundles_dir}")
            return []

        pattern = '/'.join(['*'] * self.paths.locale_depth)
        locales = [
            path.relative_to(self.bundles_dir).as_posix()
            for path in self.bundles_dir.glob(pattern)
            if path.is_dir() and not self.is_ignored(path)
        ]
        return sorted(locales)

    def find_bundles(self, locale: str) -> List[str]:
        """Names of all bundles in a locale, sorted."""
        return self._find_names(self.bundles_dir / locale, self.paths.bundle_ext)

    def find_all_bundles(self, locales: Iterable[str]) -> Dict[str, List[str]]:
        """Bundle names for every locale, one directory walk per locale."""
        return self.run_all({locale: locale for locale in locales}, self.find_bundles)

    def _find_names(self, root: Path, ext: str) -> List[str]:
        names = []
        for file_path in root.rglob(f'*{ext}'):
            if not file_path.is_file() or self.is_ignored(file_path):
                continue
            names.append(file_path.relative_to(root).as_posix()[:-len(ext)])
        return sorted(names)

    # Paths

    def template_path(self, name: str) -> Path:
        return self.templates_dir / f"{name}{self.paths.template_ext}"

    def bundle_file(self, relative_path: str) -> Path:
        """Absolute path of a bundles-root-relative bundle path."""
        return self.bundles_dir / relative_path

    # Reading

    def read_file(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(path, str(e)) from e

    def read_template(self, name: str) -> str:
        return self.read_file(self.template_path(name))

    def read_bundle(self, locale: str, name: str) -> str:
        return self.read_file(self.bundles_dir / locale / f"{name}{self.paths.bundle_ext}")

    # Writing

    def create_bundle(self, relative_path: str) -> Path:
        """Create an empty bundle file (and its directories)."""
        path = self.bundle_file(relative_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as e:
            raise FileAccessError(path, str(e)) from e
        return path

    def create_bundles(self, relative_paths: Sequence[str]) -> List[Path]:
        """Create empty bundle files, one task per path."""
        created = self.run_all({path: path for path in relative_paths}, self.create_bundle)
        return [created[path] for path in relative_paths]

    # Concurrency

    def run_all(self, items: Dict[K, V], func: Callable[[V], object]) -> Dict[K, object]:
        """
        Apply ``func`` to every item and wait for all of them.

        The first failure is re-raised once every task has finished, so a
        phase never ends with tasks still running.
        """
        if not self.use_threads or len(items) < 2:
            return {key: func(value) for key, value in items.items()}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {key: executor.submit(func, value) for key, value in items.items()}

        # Executor exit waits for every future
        return {key: future.result() for key, future in futures.items()}
