"""Main locale checker."""

import logging
from pathlib import Path
from typing import List, Optional

from ..utils.config import Config, MissingBundlePolicy
from .file_manager import ProjectFileManager
from .findings import CheckResult
from .locale_catalog import LocaleCatalog
from .reconciler import Reconciler
from .template_catalog import TemplateCatalog

logger = logging.getLogger(__name__)


class LocaleChecker:
    """
    Checks a project's bundles against its templates.

    The run has three phases, each finished before the next starts:

    1. load templates (the full set of template names is needed to tell
       used bundles from unused ones)
    2. load locales and the bundles matching a template
    3. reconcile every template with every locale

    Under the ``create`` policy, missing bundles are written as empty
    files once reconciliation is done.
    """

    def __init__(
        self,
        project_dir: Path,
        config: Optional[Config] = None,
        use_threads: bool = True,
        max_workers: int = 4,
    ):
        """
        Initialize checker.

        Args:
            project_dir: Project root directory
            config: Configuration (defaults when None)
            use_threads: Read files on a thread pool
            max_workers: Thread pool size
        """
        self.project_dir = Path(project_dir)
        self.config = config or Config()
        self.policy = MissingBundlePolicy(self.config.check.missing_bundle)
        self.files = ProjectFileManager(
            project_dir=self.project_dir,
            paths=self.config.paths,
            ignore=self.config.check.ignore,
            use_threads=use_threads,
            max_workers=max_workers,
        )

        self.templates: Optional[TemplateCatalog] = None
        self.locales: Optional[LocaleCatalog] = None
        self.created_files: List[Path] = []

    def check(self) -> CheckResult:
        """
        Run the complete check.

        Returns:
            CheckResult with ordered findings

        Raises:
            FileAccessError: If a file can't be read or a bundle can't be created
        """
        self.templates = self.load_templates()
        self.locales = self.load_locales(self.templates)

        reconciler = Reconciler(policy=self.policy, bundle_ext=self.config.paths.bundle_ext)
        result = reconciler.reconcile(self.templates, self.locales)

        logger.info(
            f"Checked {len(self.templates)} templates across {len(self.locales.locales)} locales"
        )

        if result.created_bundles:
            self.created_files = self.files.create_bundles(result.created_bundles)
            logger.info(f"Created {len(self.created_files)} empty bundles")

        return result

    def load_templates(self) -> TemplateCatalog:
        """Find and read every template."""
        names = self.files.find_templates()
        texts = self.files.run_all({name: name for name in names}, self.files.read_template)

        catalog = TemplateCatalog.build(
            ((name, texts[name]) for name in names),
            tree_modes=self.config.check.tree_modes,
        )
        logger.debug(f"Loaded {len(catalog)} templates from {self.files.templates_dir}")
        return catalog

    def load_locales(self, templates: TemplateCatalog) -> LocaleCatalog:
        """Find every locale and read the bundles that match a template."""
        locales = self.files.find_locales()
        bundles_per_locale = self.files.find_all_bundles(locales)

        # Unused bundles are classified by name only and never read
        to_read = {
            (locale, name): (locale, name)
            for locale, names in bundles_per_locale.items()
            for name in names
            if name in templates
        }
        texts = self.files.run_all(to_read, lambda item: self.files.read_bundle(*item))

        catalog = LocaleCatalog.build(
            locales,
            bundles_per_locale,
            templates,
            read=lambda locale, name: texts[(locale, name)],
            bundle_ext=self.config.paths.bundle_ext,
        )
        logger.debug(
            f"Loaded {catalog.bundle_count()} bundles from {len(catalog.locales)} locales "
            f"({len(catalog.unused_bundles)} unused)"
        )
        return catalog
