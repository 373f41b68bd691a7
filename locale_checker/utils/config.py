"""Configuration management for locale checker."""

import yaml
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field

CONFIG_FILE_NAME = '.locale-checker.yml'


class MissingBundlePolicy(Enum):
    """What to do when a locale has no bundle for a template."""
    FORBID = "forbid"  # Always report the missing bundle
    ALLOW = "allow"    # Report only when the template references raw keys
    CREATE = "create"  # Create an empty bundle instead of reporting

    @classmethod
    def choices(cls) -> List[str]:
        return [policy.value for policy in cls]


MISSING_BUNDLE_POLICIES = tuple(MissingBundlePolicy.choices())
REPORT_FORMATS = ('console', 'json')
CONFIG_SECTIONS = ('paths', 'check', 'reports')


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class PathsConfig:
    """Where templates and bundles live, relative to the project directory."""
    templates: str = "public/templates"
    template_ext: str = ".dust"
    bundles: str = "locales"
    bundle_ext: str = ".properties"
    # Directory levels below the bundles root that make up a locale name
    # (1: locales/en, 2: locales/US/en)
    locale_depth: int = 1


@dataclass
class CheckConfig:
    """Check behaviour."""
    missing_bundle: str = "allow"  # forbid | allow | create
    ignore: List[str] = field(default_factory=list)
    tree_modes: List[str] = field(default_factory=lambda: ["paired", "json"])


@dataclass
class ReportsConfig:
    """Reports configuration."""
    formats: List[str] = field(default_factory=lambda: ["console"])
    output: str = "./locale_reports/"


@dataclass
class Config:
    """Main configuration class."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    check: CheckConfig = field(default_factory=CheckConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None, project_dir: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a YAML file.

        Args:
            config_path: Explicit config file; must exist when given
            project_dir: Directory searched for .locale-checker.yml when
                no config_path is given (default: current directory)

        Returns:
            Loaded Config, or the defaults when no file is found
        """
        if config_path is None:
            config_path = Path(project_dir or Path.cwd()) / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """
        Build config from a (partial) dictionary.

        Raises:
            ValueError: If the document or one of its sections is not a mapping
        """
        if not isinstance(data, dict):
            raise ValueError(f"config must be a mapping, got {type(data).__name__}")
        for section in CONFIG_SECTIONS:
            value = data.get(section)
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"config section '{section}' must be a mapping, got {type(value).__name__}")

        return cls(
            paths=PathsConfig(**(data.get('paths') or {})),
            check=CheckConfig(**(data.get('check') or {})),
            reports=ReportsConfig(**(data.get('reports') or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'paths': {
                'templates': self.paths.templates,
                'template_ext': self.paths.template_ext,
                'bundles': self.paths.bundles,
                'bundle_ext': self.paths.bundle_ext,
                'locale_depth': self.paths.locale_depth,
            },
            'check': {
                'missing_bundle': self.check.missing_bundle,
                'ignore': list(self.check.ignore),
                'tree_modes': list(self.check.tree_modes),
            },
            'reports': {
                'formats': list(self.reports.formats),
                'output': self.reports.output,
            },
        }

    def validate(
        self,
        project_dir: Optional[Path] = None,
        raise_on_error: bool = False,
    ) -> Tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            project_dir: Project directory used to check that paths exist
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        if self.check.missing_bundle not in MISSING_BUNDLE_POLICIES:
            errors.append(
                f"Invalid missing bundle policy '{self.check.missing_bundle}'. "
                f"Valid options: {', '.join(MISSING_BUNDLE_POLICIES)}"
            )

        for name in ('template_ext', 'bundle_ext'):
            ext = getattr(self.paths, name)
            if not isinstance(ext, str) or len(ext) < 2 or not ext.startswith('.'):
                errors.append(f"paths.{name} must be an extension starting with '.', got {ext!r}")

        if not isinstance(self.paths.locale_depth, int) or self.paths.locale_depth < 1:
            errors.append(f"paths.locale_depth must be a positive integer, got {self.paths.locale_depth!r}")

        if not isinstance(self.check.ignore, list):
            errors.append(f"check.ignore must be a list of glob patterns, got {self.check.ignore!r}")
        else:
            for pattern in self.check.ignore:
                if not isinstance(pattern, str) or not pattern.strip():
                    errors.append(f"Invalid ignore pattern: {pattern!r}")

        if not isinstance(self.check.tree_modes, list):
            errors.append(f"check.tree_modes must be a list of mode names, got {self.check.tree_modes!r}")
        elif not self.check.tree_modes:
            errors.append("check.tree_modes cannot be empty")
        else:
            for mode in self.check.tree_modes:
                if not isinstance(mode, str) or not mode.strip():
                    errors.append(f"Invalid tree mode: {mode!r}")

        if not isinstance(self.reports.formats, list):
            errors.append(f"reports.formats must be a list of format names, got {self.reports.formats!r}")
        else:
            for fmt in self.reports.formats:
                if not isinstance(fmt, str) or not fmt.strip():
                    errors.append(f"Invalid report format: {fmt!r}")
                elif fmt not in REPORT_FORMATS:
                    warnings.append(ConfigValidationWarning(
                        f"Unknown report format: '{fmt}'. Valid options: {', '.join(REPORT_FORMATS)}"
                    ))

        if project_dir is not None:
            project_dir = Path(project_dir)
            if not (project_dir / self.paths.templates).is_dir():
                warnings.append(ConfigValidationWarning(
                    f"Templates directory does not exist: {self.paths.templates}"
                ))
            if not (project_dir / self.paths.bundles).is_dir():
                warnings.append(ConfigValidationWarning(
                    f"Bundles directory does not exist: {self.paths.bundles}"
                ))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings
