"""
Locale Checker
==============

Checks that the translation keys referenced by UI templates are defined
in every locale's resource bundle.

Usage:
    from locale_checker import LocaleChecker

    checker = LocaleChecker(project_dir='./my-project')
    result = checker.check()
    for finding in result.findings:
        print(finding.kind.value, finding.bundle_path)

CLI:
    check-locales ./my-project
    check-locales ./my-project --missing-bundle create
    check-locales ./my-project -i 'public/templates/vendor/*'
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.checker import LocaleChecker
from .core.extractor import TemplateKeys, extract_bundle_keys, extract_template_keys
from .core.file_manager import FileAccessError, ProjectFileManager
from .core.findings import CheckResult, Finding, FindingKind, Severity
from .core.locale_catalog import LocaleCatalog
from .core.reconciler import MissingBundlePolicy, Reconciler
from .core.template_catalog import Template, TemplateCatalog

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'LocaleChecker',
    'TemplateKeys',
    'extract_bundle_keys',
    'extract_template_keys',
    'FileAccessError',
    'ProjectFileManager',
    'CheckResult',
    'Finding',
    'FindingKind',
    'Severity',
    'LocaleCatalog',
    'MissingBundlePolicy',
    'Reconciler',
    'Template',
    'TemplateCatalog',
]
