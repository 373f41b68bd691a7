"""Core modules for locale checking."""

from .checker import LocaleChecker
from .findings import CheckResult, Finding, FindingKind, Severity
from .locale_catalog import LocaleCatalog
from .reconciler import MissingBundlePolicy, Reconciler
from .template_catalog import Template, TemplateCatalog

__all__ = [
    'LocaleChecker',
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
