"""Findings produced by a locale check."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FindingKind(Enum):
    """Kind of problem found for a bundle."""
    MISSING_BUNDLE = "missing_bundle"  # Template needs a bundle the locale doesn't have
    UNUSED_BUNDLE = "unused_bundle"    # Bundle without a matching template
    INVALID_BUNDLE = "invalid_bundle"  # Bundle with missing and/or unused keys


class Severity(Enum):
    """Severity of a finding. Errors are shown in red, warnings in yellow."""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Finding:
    """A single problem, addressed by bundle path (e.g. ``en/greeting.properties``)."""
    bundle_path: str
    kind: FindingKind
    missing_keys: List[str] = field(default_factory=list)
    unused_keys: List[str] = field(default_factory=list)
    locale: Optional[str] = None
    template: Optional[str] = None

    @property
    def severity(self) -> Severity:
        if self.kind == FindingKind.UNUSED_BUNDLE:
            return Severity.WARNING
        if self.kind == FindingKind.INVALID_BUNDLE and not self.missing_keys:
            return Severity.WARNING
        return Severity.ERROR

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        """Convert finding to a JSON-friendly dictionary."""
        data: Dict[str, Any] = {
            'bundle_path': self.bundle_path,
            'kind': self.kind.value,
            'severity': self.severity.value,
            'locale': self.locale,
            'template': self.template,
        }
        if self.kind == FindingKind.INVALID_BUNDLE:
            data['missing_keys'] = list(self.missing_keys)
            data['unused_keys'] = list(self.unused_keys)
        return data


@dataclass
class CheckResult:
    """Ordered findings of a run plus bundles scheduled for creation."""
    findings: List[Finding] = field(default_factory=list)
    created_bundles: List[str] = field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        return bool(self.findings)

    @property
    def has_errors(self) -> bool:
        return any(finding.is_error for finding in self.findings)

    def count(self, kind: FindingKind) -> int:
        return sum(1 for finding in self.findings if finding.kind == kind)

    @property
    def error_count(self) -> int:
        return sum(1 for finding in self.findings if finding.is_error)

    @property
    def warning_count(self) -> int:
        return len(self.findings) - self.error_count

    def summary(self) -> Dict[str, int]:
        """Finding counts per kind and severity."""
        return {
            'total': len(self.findings),
            'errors': self.error_count,
            'warnings': self.warning_count,
            'missing_bundles': self.count(FindingKind.MISSING_BUNDLE),
            'unused_bundles': self.count(FindingKind.UNUSED_BUNDLE),
            'invalid_bundles': self.count(FindingKind.INVALID_BUNDLE),
            'created_bundles': len(self.created_bundles),
        }


def bundle_path(locale: str, template: str, bundle_ext: str) -> str:
    """Build the bundles-root-relative path of a bundle."""
    return f"{locale}/{template}{bundle_ext}"
