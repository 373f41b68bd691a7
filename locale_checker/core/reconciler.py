"""Cross-reference templates and bundles."""

from typing import Iterable, List, Optional, Set, Tuple

from ..utils.config import MissingBundlePolicy
from .extractor import is_covered_by_any
from .findings import CheckResult, Finding, FindingKind, bundle_path
from .locale_catalog import LocaleCatalog
from .template_catalog import Template, TemplateCatalog


def compare_keys(template: Template, defined_keys: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Compare the keys a bundle defines with the keys a template needs.

    A defined key is satisfied when it is one of the template's raw keys.
    Otherwise it is unused, unless a tree key covers it.

    Args:
        template: Template to check against
        defined_keys: Keys defined by the bundle

    Returns:
        (missing_keys, unused_keys), both sorted
    """
    required = set(template.raw_keys)
    unused = []

    for key in defined_keys:
        if key in required:
            required.discard(key)
        elif not is_covered_by_any(key, template.tree_keys):
            unused.append(key)

    return sorted(required), sorted(unused)


class Reconciler:
    """
    Checks every template against every locale.

    Pairs are visited template-major, locale-minor, both in lexical order,
    so two runs over the same files give the same findings.
    """

    def __init__(
        self,
        policy: MissingBundlePolicy = MissingBundlePolicy.ALLOW,
        bundle_ext: str = '.properties',
    ):
        self.policy = MissingBundlePolicy(policy)
        self.bundle_ext = bundle_ext

    def reconcile(self, templates: TemplateCatalog, locales: LocaleCatalog) -> CheckResult:
        """
        Run the check.

        Unused bundle findings collected while loading locales come first,
        followed by the findings of each (template, locale) pair.

        Returns:
            CheckResult with all findings and bundles to create
        """
        result = CheckResult(findings=list(locales.unused_bundles))

        for template in templates:
            for locale in locales.locales:
                self.check_pair(template, locale, locales.keys_for(locale, template.name), result)

        return result

    def check_pair(
        self,
        template: Template,
        locale: str,
        defined_keys: Optional[Set[str]],
        result: CheckResult,
    ) -> Optional[Finding]:
        """
        Check one template against one locale's bundle and record the finding.

        Args:
            template: Template to check
            locale: Locale name
            defined_keys: Keys of the bundle, None if the bundle doesn't exist
            result: Result to append findings and created bundles to

        Returns:
            The recorded finding, if any
        """
        path = bundle_path(locale, template.name, self.bundle_ext)

        if defined_keys is None:
            if self.policy == MissingBundlePolicy.CREATE:
                result.created_bundles.append(path)
            elif self.policy == MissingBundlePolicy.FORBID or template.raw_keys:
                finding = Finding(
                    bundle_path=path,
                    kind=FindingKind.MISSING_BUNDLE,
                    locale=locale,
                    template=template.name,
                )
                result.findings.append(finding)
                return finding
            defined_keys = set()

        missing, unused = compare_keys(template, defined_keys)
        if not missing and not unused:
            return None

        finding = Finding(
            bundle_path=path,
            kind=FindingKind.INVALID_BUNDLE,
            missing_keys=missing,
            unused_keys=unused,
            locale=locale,
            template=template.name,
        )
        result.findings.append(finding)
        return finding
