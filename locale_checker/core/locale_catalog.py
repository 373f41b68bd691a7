"""Locale catalog: locale -> template name -> defined keys."""

from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Set

from .extractor import extract_bundle_keys
from .findings import Finding, FindingKind, bundle_path
from .template_catalog import TemplateCatalog


class LocaleCatalog:
    """
    Defined keys of every bundle, grouped by locale.

    Bundles whose name doesn't match a template are not stored; they are
    recorded as UnusedBundle findings instead.
    """

    def __init__(self, bundle_ext: str = '.properties'):
        self.bundle_ext = bundle_ext
        self.locales: List[str] = []
        self.bundles: Dict[str, Dict[str, Set[str]]] = defaultdict(dict)  # locale -> {template: keys}
        self.unused_bundles: List[Finding] = []

    @classmethod
    def build(
        cls,
        locales: Iterable[str],
        bundles_per_locale: Mapping[str, Iterable[str]],
        templates: TemplateCatalog,
        read: Callable[[str, str], str],
        bundle_ext: str = '.properties',
    ) -> 'LocaleCatalog':
        """
        Build a catalog for the given locales.

        Args:
            locales: Locale names (directories relative to the bundles root)
            bundles_per_locale: Bundle names (template names) found per locale
            templates: Complete template catalog
            read: Callable returning the text of a (locale, name) bundle;
                only called for bundles that match a template
            bundle_ext: Bundle file extension, used for finding paths

        Returns:
            Populated LocaleCatalog
        """
        catalog = cls(bundle_ext)

        for locale in locales:
            catalog.add_locale(locale)
            for name in sorted(bundles_per_locale.get(locale, ())):
                if name not in templates:
                    catalog.add_unused(locale, name)
                    continue
                catalog.add_bundle(locale, name, read(locale, name))

        catalog.unused_bundles.sort(key=lambda finding: finding.bundle_path)
        return catalog

    def add_locale(self, locale: str):
        """Register a locale (even one without bundles)."""
        if locale not in self.locales:
            self.locales.append(locale)
            self.locales.sort()

    def add_bundle(self, locale: str, name: str, text: str) -> Set[str]:
        """Extract and store the keys of a bundle."""
        self.add_locale(locale)
        keys = extract_bundle_keys(text)
        self.bundles[locale][name] = keys
        return keys

    def add_unused(self, locale: str, name: str) -> Finding:
        """Record a bundle that has no matching template."""
        self.add_locale(locale)
        finding = Finding(
            bundle_path=bundle_path(locale, name, self.bundle_ext),
            kind=FindingKind.UNUSED_BUNDLE,
            locale=locale,
            template=name,
        )
        self.unused_bundles.append(finding)
        return finding

    def keys_for(self, locale: str, name: str) -> Optional[Set[str]]:
        """Defined keys of a bundle, or None when the locale has no such bundle."""
        return self.bundles.get(locale, {}).get(name)

    def bundle_count(self) -> int:
        return sum(len(bundles) for bundles in self.bundles.values())
