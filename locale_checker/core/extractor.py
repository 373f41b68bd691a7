"""Key extraction from templates and resource bundles."""

import re
from dataclasses import dataclass, field
from typing import Iterable, Set

# {@pre type="content" key="items[0].label" mode="paired" /}
TEMPLATE_KEY_PATTERN = re.compile(
    r'\{@pre\s+type="content"\s+key="([a-zA-Z0-9.\[\]]+)"(?:\s+mode="([^"]+)")?\s*/\}',
    re.MULTILINE,
)

# items[0].label = Label
BUNDLE_KEY_PATTERN = re.compile(r'^\s*([a-zA-Z0-9.\[\]]+)\s*=.*$', re.MULTILINE)

DEFAULT_TREE_MODES = ('paired', 'json')

# Characters allowed right after a tree key inside a covered key
_TREE_SEPARATORS = ('.', '[')


@dataclass
class TemplateKeys:
    """Keys referenced by a single template."""
    raw: Set[str] = field(default_factory=set)
    tree: Set[str] = field(default_factory=set)

    @property
    def is_empty(self) -> bool:
        return not self.raw and not self.tree


def extract_template_keys(text: str, tree_modes: Iterable[str] = DEFAULT_TREE_MODES) -> TemplateKeys:
    """
    Extract content keys referenced by a template.

    Keys whose mode is one of ``tree_modes`` are tree keys: they stand for
    a whole subtree of bundle keys (arrays or objects). Every other key,
    including keys with an unknown mode, is a raw key.

    Args:
        text: Template source
        tree_modes: Mode values that mark a tree key

    Returns:
        TemplateKeys with raw and tree key sets
    """
    modes = frozenset(tree_modes)
    keys = TemplateKeys()

    for match in TEMPLATE_KEY_PATTERN.finditer(text):
        key, mode = match.group(1), match.group(2)
        if mode in modes:
            keys.tree.add(key)
        else:
            keys.raw.add(key)

    return keys


def extract_bundle_keys(text: str) -> Set[str]:
    """Extract the keys defined by a bundle. Values are ignored."""
    return {match.group(1) for match in BUNDLE_KEY_PATTERN.finditer(text)}


def is_covered(key: str, tree_key: str) -> bool:
    """
    Check whether a bundle key belongs to the subtree of a tree key.

    ``items`` covers ``items``, ``items.title`` and ``items[0].label``
    but not ``itemsCount``.
    """
    if not key.startswith(tree_key):
        return False

    rest = key[len(tree_key):]
    return not rest or rest.startswith(_TREE_SEPARATORS)


def is_covered_by_any(key: str, tree_keys: Iterable[str]) -> bool:
    """Check whether any of the tree keys covers the bundle key."""
    return any(is_covered(key, tree_key) for tree_key in tree_keys)
