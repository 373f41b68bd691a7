"""Template catalog: template name -> required keys."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .extractor import DEFAULT_TREE_MODES, TemplateKeys, extract_template_keys


@dataclass
class Template:
    """A template and the keys it references."""
    name: str
    keys: TemplateKeys = field(default_factory=TemplateKeys)

    @property
    def raw_keys(self) -> Set[str]:
        return self.keys.raw

    @property
    def tree_keys(self) -> Set[str]:
        return self.keys.tree


class TemplateCatalog:
    """
    All templates of a project, keyed by name.

    A template name is its path relative to the templates root, without
    extension and with '/' separators (e.g. ``account/profile``).
    """

    def __init__(self, tree_modes: Iterable[str] = DEFAULT_TREE_MODES):
        self.tree_modes = tuple(tree_modes)
        self.templates: Dict[str, Template] = {}

    @classmethod
    def build(
        cls,
        files: Iterable[Tuple[str, str]],
        tree_modes: Iterable[str] = DEFAULT_TREE_MODES,
    ) -> 'TemplateCatalog':
        """
        Build a catalog from (name, text) pairs.

        Args:
            files: Template names with their source text
            tree_modes: Mode values that mark a tree key

        Returns:
            Populated TemplateCatalog
        """
        catalog = cls(tree_modes)
        for name, text in files:
            catalog.add(name, text)
        return catalog

    def add(self, name: str, text: str) -> Template:
        """Extract the keys of a template and store it."""
        template = Template(name=name, keys=extract_template_keys(text, self.tree_modes))
        self.templates[name] = template
        return template

    def get(self, name: str) -> Optional[Template]:
        return self.templates.get(name)

    def names(self) -> List[str]:
        """Template names in lexical order."""
        return sorted(self.templates)

    def __contains__(self, name: str) -> bool:
        return name in self.templates

    def __len__(self) -> int:
        return len(self.templates)

    def __iter__(self) -> Iterator[Template]:
        for name in self.names():
            yield self.templates[name]
