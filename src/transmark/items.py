"""The translatable-item interface consumed by the selection policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class CatalogItem(Protocol):
    """What the selection policy needs to know about a catalog entry."""

    @property
    def string(self) -> str: ...

    @property
    def plural(self) -> str | None: ...

    @property
    def format_flag(self) -> str: ...

    @property
    def has_plural(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class TextItem:
    """A standalone translatable string.

    format_flag is the dialect name ("c", "php", "python", "ruby") or "" when
    none is declared; any other value is accepted and simply has no
    dialect-specific rule.
    """

    string: str
    plural: str | None = None
    format_flag: str = ""

    @property
    def has_plural(self) -> bool:
        return self.plural is not None


def item_strings(item: CatalogItem) -> list[str]:
    """Return the singular string and, if the item has one, the plural string."""
    strings = [item.string]
    if item.has_plural and item.plural is not None:
        strings.append(item.plural)
    return strings
