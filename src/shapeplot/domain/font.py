"""Font shorthand decomposition."""

from collections.abc import Iterator
from dataclasses import dataclass, fields, replace

FONT_FIELDS = ("style", "variant", "weight", "size", "family")


@dataclass(frozen=True, slots=True)
class FontParts:
    """The five ordered fields of a CSS font shorthand string.

    Attributes:
        style: Font style (normal, italic, oblique)
        variant: Font variant (normal, small-caps)
        weight: Font weight (normal, bold, 100-900, ...)
        size: Font size with unit, optionally with ``/line-height``
        family: Font family list, may contain spaces
    """

    style: str
    variant: str
    weight: str
    size: str
    family: str

    def __iter__(self) -> Iterator[str]:
        for f in fields(self):
            yield getattr(self, f.name)

    def to_tuple(self) -> tuple[str, str, str, str, str]:
        """Convert to a plain 5-tuple in shorthand order."""
        return (self.style, self.variant, self.weight, self.size, self.family)

    def with_field(self, name: str, value: str) -> "FontParts":
        """Return a copy with one field substituted.

        Args:
            name: One of style, variant, weight, size, family
            value: New field value

        Returns:
            New FontParts instance

        Raises:
            KeyError: If ``name`` is not a font field
        """
        if name not in FONT_FIELDS:
            raise KeyError(name)
        return replace(self, **{name: value})
