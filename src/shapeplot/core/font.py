"""Font shorthand codec.

Splits a CSS font shorthand string into its five ordered fields (style,
variant, weight, size, family) and serializes them back into the canonical
single-space form, e.g. ``"italic small-caps bold 12px serif"``.

Malformed strings never raise. ``parse`` reports them by returning None and
the field mutators fall back to the default font.
"""

import re
from numbers import Real

from shapeplot.config import FontConfig
from shapeplot.domain import FontParts

STYLE_KEYWORDS = frozenset({"italic", "oblique"})
VARIANT_KEYWORDS = frozenset({"small-caps"})
WEIGHT_KEYWORDS = frozenset(
    {"bold", "bolder", "lighter"} | {f"{n}00" for n in range(1, 10)}
)

# Absolute/relative keyword sizes or a length, optionally with /line-height
SIZE_PATTERN = re.compile(
    r"^(?:(?:xx?-)?(?:small|large)|medium|smaller|larger"
    r"|[.\d]+(?:%|in|[cem]m|ex|p[ctx]|rem))"
    r"(?:/(?:normal|[.\d]+(?:%|in|[cem]m|ex|p[ctx]|rem)?))?$",
    re.IGNORECASE,
)
LEADING_NUMBER = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?", re.IGNORECASE)

PART_COUNT = 5


def _format_number(value: float) -> str:
    """Render a number the way a script engine would concatenate it."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FontCodec:
    """Tokenizes and formats font shorthand strings.

    Example:
        codec = FontCodec()
        parts = codec.parse("italic small-caps bold 12px serif")
        codec.format(parts)  # "italic small-caps bold 12px serif"
        codec.with_size("italic small-caps bold 12px serif", 20)
        # "italic small-caps bold 20px serif"
    """

    def __init__(self, config: FontConfig | None = None) -> None:
        """Initialize the codec.

        Args:
            config: Font defaults and size unit (library defaults if None)
        """
        self.config = config or FontConfig()
        self.default = FontParts(*self.config.default_parts())

    @property
    def default_font(self) -> str:
        """The default font in canonical form."""
        return self.format(self.default)

    def parse(self, font: str) -> FontParts | None:
        """Split a font string into its five fields.

        The string is split on whitespace; the family takes whatever remains
        after the fourth token, so multi-word families survive.

        Args:
            font: Font shorthand string

        Returns:
            FontParts, or None when fewer than five tokens are present
        """
        tokens = font.split(maxsplit=PART_COUNT - 1)
        if len(tokens) < PART_COUNT:
            return None
        return FontParts(*tokens)

    def is_well_formed(self, font: str) -> bool:
        """Check whether ``font`` splits into all five fields."""
        return self.parse(font) is not None

    def format(self, font: FontParts | str) -> str:
        """Serialize font parts, or canonicalize a raw font string.

        Parts are joined with single spaces. A raw string (such as the value
        a surface reports natively, e.g. ``"10px sans-serif"``) is matched
        against the shorthand grammar and missing style, variant and weight
        fields are filled with the defaults. An empty string formats to the
        default font; any other string outside the grammar is only
        whitespace-normalized.

        Args:
            font: FontParts or font shorthand string

        Returns:
            Canonical font string
        """
        if isinstance(font, FontParts):
            return " ".join(" ".join(part.split()) for part in font)

        tokens = font.split()
        if not tokens:
            return self.default_font

        parts = self._match_shorthand(tokens)
        if parts is None:
            return " ".join(tokens)

        return self.format(parts)

    def _match_shorthand(self, tokens: list[str]) -> FontParts | None:
        """Match tokens against ``[style] [variant] [weight] size family``."""
        found: dict[str, str] = {}
        idx = 0

        while idx < len(tokens) and idx < 3:
            token = tokens[idx]
            key = token.lower()
            if key == "normal":
                pass
            elif key in STYLE_KEYWORDS and "style" not in found:
                found["style"] = token
            elif key in VARIANT_KEYWORDS and "variant" not in found:
                found["variant"] = token
            elif key in WEIGHT_KEYWORDS and "weight" not in found:
                found["weight"] = token
            else:
                break
            idx += 1

        if idx >= len(tokens):
            return None

        # Line height may be written with spaces around the slash
        size = tokens[idx]
        idx += 1
        while idx < len(tokens) and (size.endswith("/") or tokens[idx].startswith("/")):
            size += tokens[idx]
            idx += 1

        if not SIZE_PATTERN.match(size) or idx >= len(tokens):
            return None

        return FontParts(
            style=found.get("style", self.default.style),
            variant=found.get("variant", self.default.variant),
            weight=found.get("weight", self.default.weight),
            size=size,
            family=" ".join(tokens[idx:]),
        )

    # Field mutators

    def _with(self, font: str, field: str, value: str) -> str:
        parts = self.parse(font)
        if parts is None:
            return self.default_font
        return self.format(parts.with_field(field, value or getattr(self.default, field)))

    def with_style(self, font: str, style: str | None) -> str:
        """Replace the style field (falsy values restore the default)."""
        return self._with(font, "style", style or "")

    def with_variant(self, font: str, variant: str | None) -> str:
        """Replace the variant field (falsy values restore the default)."""
        return self._with(font, "variant", variant or "")

    def with_weight(self, font: str, weight: str | int | None) -> str:
        """Replace the weight field; numeric weights are stringified."""
        return self._with(font, "weight", "" if weight is None else str(weight))

    def with_size(self, font: str, size: str | float | None) -> str:
        """Replace the size field; numbers get the configured length unit."""
        if isinstance(size, Real) and not isinstance(size, bool):
            value = f"{_format_number(size)}{self.config.size_unit}"
        else:
            value = size or ""
        return self._with(font, "size", value)

    def with_family(self, font: str, family: str | None) -> str:
        """Replace the family field (falsy values restore the default)."""
        return self._with(font, "family", family or "")

    # Field getters

    def style_of(self, font: str) -> str | None:
        parts = self.parse(font)
        return parts.style if parts else None

    def variant_of(self, font: str) -> str | None:
        parts = self.parse(font)
        return parts.variant if parts else None

    def weight_of(self, font: str) -> str | None:
        parts = self.parse(font)
        return parts.weight if parts else None

    def size_of(self, font: str) -> float | None:
        """Numeric part of the size field.

        Returns:
            Leading number of the size (``"12px/1.5"`` gives 12.0), or None if
            the font is malformed or the size is a keyword such as ``medium``
        """
        parts = self.parse(font)
        if parts is None:
            return None
        match = LEADING_NUMBER.match(parts.size)
        return float(match.group()) if match else None

    def family_of(self, font: str) -> str | None:
        parts = self.parse(font)
        return parts.family if parts else None
