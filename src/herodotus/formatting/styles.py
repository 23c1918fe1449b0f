"""
Prefix style variants.

Prefix colouring can be configured in four shapes. Each shape is parsed
once into one of the variants below and the formatter dispatches on the
variant type:

    NoStyle            prefix_colour is None
    SingleStyle        "red" or a dotted chain such as "blue.bold"
    StyleChain         ["red", "underline"], applied in order
    PerComponentStyle  {"system": "bold", "overall": "underline"}
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from herodotus.core.exceptions.custom_exceptions import ConfigurationError

OVERALL_KEY = "overall"

StyleSpec = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class NoStyle:
    """Leave the prefix unstyled."""


@dataclass(frozen=True)
class SingleStyle:
    """Apply one style token to the whole prefix."""

    token: str


@dataclass(frozen=True)
class StyleChain:
    """Apply style tokens to the whole prefix, first to last."""

    tokens: Tuple[str, ...]


@dataclass(frozen=True)
class PerComponentStyle:
    """
    Style individual prefix components.

    Attributes:
        components: Component name to style spec. Names that are not
            prefix components are ignored when formatting.
        overall: Optional style applied to the rebuilt prefix
    """

    components: Mapping[str, StyleSpec] = field(default_factory=dict)
    overall: Optional[StyleSpec] = None


PrefixStyle = Union[NoStyle, SingleStyle, StyleChain, PerComponentStyle]

_VARIANTS = (NoStyle, SingleStyle, StyleChain, PerComponentStyle)


def _style_spec(value: Any) -> StyleSpec:
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigurationError(
        f"Invalid style specification: {value!r}",
        error_code="STYLE_INVALID_SPEC",
        details={"value": value},
    )


def parse_prefix_style(value: Any) -> PrefixStyle:
    """
    Convert a prefix_colour configuration value into a PrefixStyle.

    Args:
        value: None, a style token, a list of tokens, a component mapping
            or an existing PrefixStyle variant

    Returns:
        The matching PrefixStyle variant

    Raises:
        ConfigurationError: If the value has none of the supported shapes
    """
    if isinstance(value, _VARIANTS):
        return value
    if value is None:
        return NoStyle()
    if isinstance(value, str):
        return SingleStyle(value)
    if isinstance(value, (list, tuple)):
        return StyleChain(_style_spec(value))
    if isinstance(value, Mapping):
        components = {
            str(key): _style_spec(spec)
            for key, spec in value.items()
            if str(key) != OVERALL_KEY
        }
        overall = value.get(OVERALL_KEY)
        return PerComponentStyle(
            components=components,
            overall=_style_spec(overall) if overall is not None else None,
        )
    raise ConfigurationError(
        f"Unsupported prefix colour configuration: {value!r}",
        error_code="PREFIX_COLOUR_INVALID",
        details={"type": type(value).__name__},
    )
