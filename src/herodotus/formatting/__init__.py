"""
Herodotus line formatting.

Components:
    - colours: ANSI colouring and stripping (rich)
    - styles: Prefix style variants and configuration parsing
    - prefix: Prefix assembly and the logging formatter
"""

from herodotus.formatting.colours import colourise, strip_colours
from herodotus.formatting.prefix import HerodotusFormatter, PrefixFormatter
from herodotus.formatting.styles import (
    NoStyle,
    PerComponentStyle,
    PrefixStyle,
    SingleStyle,
    StyleChain,
    parse_prefix_style,
)

__all__ = [
    "colourise",
    "strip_colours",
    "HerodotusFormatter",
    "PrefixFormatter",
    "NoStyle",
    "PerComponentStyle",
    "PrefixStyle",
    "SingleStyle",
    "StyleChain",
    "parse_prefix_style",
]
