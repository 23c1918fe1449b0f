"""
ANSI colouring and stripping backed by rich.

Style tokens follow the names used in prefix_colour configuration:
colour names ("red", "bright_blue"), text attributes ("bold",
"underline") and background colours written as "bg_<colour>". A dotted
token ("blue.bold") is a chain of tokens. Each token wraps the text in its
own escape sequence, so chained tokens nest.

Example:
    >>> colourise("foo", "red")
    '\\x1b[31mfoo\\x1b[0m'
    >>> strip_colours("\\x1b[31mfoo\\x1b[39m")
    'foo'
"""

from functools import lru_cache
from typing import Iterable, List, Optional, Union

from rich.ansi import re_ansi
from rich.color import ColorParseError, ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from herodotus.core.exceptions.custom_exceptions import ConfigurationError

_BACKGROUND_PREFIX = "bg_"


def style_tokens(spec: Union[str, Iterable[str], None]) -> List[str]:
    """Flatten a style spec into individual tokens, splitting dotted names."""
    if spec is None:
        return []
    if isinstance(spec, str):
        spec = [spec]
    tokens = []
    for item in spec:
        tokens.extend(part for part in str(item).split(".") if part)
    return tokens


@lru_cache(maxsize=128)
def _style(token: str) -> Style:
    definition = token.strip().lower()
    if definition.startswith(_BACKGROUND_PREFIX):
        definition = f"on {definition[len(_BACKGROUND_PREFIX):]}"
    try:
        return Style.parse(definition)
    except (StyleSyntaxError, ColorParseError) as e:
        raise ConfigurationError(
            f"Unable to parse style token {token!r}",
            error_code="STYLE_UNKNOWN_TOKEN",
            details={"token": token, "reason": str(e)},
        ) from e


def colourise(text: str, spec: Union[str, Iterable[str], None]) -> str:
    """
    Wrap text in the ANSI styles named by spec, applied in order.

    Args:
        text: Text to style
        spec: A token, a dotted chain, a list of tokens or None

    Returns:
        The styled text, or text unchanged when spec is empty

    Raises:
        ConfigurationError: If a token is not a known colour or attribute
    """
    for token in style_tokens(spec):
        text = _style(token).render(text, color_system=ColorSystem.STANDARD)
    return text


def strip_colours(text: Optional[str]) -> str:
    """Remove ANSI escape sequences from text, leaving every other character."""
    if not text:
        return ""
    return re_ansi.sub("", str(text))
