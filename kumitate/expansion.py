import logging
import re
from dataclasses import dataclass
from typing import Any

from kumitate.constants import DEFAULT_CSS_PREFIX, MAX_LOOKBACK
from kumitate.parser import parse_shorthand
from kumitate.renderer import generate_jsx


logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"(\S+)$")
ALLOWED_TOKEN = re.compile(r"^[A-Za-z0-9.#>{}_+\-:]+$")
INDENT_PATTERN = re.compile(r"^\s*")


@dataclass
class Expansion:
    """Result of expanding the shorthand token that ends a line prefix."""
    token: str
    start: int
    markup: str
    cursor: int

    @property
    def end(self) -> int:
        return self.start + len(self.token)

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "start": self.start,
            "end": self.end,
            "cursor": self.cursor,
            "markup": self.markup,
        }


def extract_token(line_prefix: str) -> str | None:
    search_text = line_prefix[-MAX_LOOKBACK:]
    match = TOKEN_PATTERN.search(search_text)
    if not match:
        return None
    token = match.group(1)
    if not ALLOWED_TOKEN.match(token):
        return None
    return token


def leading_indent(line_prefix: str) -> str:
    match = INDENT_PATTERN.match(line_prefix)
    return match.group(0) if match else ""


def cursor_offset(markup: str) -> int:
    """Offset just inside the first opening tag, or the end of ``markup``."""
    idx = markup.find('>')
    if idx == -1:
        return len(markup)
    return idx + 1


def expand_line(
    line_prefix: str,
    css_prefix: str = DEFAULT_CSS_PREFIX
) -> Expansion | None:
    """
    Expand the shorthand right before the cursor.

    ``line_prefix`` is the text of the current line up to the cursor.
    Returns None when there is nothing to expand, in which case the caller
    should perform its default action instead.
    """
    token = extract_token(line_prefix)
    if token is None:
        return None

    tree = parse_shorthand(token)
    if tree is None:
        logger.debug("no element in token %r", token)
        return None

    try:
        markup = generate_jsx(tree, css_prefix, 0, leading_indent(line_prefix))
    except Exception:
        logger.exception("failed to render %r", token)
        return None

    start = line_prefix.rfind(token)
    return Expansion(
        token=token,
        start=start,
        markup=markup,
        cursor=start + cursor_offset(markup),
    )
