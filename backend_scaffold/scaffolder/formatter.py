"""Pretty-printing for generated file content.

JavaScript and JSON go through ``jsbeautifier`` with a fixed indent width.
Plain text (markdown, env, ignore, Dockerfile, YAML) is only dedented and
trimmed so indentation-sensitive formats survive untouched.
"""

from __future__ import annotations

import logging
import textwrap
from enum import Enum
from pathlib import PurePath

import jsbeautifier

logger = logging.getLogger(__name__)


class ContentKind(str, Enum):
    """Textual shape of a generated file."""
    SCRIPT = "script"
    JSON = "json"
    PLAIN = "plain"


_KIND_BY_SUFFIX: dict[str, ContentKind] = {
    ".js": ContentKind.SCRIPT,
    ".mjs": ContentKind.SCRIPT,
    ".cjs": ContentKind.SCRIPT,
    ".json": ContentKind.JSON,
}


def content_kind_for(filename: str) -> ContentKind:
    """Pick the formatting strategy for *filename* from its suffix."""
    return _KIND_BY_SUFFIX.get(PurePath(filename).suffix.lower(), ContentKind.PLAIN)


def _beautifier_options(indent_size: int) -> jsbeautifier.BeautifierOptions:
    opts = jsbeautifier.default_options()
    opts.indent_size = indent_size
    opts.indent_char = " "
    opts.space_in_empty_paren = True
    opts.end_with_newline = True
    return opts


def _format_plain(text: str) -> str:
    lines = textwrap.dedent(text).splitlines()
    return "\n".join(line.rstrip() for line in lines).strip("\n")


def format_content(
    text: str,
    kind: ContentKind = ContentKind.SCRIPT,
    *,
    indent_size: int = 2,
) -> str:
    """Return *text* pretty-printed for its content kind.

    Never raises: if the beautifier fails on malformed input the text is
    returned with only whitespace normalisation applied.
    """
    if kind is ContentKind.PLAIN:
        result = _format_plain(text)
    else:
        try:
            result = jsbeautifier.beautify(text, _beautifier_options(indent_size))
        except Exception as exc:
            logger.warning("Formatting failed (%s); writing content unformatted", exc)
            result = text
    return result.rstrip("\n") + "\n"
