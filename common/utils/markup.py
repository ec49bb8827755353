"""
Placeholder formatting for HTML markup.

Placeholders are prefixed with a sigil that decides how the value is
inserted:

- @name: HTML-escaped
- %name: HTML-escaped and wrapped in <em class="placeholder">
- !name: inserted as-is (trusted values such as urls built by the app)

Example:
    from common.utils import format_markup

    format_markup('Select <a href="!url">@name</a>.', {"!url": "/install", "@name": "English"})
"""

import re
from typing import Any, Dict

from markupsafe import Markup, escape


def _placeholder_value(key: str, value: Any) -> str:
    if key.startswith("@"):
        return str(escape(value))
    if key.startswith("%"):
        return f'<em class="placeholder">{escape(value)}</em>'
    if key.startswith("!"):
        return str(value)
    raise ValueError(f"Invalid placeholder '{key}': must start with @, % or !")


def format_markup(template: str, args: Dict[str, Any]) -> Markup:
    """
    Replace placeholders in a markup template.

    Replacement is a single pass with the longest key matched first,
    so inserted values are never scanned for further placeholders.

    Args:
        template: Markup containing placeholders
        args: Mapping of placeholder (with sigil) to value

    Returns:
        Markup safe for direct output
    """
    if not args:
        return Markup(template)

    replacements = {key: _placeholder_value(key, value) for key, value in args.items()}
    pattern = re.compile(
        "|".join(re.escape(key) for key in sorted(replacements, key=len, reverse=True))
    )
    return Markup(pattern.sub(lambda match: replacements[match.group(0)], template))
