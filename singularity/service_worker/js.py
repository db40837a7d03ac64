"""Rendering of build options as a JavaScript object literal."""

import json
import re

# A slash and the run of backslashes before it
_SLASH = re.compile(r"(\\*)/")


def _escape_slash(match: re.Match) -> str:
    backslashes = match.group(1)
    if len(backslashes) % 2:
        return match.group(0)
    return backslashes + "\\/"


class JsRegex(str):
    """Regex source that renders as a JS RegExp literal instead of a string."""

    def to_js(self) -> str:
        return "/" + _SLASH.sub(_escape_slash, str(self)) + "/"


def to_js_literal(value) -> str:
    """
    Render a JSON-like value as JavaScript source.

    Dicts, lists and scalars render as JSON; JsRegex values render as
    regex literals so Workbox receives real RegExp objects.
    """
    if isinstance(value, JsRegex):
        return value.to_js()
    if isinstance(value, dict):
        items = ", ".join(f"{json.dumps(str(k))}: {to_js_literal(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_js_literal(v) for v in value) + "]"
    return json.dumps(value)
