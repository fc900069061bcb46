"""Expansion of the inline ``<code>...</code>`` mini-syntax used in lesson text."""

from __future__ import annotations

import re

from rich.markup import escape

CODE_TAG = re.compile(r"<code>(.*?)</code>", re.DOTALL)


class CodeTagFormatter:
    """Turn ``<code>`` spans into Rich markup; everything else is escaped.

    An opening tag without a matching close is left as literal text.
    """

    def __init__(self, code_style: str = "bold cyan") -> None:
        self.code_style = code_style

    def format(self, raw: str) -> str:
        if not raw:
            return ""
        parts: list[str] = []
        cursor = 0
        for match in CODE_TAG.finditer(raw):
            parts.append(escape(raw[cursor : match.start()]))
            parts.append(f"[{self.code_style}]{escape(match.group(1))}[/{self.code_style}]")
            cursor = match.end()
        parts.append(escape(raw[cursor:]))
        return "".join(parts)

    __call__ = format


__all__ = ["CODE_TAG", "CodeTagFormatter"]
