"""
Turn one file's text into HTML for the human view.

Markdown files are rendered with Python-Markdown; everything else goes through
Pygments. Lexer selection is a plain table lookup built once from the Pygments
registry, with TextLexer as the no-match branch.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import markdown  # Python-Markdown
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_all_lexers, get_lexer_by_name

MARKDOWN_EXTENSIONS = {".md", ".markdown", ".mdown", ".mkd", ".mkdn"}
MARKDOWN_FEATURES = ["fenced_code", "tables"]

# Extensions claimed by several lexers; first registry match wins otherwise.
PREFERRED_LEXERS = {
    ".h": "c",
    ".c": "c",
    ".hpp": "cpp",
    ".m": "objective-c",
    ".pl": "perl",
    ".v": "verilog",
    ".ts": "typescript",
    ".js": "javascript",
    ".json": "json",
    ".xml": "xml",
    ".html": "html",
    ".sql": "sql",
    ".sh": "bash",
    ".ini": "ini",
    ".cfg": "ini",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".py": "python",
    ".rs": "rust",
    ".txt": "text",
}

_SIMPLE_EXT = re.compile(r"\*(\.[^*?\[\]]+)")
_ONE_CLASS = re.compile(r"\*(\.[^*?\[\]]*)\[([^\]\-!^]+)\]([^*?\[\]]*)")
_WILDCARDS = re.compile(r"[*?\[\]]")


def _pattern_extensions(pattern: str) -> List[str]:
    m = _SIMPLE_EXT.fullmatch(pattern)
    if m:
        return [m.group(1).lower()]
    m = _ONE_CLASS.fullmatch(pattern)
    if m:
        head, chars, tail = m.groups()
        return [(head + ch + tail).lower() for ch in chars]
    return []


def _build_tables():
    by_filename: Dict[str, str] = {}
    by_extension: Dict[str, str] = {}
    known_aliases = set()
    for _name, aliases, patterns, _mimetypes in get_all_lexers():
        if not aliases:
            continue
        alias = aliases[0]
        known_aliases.update(aliases)
        for pattern in patterns:
            if not _WILDCARDS.search(pattern):
                by_filename.setdefault(pattern, alias)
                continue
            for ext in _pattern_extensions(pattern):
                by_extension.setdefault(ext, alias)
    for ext, alias in PREFERRED_LEXERS.items():
        if alias in known_aliases:
            by_extension[ext] = alias
    return by_filename, by_extension


@dataclass(frozen=True)
class SyntaxAssets:
    """Read-only highlighting setup shared by every file of a run."""

    style: str
    formatter: HtmlFormatter = field(repr=False)
    css: str = field(repr=False)
    by_filename: Mapping[str, str] = field(repr=False)
    by_extension: Mapping[str, str] = field(repr=False)

    @classmethod
    def load(cls, style: str = "default") -> "SyntaxAssets":
        formatter = HtmlFormatter(style=style, nowrap=False)
        by_filename, by_extension = _build_tables()
        return cls(
            style=style,
            formatter=formatter,
            css=formatter.get_style_defs(".highlight"),
            by_filename=MappingProxyType(by_filename),
            by_extension=MappingProxyType(by_extension),
        )

    def lexer_alias_for(self, filename: str) -> Optional[str]:
        """Lexer alias for a path, or None when nothing matches."""
        name = filename.rsplit("/", 1)[-1]
        if name in self.by_filename:
            return self.by_filename[name]
        parts = name.lower().split(".")[1:]
        # longest suffix first: "x.d.ts" tries ".d.ts" then ".ts"
        for i in range(len(parts)):
            ext = "." + ".".join(parts[i:])
            if ext in self.by_extension:
                return self.by_extension[ext]
        return None

    def lexer_for(self, filename: str) -> Lexer:
        alias = self.lexer_alias_for(filename)
        if alias is None:
            return TextLexer(stripnl=False)
        return get_lexer_by_name(alias, stripnl=False, stripall=False)


def is_markdown(filename: str) -> bool:
    lowered = filename.lower()
    return any(lowered.endswith(ext) for ext in MARKDOWN_EXTENSIONS)


def render_markdown_text(md_text: str) -> str:
    return markdown.markdown(md_text, extensions=MARKDOWN_FEATURES)


def highlight_code(text: str, filename: str, assets: SyntaxAssets) -> str:
    return highlight(text, assets.lexer_for(filename), assets.formatter)


def render_body(rel: str, text: str, assets: SyntaxAssets) -> str:
    if is_markdown(rel):
        return f'<div class="markdown-content">{render_markdown_text(text)}</div>'
    return highlight_code(text, rel, assets)
