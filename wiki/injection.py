"""Text rewrites applied to pandoc output after conversion.

Each rule is a pure ``str -> str`` function. A rule whose target tag is
missing returns the content untouched. Rules are grouped into the two
ordered chains used by the wiki and standalone builds.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Tuple
from urllib.parse import quote

from .assets import FAVICON_NAME, favicon_data_uri, stylesheet
from .version import PROJECT_URL, __version__

Rule = Callable[[str], str]

# Sub-delimiters that may appear unescaped inside a path segment.
PATH_SAFE_CHARS = "$&+,:;=@"

CROSS_REFERENCE_RE = re.compile(r"(?<!\{)\{\{([A-Za-z0-9_ ]+)\}\}(?!\})")
HEAD_OPEN_RE = re.compile(r"<head\b[^>]*>", re.IGNORECASE)
NAV_OPEN_RE = re.compile(r"<nav\b[^>]*>", re.IGNORECASE)
BODY_CLOSE_RE = re.compile(r"</body>", re.IGNORECASE)
STYLESHEET_LINK_RE = re.compile(
    r'<link\s+rel="stylesheet"\s+href="style\.css"\s*/?>'
)

NAV_BLOCK = """
    <div class="links">
        <ul>
           <li><a href="index.html">🏠 Home</a></li>
           <li><a href="list.html">📁 List</a></li>
       </ul>
    </div>

    <h4>Table of Contents</h4>"""

FOOTER_TEMPLATE = """
    <footer>
    <p>generated by <a href="{url}">mdwi</a> <small>{version}</small></p>
    </footer>"""


def path_escape(segment: str) -> str:
    """Percent-encode ``segment`` for use as a single URL path segment."""

    return quote(segment, safe=PATH_SAFE_CHARS)


def _insert_after(pattern: re.Pattern[str], content: str, fragment: str) -> str:
    return pattern.sub(lambda match: match.group(0) + fragment, content, count=1)


def _insert_before(
    pattern: re.Pattern[str], content: str, fragment: str
) -> str:
    return pattern.sub(lambda match: fragment + match.group(0), content, count=1)


def resolve_cross_references(content: str) -> str:
    """Turn every ``{{Name}}`` into ``<a href="Name.html">Name</a>``."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return f'<a href="{path_escape(name)}.html">{name}</a>'

    return CROSS_REFERENCE_RE.sub(replace, content)


def inject_favicon(content: str) -> str:
    link = f'<link rel="icon" href="{FAVICON_NAME}" type="image/svg+xml">'
    return _insert_after(HEAD_OPEN_RE, content, link)


def inject_favicon_inline(content: str) -> str:
    link = f'<link rel="icon" href="{favicon_data_uri()}">'
    return _insert_after(HEAD_OPEN_RE, content, link)


def inline_stylesheet(content: str) -> str:
    """Swap the ``style.css`` link for a ``<style>`` block with the CSS."""

    block = f"<style>{stylesheet()}</style>"
    return STYLESHEET_LINK_RE.sub(lambda _match: block, content)


def inject_nav(content: str) -> str:
    return _insert_after(NAV_OPEN_RE, content, NAV_BLOCK)


def inject_footer(content: str) -> str:
    footer = FOOTER_TEMPLATE.format(url=PROJECT_URL, version=__version__)
    return _insert_before(BODY_CLOSE_RE, content, footer)


SITE_RULES: Tuple[Rule, ...] = (
    resolve_cross_references,
    inject_favicon,
    inject_nav,
    inject_footer,
)

STANDALONE_RULES: Tuple[Rule, ...] = (
    inject_favicon_inline,
    inline_stylesheet,
    inject_footer,
)


def apply_rules(content: str, rules: Iterable[Rule]) -> str:
    """Run ``rules`` over ``content`` left to right."""

    for rule in rules:
        content = rule(content)
    return content
