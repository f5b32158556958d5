"""
Preview Builder Service - Inline generated CSS/JS into the generated HTML
"""

from __future__ import annotations

import re

NO_HTML_PLACEHOLDER = "<html><body><h1>No HTML found</h1></body></html>"

STYLESHEET_LINK = re.compile(r"""<link[^>]*href=["'].*style\.css["'][^>]*>""", re.IGNORECASE)
SCRIPT_TAG = re.compile(r"""<script[^>]*src=["'].*script\.js["'][^>]*></script>""", re.IGNORECASE)
HEAD_CLOSE = re.compile(r"</head>", re.IGNORECASE)
BODY_CLOSE = re.compile(r"</body>", re.IGNORECASE)


def _pick(files: dict[str, str], preferred: str, suffix: str) -> str | None:
    """Preferred filename's content, else the first file with the suffix"""
    content = files.get(preferred)
    if content:
        return content
    return next((value for name, value in files.items() if name.endswith(suffix)), None)


def _replace_first(pattern: re.Pattern, replacement: str, document: str) -> str:
    # Callable replacement keeps backslashes in generated code literal
    return pattern.sub(lambda _match: replacement, document, count=1)


def inline_stylesheet(document: str, css: str) -> str:
    style_block = f"<style>{css}</style>"
    if STYLESHEET_LINK.search(document):
        return _replace_first(STYLESHEET_LINK, style_block, document)
    return _replace_first(HEAD_CLOSE, f"{style_block}</head>", document)


def inline_script(document: str, js: str) -> str:
    script_block = f"<script>{js}</script>"
    if SCRIPT_TAG.search(document):
        return _replace_first(SCRIPT_TAG, script_block, document)
    return _replace_first(BODY_CLOSE, f"{script_block}</body>", document)


def build_preview_html(files: dict[str, str]) -> str:
    """Assemble a single self-contained HTML document from a file mapping"""
    html = _pick(files, "index.html", ".html")
    if not html:
        return NO_HTML_PLACEHOLDER

    css = _pick(files, "style.css", ".css")
    js = _pick(files, "script.js", ".js")

    preview = html
    if css:
        preview = inline_stylesheet(preview, css)
    if js:
        preview = inline_script(preview, js)
    return preview
