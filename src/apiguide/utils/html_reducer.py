"""
Reduce raw HTML to bounded, readable plain text for model input.

Pattern based rather than a parse tree: each step is a regex substitution
applied in a fixed order. Malformed or nested markup can
leak fragments through (e.g. a ``<nav>`` nested in another ``<nav>`` only loses
the span up to the first closing tag). Only the entities in ``_ENTITIES`` are
decoded; numeric and other named entities are left as-is.
"""

import re

DEFAULT_MAX_CHARS = 100_000

_NON_CONTENT_BLOCKS = [
    re.compile(rf"<{tag}\b[^>]*>[\s\S]*?</{tag}>", re.IGNORECASE)
    for tag in ("script", "style", "nav", "footer", "header", "aside")
]
_COMMENT = re.compile(r"<!--[\s\S]*?-->")

# (pattern, replacement) in application order
_STRUCTURAL = [
    (re.compile(r"<h[1-6]\b[^>]*>([\s\S]*?)</h[1-6]>", re.IGNORECASE), "\n\n## \\1\n\n"),
    (re.compile(r"<p\b[^>]*>([\s\S]*?)</p>", re.IGNORECASE), "\n\\1\n"),
    (re.compile(r"<li\b[^>]*>([\s\S]*?)</li>", re.IGNORECASE), "\n- \\1"),
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"<code\b[^>]*>([\s\S]*?)</code>", re.IGNORECASE), "`\\1`"),
    (re.compile(r"<pre\b[^>]*>([\s\S]*?)</pre>", re.IGNORECASE), "\n```\n\\1\n```\n"),
]

_ANY_TAG = re.compile(r"<[^>]+>")

_ENTITIES = [
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&apos;", "'"),
]

_BLANK_RUNS = re.compile(r"\n\s*\n\s*\n")
_HORIZONTAL_WS = re.compile(r"[ \t]+")
_LEADING_WS = re.compile(r"^[ \t]+", re.MULTILINE)


def reduce_html(html: str, max_chars: int = DEFAULT_MAX_CHARS) -> str:
    """
    Convert HTML into plain text suitable as model input.

    Never raises on malformed input; the result is best-effort.

    Args:
        html: Raw HTML (or already-plain text)
        max_chars: Upper bound on the returned length

    Returns:
        Reduced text, at most ``max_chars`` characters

    Example:
        >>> reduce_html("<h1>Title</h1><p>Intro text here.</p>")
        '## Title\\n\\nIntro text here.'
    """
    if not html:
        return ""

    text = html
    for pattern in _NON_CONTENT_BLOCKS:
        text = pattern.sub("", text)
    text = _COMMENT.sub("", text)

    for pattern, replacement in _STRUCTURAL:
        text = pattern.sub(replacement, text)

    text = _ANY_TAG.sub(" ", text)

    for entity, char in _ENTITIES:
        text = text.replace(entity, char)

    text = _BLANK_RUNS.sub("\n\n", text)
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _LEADING_WS.sub("", text)
    text = text.strip()

    return text[:max_chars]
