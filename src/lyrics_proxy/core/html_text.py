"""Crude HTML-to-text extraction for scraped search result pages.

This is a heuristic, not an HTML parser. Each step is a separate function so
the pipeline can be tested piece by piece:

1. drop ``<script>`` blocks
2. drop every remaining tag
3. collapse runs of newlines
4. trim
5. cut everything up to and including the first "lyrics"
"""

import re

from ..config import MIN_SCRAPED_LENGTH

_SCRIPT_BLOCK = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
# \Z: a tag left open at the very end of the page is dropped too
_TAG = re.compile(r"</?[^>]+(>|\Z)")
_NEWLINE_RUN = re.compile(r"\n{2,}")
# Characters JavaScript's String.prototype.trim removes. str.strip() differs:
# it also strips \x1c-\x1f and \x85 but keeps U+FEFF.
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_KEYWORD = "lyrics"
_KEYWORD_RE = re.compile(_KEYWORD, re.IGNORECASE | re.ASCII)


def strip_script_blocks(html: str) -> str:
    """Remove ``<script>...</script>`` blocks, including their contents."""
    return _SCRIPT_BLOCK.sub("", html)


def strip_tags(html: str) -> str:
    """Remove anything that looks like a tag, keeping the text between."""
    return _TAG.sub("", html)


def trim(text: str) -> str:
    """Strip leading and trailing whitespace the way JavaScript does."""
    return text.strip(JS_WHITESPACE)


def collapse_newlines(text: str) -> str:
    """Replace two or more consecutive newlines with a single one."""
    return _NEWLINE_RUN.sub("\n", text)


def html_to_text(html: str) -> str:
    """Run the stripping steps and trim the result."""
    text = strip_script_blocks(html)
    text = strip_tags(text)
    text = collapse_newlines(text)
    return trim(text)


def text_after_keyword(text: str, keyword: str = _KEYWORD) -> str:
    """Return the trimmed text following the first case-insensitive keyword.

    If the keyword does not occur, the text is returned unchanged.
    """
    pattern = _KEYWORD_RE if keyword == _KEYWORD else re.compile(
        re.escape(keyword), re.IGNORECASE | re.ASCII
    )
    match = pattern.search(text)
    if match is None:
        return text
    return trim(text[match.start() + len(keyword):])


def is_acceptable(candidate: str, min_length: int = MIN_SCRAPED_LENGTH) -> bool:
    """Scraped text is only trusted when it is longer than ``min_length``."""
    return bool(candidate) and len(candidate) > min_length


def extract_lyrics(html: str) -> str:
    """Best-effort lyrics candidate from a rendered search result page."""
    return text_after_keyword(html_to_text(html))
