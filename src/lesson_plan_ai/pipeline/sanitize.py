import re

_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_IFRAME_BLOCK = re.compile(r"<iframe\b[^<]*(?:(?!</iframe>)<[^<]*)*</iframe>", re.IGNORECASE)
_JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)

_PATTERNS = (_SCRIPT_BLOCK, _IFRAME_BLOCK, _JAVASCRIPT_SCHEME, _EVENT_HANDLER)


def sanitize_html(html: str) -> str:
    """Strip script/iframe blocks, ``javascript:`` and inline event handlers.

    This is a regex blacklist, not an HTML parser. Removing one match can splice
    a new one together (``jajavascript:vascript:``), so the passes run until the
    text is stable. Every removal shortens the text, which bounds the loop.
    """
    current = html
    while True:
        cleaned = current
        for pattern in _PATTERNS:
            cleaned = pattern.sub("", cleaned)
        if cleaned == current:
            return cleaned
        current = cleaned
