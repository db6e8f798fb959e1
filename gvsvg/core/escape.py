"""XML escaping for character data, attribute values and hrefs."""

import re


_URL_UNSAFE = re.compile(r'[\x00-\x20\x7f]')


def _escape_markup(text: str) -> str:
    # '&' goes first so the references written below are not escaped again
    return (
        text.replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('"', '&quot;')
        .replace("'", '&#39;')
    )


def xml_string(text: str) -> str:
    """Escape a string for use as XML character data or an attribute value."""
    return _escape_markup(text)


def xml_comment_string(text: str) -> str:
    """Like xml_string, but hyphens become ``&#45;`` so no ``--`` reaches a comment."""
    return _escape_markup(text).replace("-", "&#45;")


def xml_url_string(url: str) -> str:
    """Escape a URL for use as an href attribute value."""
    url = _URL_UNSAFE.sub(lambda m: '%%%02X' % ord(m.group()), url)
    return _escape_markup(url)
