"""URL classification for URL-valued attributes.

Only classifies values; nothing is resolved, fetched or rewritten. Which
attributes carry URLs is the sanitizer's call (see `constants.URL_ATTRIBUTES`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from .policy import PolicyView

# Browsers ignore these inside a scheme, so 'jav\tascript:' still runs script.
_IGNORED_IN_SCHEME_RE = re.compile(r"[`\x00-\x20\x7f-\xa0\s\ufffd]+")
_SCHEME_RE = re.compile(r"^([a-z][a-z0-9+.\-]*):")


@dataclass(frozen=True, slots=True)
class UrlInfo:
    parseable: bool
    scheme: str = ""
    relative: bool = False


def _has_control_chars(text: str) -> bool:
    return any(ord(c) < 0x20 or ord(c) == 0x7F for c in text)


def classify_url(value: str) -> UrlInfo:
    """Split `value` into the parts the policy cares about.

    A relative URL has neither scheme nor host. Protocol-relative values
    (`//example.com/x`) have a host and are therefore not relative; with no
    scheme they never match an allowed scheme either.
    """

    text = value.strip()
    if _has_control_chars(text):
        return UrlInfo(parseable=False)
    try:
        parts = urlsplit(text)
    except ValueError:
        return UrlInfo(parseable=False)
    scheme = parts.scheme.lower()
    return UrlInfo(parseable=True, scheme=scheme, relative=not scheme and not parts.netloc)


def leading_scheme(value: str) -> str:
    """Return the scheme a browser would see, lowercased, or "" if none."""

    match = _SCHEME_RE.match(_IGNORED_IN_SCHEME_RE.sub("", value.lower()))
    return match.group(1) if match else ""


def is_url_allowed(policy: PolicyView, value: str) -> bool:
    """Check a URL attribute value against the policy's URL rules.

    Without `parseable_urls_required`, only the scheme is checked: values
    without one pass. With it, the value must parse; relative URLs then need
    `relative_urls_allowed` and absolute ones an allowed scheme.
    """

    if not policy.parseable_urls_required:
        scheme = leading_scheme(value)
        return not scheme or policy.is_scheme_allowed(scheme)

    info = classify_url(value)
    if not info.parseable:
        return False
    if info.relative:
        return policy.relative_urls_allowed
    if not info.scheme:
        return False
    return policy.is_scheme_allowed(info.scheme)
