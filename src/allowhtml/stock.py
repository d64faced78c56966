"""Ready-made policies.

Both factories return a fresh, unfrozen `Policy` so callers can extend it
before publishing it with `freeze()`.
"""

from __future__ import annotations

import re

from .policy import FrozenPolicy, Policy

_DIGITS = re.compile(r"^[0-9]+$")
_DIRECTION = re.compile(r"^(?i:rtl|ltr)$")
_LANGUAGE = re.compile(r"^[a-zA-Z]{2,20}(?:-[a-zA-Z0-9]{1,10})*$")
_LIST_TYPE = re.compile(r"^[aAiI1]$")


def strict_policy() -> Policy:
    """Nothing beyond the elements that are valid without attributes."""

    return Policy()


def ugc_policy() -> Policy:
    """Policy for user-generated content such as comments and posts."""

    policy = Policy()

    # Global attributes
    policy.allow_attrs("dir").matching(_DIRECTION).globally()
    policy.allow_attrs("lang").matching(_LANGUAGE).globally()
    policy.allow_attrs("title").globally()

    # Links
    policy.allow_attrs("href").on_elements("a")
    policy.require_nofollow_on_links(True)
    policy.allow_relative_urls(True)
    policy.allow_url_schemes("mailto", "http", "https")

    # Images
    policy.allow_attrs("src", "alt").on_elements("img")
    policy.allow_attrs("width", "height").matching(_DIGITS).on_elements("img")

    # Quotes
    policy.allow_attrs("cite").on_elements("blockquote", "q")

    # Lists
    policy.allow_attrs("type").matching(_LIST_TYPE).on_elements("ol")
    policy.allow_attrs("start").matching(_DIGITS).on_elements("ol")

    # Tables
    policy.allow_attrs("colspan", "rowspan").matching(_DIGITS).on_elements("td", "th")
    policy.allow_attrs("abbr").on_elements("th")

    return policy


DEFAULT_POLICY: FrozenPolicy = ugc_policy().freeze()
