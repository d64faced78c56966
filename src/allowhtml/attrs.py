"""Attribute policies.

An `AttrPolicy` is the smallest decision unit of a policy: it says whether a
value is acceptable for an attribute that is already permitted on an element.

Matchers are supplied pre-built by the caller:

- a compiled pattern (`re.compile(...)`) is tested with `search()`, so callers
  anchor it themselves (`^[0-9]+$`) when the whole value must match;
- any other callable is called with the value and its result is used as a
  boolean.

Patterns are never compiled here.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

ValueMatcher = re.Pattern[str] | Callable[[str], object]


def check_matcher(matcher: object) -> None:
    if matcher is None or isinstance(matcher, re.Pattern) or callable(matcher):
        return
    raise TypeError(f"Unsupported matcher: {type(matcher).__name__}")


@dataclass(frozen=True, slots=True)
class AttrPolicy:
    """Rule for one permitted attribute.

    `matcher=None` is the unconstrained state: every value is accepted,
    including the empty value of boolean attributes like `disabled`.
    """

    matcher: ValueMatcher | None = None

    def __post_init__(self) -> None:
        check_matcher(self.matcher)

    @property
    def is_constrained(self) -> bool:
        return self.matcher is not None

    def accepts(self, value: str | None) -> bool:
        matcher = self.matcher
        if matcher is None:
            return True
        text = "" if value is None else value
        if isinstance(matcher, re.Pattern):
            return matcher.search(text) is not None
        return bool(matcher(text))


# Shared instance for the common unconstrained case.
ANY_VALUE = AttrPolicy()
