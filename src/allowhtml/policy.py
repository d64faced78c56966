"""Allow-list policy store, builder and query interface.

A policy is built once and then queried many times:

    policy = Policy()
    policy.allow_attrs("title").globally()
    policy.allow_attrs("colspan", "rowspan").matching(re.compile(r"^[0-9]+$")).on_elements("td", "th")
    policy.allow_url_schemes("http", "https", "mailto")
    published = policy.freeze()

`Policy` is the mutable store used during construction. It is owned by one
caller and is not safe for concurrent mutation. `freeze()` returns a
`FrozenPolicy`, an immutable snapshot that any number of sanitizer threads can
query without locking. Both answer the same queries through `PolicyView`.

All element, attribute and scheme names are lowercased with `str.lower()` on
insertion and on lookup.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from . import urls
from .attrs import ANY_VALUE, AttrPolicy, ValueMatcher, check_matcher
from .constants import ELEMENTS_WITHOUT_ATTRS
from .errors import PolicyDecision

_DEFAULT_ELEMENTS_WITHOUT_ATTRS = frozenset(ELEMENTS_WITHOUT_ATTRS)

_EMPTY_ATTRS: Mapping[str, AttrPolicy] = MappingProxyType({})


class PolicyView:
    """Read-only questions a sanitizer asks while walking untrusted input.

    Subclasses provide `element_attrs`, `global_attrs`, `url_schemes`,
    `elements_without_attrs` and the four flag attributes.
    """

    __slots__ = ()

    element_attrs: Mapping[str, Mapping[str, AttrPolicy]]
    global_attrs: Mapping[str, AttrPolicy]
    url_schemes: Collection[str]
    elements_without_attrs: Collection[str]
    doctype_allowed: bool
    nofollow_required: bool
    parseable_urls_required: bool
    relative_urls_allowed: bool

    def is_element_allowed(self, element: str) -> bool:
        name = element.lower()
        return name in self.element_attrs or name in self.elements_without_attrs

    def attr_policy(self, element: str, attr: str) -> AttrPolicy | None:
        """Return the rule for `attr` on `element`, or None to drop it.

        Element-specific rules win over global ones. Global rules only apply
        to permitted elements.
        """

        return self._resolve(element.lower(), attr.lower())[0]

    def is_attr_allowed(self, element: str, attr: str) -> bool:
        return self.attr_policy(element, attr) is not None

    def is_attr_value_allowed(self, element: str, attr: str, value: str | None) -> bool:
        rule = self.attr_policy(element, attr)
        return rule is not None and rule.accepts(value)

    def explain_attr(self, element: str, attr: str, value: str | None = None) -> PolicyDecision:
        element = element.lower()
        attr = attr.lower()
        rule, scope = self._resolve(element, attr)
        if rule is None:
            return PolicyDecision(element, attr, False, PolicyDecision.NO_RULE)
        if not rule.accepts(value):
            return PolicyDecision(element, attr, False, PolicyDecision.VALUE_REJECTED, scope=scope)
        reason = PolicyDecision.ELEMENT_RULE if scope == "element" else PolicyDecision.GLOBAL_RULE
        return PolicyDecision(element, attr, True, reason, scope=scope)

    def is_scheme_allowed(self, scheme: str) -> bool:
        return scheme.lower() in self.url_schemes

    def is_url_allowed(self, value: str) -> bool:
        return urls.is_url_allowed(self, value)

    def _resolve(self, element: str, attr: str) -> tuple[AttrPolicy | None, str | None]:
        attrs = self.element_attrs.get(element)
        if attrs is not None:
            rule = attrs.get(attr)
            if rule is not None:
                return rule, "element"
        elif element not in self.elements_without_attrs:
            return None, None
        rule = self.global_attrs.get(attr)
        if rule is not None:
            return rule, "global"
        return None, None


class AttrPolicyBuilder:
    """Pending attribute declaration; nothing is stored until it is committed.

    Examples:
        policy.allow_attrs("title").globally()
        policy.allow_attrs("abbr").on_elements("td", "th")
        policy.allow_attrs("colspan", "rowspan").matching(DIGITS).on_elements("td", "th")
    """

    __slots__ = ("_policy", "attr_names", "matcher")

    def __init__(self, policy: Policy, attr_names: tuple[str, ...]) -> None:
        self._policy = policy
        self.attr_names = attr_names
        self.matcher: ValueMatcher | None = None

    def matching(self, matcher: ValueMatcher) -> AttrPolicyBuilder:
        """Constrain values with `matcher`. A second call replaces the first."""

        check_matcher(matcher)
        self.matcher = matcher
        return self

    def on_elements(self, *elements: str) -> Policy:
        rule = self._build()
        for element in elements:
            for attr in self.attr_names:
                self._policy._set_element_attr(element.lower(), attr, rule)
        return self._policy

    def globally(self) -> Policy:
        rule = self._build()
        for attr in self.attr_names:
            self._policy._set_global_attr(attr, rule)
        return self._policy

    def _build(self) -> AttrPolicy:
        if self.matcher is None:
            return ANY_VALUE
        return AttrPolicy(self.matcher)


class Policy(PolicyView):
    """Mutable allow-list store used while a policy is being declared.

    A new policy permits nothing except the elements that are valid without
    attributes (see `constants.ELEMENTS_WITHOUT_ATTRS`). Every setter returns
    the policy so declarations can be chained.
    """

    __slots__ = (
        "_allow_doctype",
        "_allow_relative_urls",
        "_element_attrs",
        "_global_attrs",
        "_require_nofollow",
        "_require_parseable_urls",
        "_url_schemes",
    )

    def __init__(self) -> None:
        self._element_attrs: dict[str, dict[str, AttrPolicy]] = {}
        self._global_attrs: dict[str, AttrPolicy] = {}
        self._url_schemes: set[str] = set()
        self._allow_doctype = False
        self._require_nofollow = False
        self._require_parseable_urls = False
        self._allow_relative_urls = False

    def __repr__(self) -> str:
        return (
            f"Policy(elements={len(self._element_attrs)}, global_attrs={sorted(self._global_attrs)}, "
            f"url_schemes={sorted(self._url_schemes)})"
        )

    # Declarations

    def allow_attrs(self, *attr_names: str) -> AttrPolicyBuilder:
        """Start an attribute declaration; commit it with `on_elements()` or `globally()`."""

        return AttrPolicyBuilder(self, tuple(name.lower() for name in attr_names))

    def allow_elements(self, *names: str) -> Policy:
        """Permit elements without granting them any attributes of their own."""

        for name in names:
            self._element_attrs.setdefault(name.lower(), {})
        return self

    def allow_url_schemes(self, *schemes: str) -> Policy:
        for scheme in schemes:
            self._url_schemes.add(scheme.lower())
        return self

    def require_nofollow_on_links(self, require: bool) -> Policy:
        """Ask the sanitizer to add rel="nofollow" to every <a>."""

        self._require_nofollow = bool(require)
        return self

    def require_parseable_urls(self, require: bool) -> Policy:
        """Require URL-valued attributes to parse as URLs.

        The sanitizer applies this to the pairs in `constants.URL_ATTRIBUTES`.
        """

        self._require_parseable_urls = bool(require)
        return self

    def allow_relative_urls(self, allow: bool) -> Policy:
        """Permit parseable URLs without a scheme or host.

        Always turns on `require_parseable_urls`, whatever `allow` is. It is
        never turned back off here.
        """

        self._require_parseable_urls = True
        self._allow_relative_urls = bool(allow)
        return self

    def allow_doctype(self, allow: bool) -> Policy:
        """Keep <!DOCTYPE> in sanitized output. Fragments should leave this off."""

        self._allow_doctype = bool(allow)
        return self

    def freeze(self) -> FrozenPolicy:
        """Return an immutable snapshot safe to share between threads."""

        return FrozenPolicy(
            element_attrs=self._element_attrs,
            global_attrs=self._global_attrs,
            url_schemes=self._url_schemes,
            doctype_allowed=self._allow_doctype,
            nofollow_required=self._require_nofollow,
            parseable_urls_required=self._require_parseable_urls,
            relative_urls_allowed=self._allow_relative_urls,
        )

    def _set_element_attr(self, element: str, attr: str, rule: AttrPolicy) -> None:
        self._element_attrs.setdefault(element, {})[attr] = rule

    def _set_global_attr(self, attr: str, rule: AttrPolicy) -> None:
        self._global_attrs[attr] = rule

    # Queries

    def is_scheme_allowed(self, scheme: str) -> bool:
        return scheme.lower() in self._url_schemes

    @property
    def element_attrs(self) -> Mapping[str, Mapping[str, AttrPolicy]]:
        return MappingProxyType(self._element_attrs)

    @property
    def global_attrs(self) -> Mapping[str, AttrPolicy]:
        return MappingProxyType(self._global_attrs)

    @property
    def url_schemes(self) -> Collection[str]:
        return frozenset(self._url_schemes)

    @property
    def elements_without_attrs(self) -> Collection[str]:
        return _DEFAULT_ELEMENTS_WITHOUT_ATTRS

    @property
    def doctype_allowed(self) -> bool:
        return self._allow_doctype

    @property
    def nofollow_required(self) -> bool:
        return self._require_nofollow

    @property
    def parseable_urls_required(self) -> bool:
        return self._require_parseable_urls

    @property
    def relative_urls_allowed(self) -> bool:
        return self._allow_relative_urls


def _coerce_attr_policy(rule: object) -> AttrPolicy:
    if rule is None:
        return ANY_VALUE
    if isinstance(rule, AttrPolicy):
        return rule
    return AttrPolicy(rule)  # type: ignore[arg-type]


def _names(value: Collection[str], field: str) -> frozenset[str]:
    if isinstance(value, str):
        raise TypeError(f"{field} must be a collection of names, not a string")
    return frozenset(str(name).lower() for name in value)


def _freeze_attrs(attrs: Mapping[str, object] | Collection[str]) -> Mapping[str, AttrPolicy]:
    if isinstance(attrs, str):
        raise TypeError("attributes must be a mapping or a collection of names, not a string")
    if not attrs:
        return _EMPTY_ATTRS
    if isinstance(attrs, Mapping):
        return MappingProxyType({str(name).lower(): _coerce_attr_policy(rule) for name, rule in attrs.items()})
    return MappingProxyType(dict.fromkeys(_names(attrs, "attributes"), ANY_VALUE))


@dataclass(frozen=True, slots=True)
class FrozenPolicy(PolicyView):
    """Published, immutable policy.

    Usually produced by `Policy.freeze()`, but it can also be written out
    directly:

    - `element_attrs` maps each permitted element to its attributes, given
      either as a mapping of attribute name to rule (an `AttrPolicy`, a
      matcher, or None for any value) or as a plain collection of names.
    - `global_attrs` uses the same forms and applies to every permitted element.
    - Enabling `relative_urls_allowed` also enables `parseable_urls_required`.
    """

    element_attrs: Mapping[str, Mapping[str, AttrPolicy]]
    global_attrs: Mapping[str, AttrPolicy]
    url_schemes: Collection[str]
    elements_without_attrs: Collection[str] = _DEFAULT_ELEMENTS_WITHOUT_ATTRS
    doctype_allowed: bool = False
    nofollow_required: bool = False
    parseable_urls_required: bool = False
    relative_urls_allowed: bool = False

    # Holds mapping proxies, so it cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        # Copy everything so later changes to the source Policy never leak in.
        element_attrs = {str(tag).lower(): _freeze_attrs(attrs) for tag, attrs in self.element_attrs.items()}
        object.__setattr__(self, "element_attrs", MappingProxyType(element_attrs))
        object.__setattr__(self, "global_attrs", _freeze_attrs(self.global_attrs))
        object.__setattr__(self, "url_schemes", _names(self.url_schemes, "url_schemes"))
        if self.elements_without_attrs is not _DEFAULT_ELEMENTS_WITHOUT_ATTRS:
            object.__setattr__(
                self, "elements_without_attrs", _names(self.elements_without_attrs, "elements_without_attrs")
            )

        for flag in ("doctype_allowed", "nofollow_required", "parseable_urls_required", "relative_urls_allowed"):
            object.__setattr__(self, flag, bool(getattr(self, flag)))
        if self.relative_urls_allowed:
            object.__setattr__(self, "parseable_urls_required", True)
