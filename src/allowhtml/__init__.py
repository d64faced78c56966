from .attrs import ANY_VALUE, AttrPolicy, ValueMatcher
from .constants import ELEMENTS_WITHOUT_ATTRS, URL_ATTRIBUTES
from .errors import PolicyDecision
from .policy import AttrPolicyBuilder, FrozenPolicy, Policy, PolicyView
from .stock import DEFAULT_POLICY, strict_policy, ugc_policy
from .urls import UrlInfo, classify_url, is_url_allowed

__all__ = [
    "ANY_VALUE",
    "DEFAULT_POLICY",
    "ELEMENTS_WITHOUT_ATTRS",
    "URL_ATTRIBUTES",
    "AttrPolicy",
    "AttrPolicyBuilder",
    "FrozenPolicy",
    "Policy",
    "PolicyDecision",
    "PolicyView",
    "UrlInfo",
    "ValueMatcher",
    "classify_url",
    "is_url_allowed",
    "strict_policy",
    "ugc_policy",
]
