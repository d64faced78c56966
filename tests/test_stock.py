from __future__ import annotations

import unittest

from allowhtml import DEFAULT_POLICY, URL_ATTRIBUTES, FrozenPolicy, Policy, strict_policy, ugc_policy


class TestStockPolicies(unittest.TestCase):
    def test_public_api_exports_exist(self) -> None:
        assert isinstance(DEFAULT_POLICY, FrozenPolicy)
        assert callable(strict_policy)
        assert callable(ugc_policy)
        assert ("a", "href") in URL_ATTRIBUTES

    def test_strict_policy_is_a_blank_policy(self) -> None:
        policy = strict_policy()
        assert isinstance(policy, Policy)
        assert policy.is_element_allowed("p")
        assert not policy.is_element_allowed("a")
        assert not policy.is_attr_allowed("p", "title")
        assert policy.url_schemes == frozenset()

    def test_factories_return_fresh_policies(self) -> None:
        first = ugc_policy()
        first.allow_elements("marquee")
        assert not ugc_policy().is_element_allowed("marquee")
        assert strict_policy() is not strict_policy()

    def test_ugc_links(self) -> None:
        policy = ugc_policy()
        assert policy.is_attr_allowed("a", "href")
        assert policy.nofollow_required
        assert policy.relative_urls_allowed
        assert policy.parseable_urls_required
        assert policy.url_schemes == frozenset({"mailto", "http", "https"})
        assert policy.is_url_allowed("https://example.com")
        assert policy.is_url_allowed("/about")
        assert not policy.is_url_allowed("javascript:alert(1)")
        assert not policy.is_attr_allowed("a", "onclick")

    def test_ugc_global_attributes(self) -> None:
        policy = DEFAULT_POLICY
        assert policy.is_attr_value_allowed("p", "dir", "RTL")
        assert not policy.is_attr_value_allowed("p", "dir", "up")
        assert policy.is_attr_value_allowed("span", "lang", "en-GB")
        assert not policy.is_attr_value_allowed("span", "lang", "en GB")
        assert policy.is_attr_value_allowed("div", "title", "anything")
        assert not policy.is_attr_allowed("div", "style")
        assert not policy.is_attr_allowed("script", "title")

    def test_ugc_tables_images_and_lists(self) -> None:
        policy = DEFAULT_POLICY
        assert policy.is_attr_value_allowed("td", "colspan", "3")
        assert not policy.is_attr_value_allowed("th", "rowspan", "all")
        assert policy.is_attr_value_allowed("img", "width", "640")
        assert not policy.is_attr_value_allowed("img", "height", "100%")
        assert policy.is_attr_value_allowed("img", "alt", "")
        assert policy.is_attr_value_allowed("ol", "type", "i")
        assert not policy.is_attr_value_allowed("ol", "type", "disc")
        assert policy.is_attr_allowed("blockquote", "cite")
        assert policy.is_attr_allowed("q", "cite")
        assert not policy.doctype_allowed


if __name__ == "__main__":
    unittest.main()
