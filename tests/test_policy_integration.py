from __future__ import annotations

import json
import re
import unittest
from pathlib import Path
from typing import Any

from allowhtml import Policy, PolicyView

_CASES_DIR = Path(__file__).with_name("allowhtml-policy-tests")

_FLAG_SETTERS = frozenset(
    {"allow_doctype", "require_nofollow_on_links", "require_parseable_urls", "allow_relative_urls"}
)


def _build_policy(steps: Any) -> Policy:
    if not isinstance(steps, list):
        raise TypeError("policy must be a list of steps")

    policy = Policy()
    for step in steps:
        op = step["op"]
        if op == "allow_elements":
            policy.allow_elements(*step["names"])
        elif op == "allow_url_schemes":
            policy.allow_url_schemes(*step["schemes"])
        elif op == "allow_attrs":
            builder = policy.allow_attrs(*step["attrs"])
            for pattern in step.get("matching", []):
                builder.matching(re.compile(pattern))
            if step.get("globally"):
                builder.globally()
            elif "on_elements" in step:
                builder.on_elements(*step["on_elements"])
        elif op in _FLAG_SETTERS:
            getattr(policy, op)(step["value"])
        else:
            raise ValueError(f"Unknown policy step: {op}")
    return policy


def _run_query(policy: PolicyView, query: dict[str, Any]) -> bool:
    kind = query["query"]
    if kind == "element":
        return policy.is_element_allowed(query["element"])
    if kind == "attr":
        if "value" in query:
            return policy.is_attr_value_allowed(query["element"], query["attr"], query["value"])
        return policy.is_attr_allowed(query["element"], query["attr"])
    if kind == "scheme":
        return policy.is_scheme_allowed(query["scheme"])
    if kind == "url":
        return policy.is_url_allowed(query["value"])
    if kind == "flag":
        return bool(getattr(policy, query["flag"]))
    raise ValueError(f"Unknown query kind: {kind}")


class TestPolicyIntegration(unittest.TestCase):
    def test_policy_cases(self) -> None:
        cases_path = _CASES_DIR / "cases.json"
        cases = json.loads(cases_path.read_text(encoding="utf-8"))
        if not isinstance(cases, list):
            raise TypeError("cases.json must contain a list")

        for case in cases:
            name = case["name"]
            policy = _build_policy(case["policy"])

            for view in (policy, policy.freeze()):
                for query in case["queries"]:
                    actual = _run_query(view, query)
                    expected = query["expected"]
                    if actual != expected:
                        self.fail(
                            "\n".join(
                                [
                                    f"Case: {name} ({type(view).__name__})",
                                    f"Query: {json.dumps(query)}",
                                    f"Expected: {expected}",
                                    f"Actual:   {actual}",
                                ]
                            )
                        )


if __name__ == "__main__":
    unittest.main()
