from __future__ import annotations

import re
import unittest
from dataclasses import FrozenInstanceError

from allowhtml.attrs import ANY_VALUE, AttrPolicy, check_matcher


class TestAttrPolicy(unittest.TestCase):
    def test_unconstrained_accepts_everything(self) -> None:
        assert not ANY_VALUE.is_constrained
        assert ANY_VALUE.accepts("anything at all")
        assert ANY_VALUE.accepts("")
        assert ANY_VALUE.accepts(None)

    def test_pattern_uses_search(self) -> None:
        loose = AttrPolicy(re.compile(r"[0-9]+"))
        assert loose.accepts("12px")
        assert not loose.accepts("px")

        anchored = AttrPolicy(re.compile(r"^[0-9]+$"))
        assert anchored.accepts("12")
        assert not anchored.accepts("12px")
        assert not anchored.accepts(None)

    def test_callable_result_is_truthiness(self) -> None:
        seen: list[str] = []

        def matcher(value: str) -> object:
            seen.append(value)
            return re.fullmatch(r"[a-z]+", value)

        rule = AttrPolicy(matcher)
        assert rule.is_constrained
        assert rule.accepts("abc")
        assert not rule.accepts("ABC")
        assert not rule.accepts(None)
        assert seen == ["abc", "ABC", ""]

    def test_matcher_errors_propagate(self) -> None:
        def broken(value: str) -> bool:
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            AttrPolicy(broken).accepts("x")

    def test_rejects_unsupported_matchers(self) -> None:
        with self.assertRaises(TypeError):
            AttrPolicy("[0-9]+")  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            check_matcher(42)
        check_matcher(None)
        check_matcher(re.compile("x"))
        check_matcher(str.isdigit)

    def test_is_immutable(self) -> None:
        rule = AttrPolicy(re.compile("x"))
        with self.assertRaises(FrozenInstanceError):
            rule.matcher = None  # type: ignore[misc]

    def test_equality(self) -> None:
        pattern = re.compile("x")
        assert AttrPolicy(pattern) == AttrPolicy(pattern)
        assert AttrPolicy() == ANY_VALUE


if __name__ == "__main__":
    unittest.main()
