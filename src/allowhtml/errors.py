class PolicyDecision:
    """Explains why an attribute was kept or dropped for an element."""

    __slots__ = ("allowed", "attr", "element", "reason", "scope")

    ELEMENT_RULE = "element-rule"
    GLOBAL_RULE = "global-rule"
    NO_RULE = "no-rule"
    VALUE_REJECTED = "value-rejected"

    def __init__(self, element, attr, allowed, reason, scope=None):
        self.element = element
        self.attr = attr
        self.allowed = bool(allowed)
        self.reason = reason
        self.scope = scope

    def __repr__(self):
        if self.scope is not None:
            return f"PolicyDecision({self.element!r}, {self.attr!r}, allowed={self.allowed}, scope={self.scope!r})"
        return f"PolicyDecision({self.element!r}, {self.attr!r}, allowed={self.allowed})"

    def __str__(self):
        verdict = "keep" if self.allowed else "drop"
        return f"{self.element}[{self.attr}]: {verdict} - {self.reason}"

    def __bool__(self):
        return self.allowed

    def __eq__(self, other):
        if not isinstance(other, PolicyDecision):
            return NotImplemented
        return (
            self.element == other.element
            and self.attr == other.attr
            and self.allowed == other.allowed
            and self.reason == other.reason
            and self.scope == other.scope
        )

    __hash__ = None  # Unhashable since we define __eq__
