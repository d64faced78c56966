#!/usr/bin/env python3
"""Profile allowhtml policy queries to find performance bottlenecks."""

import cProfile
import io
import pstats

from allowhtml import DEFAULT_POLICY

# (element, attribute, value) triples a sanitizer would ask about
queries = [
    ("p", "class", "lead"),
    ("a", "href", "https://example.com/"),
    ("a", "onclick", "alert(1)"),
    ("td", "colspan", "2"),
    ("img", "width", "100%"),
    ("span", "lang", "en-GB"),
    ("script", "title", "x"),
] * 1000  # Repeat for more meaningful results

# Profile
pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    for element, attr, value in queries:
        if DEFAULT_POLICY.is_element_allowed(element):
            DEFAULT_POLICY.is_attr_value_allowed(element, attr, value)
    DEFAULT_POLICY.is_url_allowed("https://example.com/")

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(30)  # Top 30 functions
print(s.getvalue())
