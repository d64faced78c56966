"""HTML policy constants

Static tables consulted by the policy store. Elements are kept in lists to
maintain a readable, stable order; the store converts them to sets for lookups.

Usage:
    from allowhtml.constants import ELEMENTS_WITHOUT_ATTRS, URL_ATTRIBUTES

References:
    - https://html.spec.whatwg.org/multipage/indices.html#elements-3
"""

# Elements that are semantically valid with no attributes at all.
# <bdo> is absent because its "dir" attribute is mandatory.
ELEMENTS_WITHOUT_ATTRS = [
    "abbr",
    "acronym",
    "article",
    "aside",
    "audio",
    "b",
    "bdi",
    "blockquote",
    "body",
    "br",
    "button",
    "canvas",
    "caption",
    "cite",
    "code",
    "col",
    "colgroup",
    "datalist",
    "dd",
    "del",
    "details",
    "dfn",
    "div",
    "dl",
    "dt",
    "em",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "hr",
    "html",
    "i",
    "ins",
    "kbd",
    "li",
    "mark",
    "nav",
    "ol",
    "optgroup",
    "option",
    "p",
    "pre",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "section",
    "select",
    "small",
    "span",
    "strike",
    "strong",
    "style",
    "sub",
    "summary",
    "sup",
    "svg",
    "table",
    "tbody",
    "td",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "time",
    "tr",
    "tt",
    "u",
    "ul",
    "var",
    "video",
    "wbr",
]

# (element, attribute) pairs whose values are URLs. The sanitizer decides when
# to run URL checks; the policy only answers them.
URL_ATTRIBUTES = [
    ("a", "href"),
    ("area", "href"),
    ("blockquote", "cite"),
    ("img", "src"),
    ("link", "href"),
    ("script", "src"),
]
