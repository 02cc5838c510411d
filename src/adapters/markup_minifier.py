"""HTML minification (minify-html + BeautifulSoup).

Two passes:
1. BeautifulSoup rewrites attributes: drops default `type` values on
   script/style/link, redundant defaults (`method="get"`, `type="text"`, ...)
   and sorts attributes and class lists so the output is deterministic.
2. `minify_html` collapses whitespace, strips comments, minifies inline CSS/JS
   and unquotes attribute values.

The doctype is split off before both passes: BeautifulSoup rewrites lowercase
doctypes and minify-html shortens them to `<!doctypehtml>`, which is not valid
HTML. With `use_short_doctype` it becomes `<!doctype html>`.

Closing tags and the html/head opening tags are kept so the output parses back
to the same tree, which keeps the transform idempotent.
"""

from __future__ import annotations

import re

import minify_html
from bs4 import BeautifulSoup, Tag

from core.domain.models import MinifyOptions
from core.interfaces.toolchain import MarkupMinifier


_DOCTYPE_RE = re.compile(r"^\s*(<!doctype[^>]*>)", re.IGNORECASE)
_SHORT_DOCTYPE = "<!doctype html>"

_SCRIPT_TYPES = {
    "text/javascript",
    "application/javascript",
    "text/ecmascript",
    "application/ecmascript",
}

# (tag, attribute, default value); None matches any value.
_REDUNDANT_ATTRIBUTES: tuple[tuple[str, str, str | None], ...] = (
    ("script", "language", None),
    ("form", "method", "get"),
    ("input", "type", "text"),
    ("area", "shape", "rect"),
    ("button", "type", "submit"),
)


def split_doctype(markup: str) -> tuple[str, str]:
    """Return `(doctype, rest)`; doctype is "" when the document has none."""

    match = _DOCTYPE_RE.match(markup)
    if not match:
        return "", markup
    return match.group(1), markup[match.end():]


def _attr_value(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip().lower()


def _is_stylesheet_link(tag: Tag) -> bool:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return "stylesheet" in [r.lower() for r in rel]


def normalize_attributes(markup: str, options: MinifyOptions) -> str:
    """Attribute-level rewrites that minify-html does not cover.

    Serialized with the "html" formatter so named entities such as `&nbsp;`
    stay entities instead of becoming raw characters.
    """

    soup = BeautifulSoup(markup, "html.parser")

    for tag in soup.find_all(True):
        if options.remove_script_type_attributes and tag.name == "script":
            if _attr_value(tag, "type") in _SCRIPT_TYPES:
                del tag["type"]

        if options.remove_style_link_type_attributes and (
            tag.name == "style" or (tag.name == "link" and _is_stylesheet_link(tag))
        ):
            if _attr_value(tag, "type") == "text/css":
                del tag["type"]

        if options.remove_redundant_attributes:
            for name, attribute, default in _REDUNDANT_ATTRIBUTES:
                if tag.name != name or not tag.has_attr(attribute):
                    continue
                if default is None or _attr_value(tag, attribute) == default:
                    del tag[attribute]
            if tag.name == "script" and tag.has_attr("charset") and not tag.has_attr("src"):
                del tag["charset"]

        if options.sort_class_name and isinstance(tag.get("class"), list):
            tag["class"] = sorted(tag["class"])

        if options.sort_attributes and tag.attrs:
            tag.attrs = dict(sorted(tag.attrs.items()))

    return soup.decode(formatter="html")


class MinifyHtmlMinifier(MarkupMinifier):
    """`MarkupMinifier` backed by minify-html."""

    def minify(self, markup: str, options: MinifyOptions) -> str:
        doctype, body = split_doctype(markup)
        if doctype and options.use_short_doctype:
            doctype = _SHORT_DOCTYPE

        if options.rewrites_attributes():
            body = normalize_attributes(body, options)

        minified = minify_html.minify(
            body,
            minify_css=options.minify_css,
            minify_js=options.minify_js,
            keep_comments=not options.remove_comments,
            keep_input_type_text_attr=not options.remove_redundant_attributes,
            keep_closing_tags=True,
            keep_html_and_head_opening_tags=True,
        )
        return doctype + minified
