"""Tests for building HTML links from link targets."""

from doclinks.build_link import build_link, is_complex_type_expression, linkto
from doclinks.diagnostic import Diagnostic
from doclinks.known_types import MDN_ARRAY, MDN_NUMBER, MDN_STRING
from doclinks.link_context import LinkContext
from doclinks.unique_filename import get_filename


def test_plain_symbol_link() -> None:
    """Verify that a registered longname becomes an anchor."""
    assert build_link("Foo", link_map={"Foo": "Foo.html"}) == '<a href="Foo.html">Foo</a>'


def test_missing_target_falls_back_to_text() -> None:
    """Verify that unknown targets render as plain text."""
    assert build_link("Bar", "custom text", link_map={}) == "custom text"
    assert build_link("Bar", link_map={}) == "Bar"
    assert build_link(None, link_map={}) == ""


def test_url_passthrough() -> None:
    """Verify that URLs are linked without a lookup."""
    assert build_link("https://example.org", link_map={}) == (
        '<a href="https://example.org">https://example.org</a>'
    )
    assert build_link("<http://example.org>", "Example", link_map={}) == (
        '<a href="http://example.org">Example</a>'
    )
    assert build_link("ftp://files.example.org/a b", link_map={}) == (
        '<a href="ftp://files.example.org/a%20b">ftp://files.example.org/a b</a>'
    )


def test_known_array_shorthands() -> None:
    """Verify the fixed array-of-primitive targets, regardless of casing."""
    expected = f'<a href="{MDN_STRING}">String[]</a>'
    assert build_link("Array.<string>", link_map={}) == expected
    assert build_link("ARRAY.<STRING>", link_map={}) == expected
    assert build_link("Array.<Array.<number>>", link_map={}) == (
        f'<a href="{MDN_NUMBER}">Number[][]</a>'
    )
    assert build_link("Array.<*>", link_map={}) == "*[]"


def test_primitive_names() -> None:
    """Verify that built-in type names link to their reference pages."""
    assert build_link("string", link_map={}) == f'<a href="{MDN_STRING}">String</a>'
    assert build_link("Array", link_map={}) == f'<a href="{MDN_ARRAY}">Array</a>'
    assert build_link("array", link_map={}) == "array"
    # a documented symbol wins over the built-in page
    assert build_link("string", link_map={"string": "string.html"}) == (
        '<a href="string.html">string</a>'
    )


def test_type_expressions_link_each_name() -> None:
    """Verify that complex expressions link every known name."""
    links = {"Foo": "Foo.html"}
    assert build_link("Array.<Foo>", "ignored", link_map=links) == (
        'Array.&lt;<a href="Foo.html">Foo</a>>'
    )
    assert build_link("Foo|Bar", link_map=links) == '(<a href="Foo.html">Foo</a>|Bar)'


def test_type_expression_api_paths() -> None:
    """Verify that arrays of API classes render as Name[]."""
    links = {"module:esri/Graphic": "module-esri-Graphic.html"}
    assert build_link(
        "Array.<module:esri/Graphic>", link_map=links, path_roots=["esri"]
    ) == '<a href="module-esri-Graphic.html">Graphic[]</a>'


def test_unparsable_type_expression() -> None:
    """Verify that a parse failure falls back to the escaped original text."""
    diagnostics: list[Diagnostic] = []
    assert build_link("Foo||Bar", link_map={}, diagnostics=diagnostics) == "Foo||Bar"
    assert [d.code for d in diagnostics] == ["type-parse"]
    assert diagnostics[0].subject == "Foo||Bar"


def test_record_fields_are_linked() -> None:
    """Verify that the types of record fields written without spaces get links."""
    assert build_link("{a:Foo}", link_map={"Foo": "Foo.html"}) == (
        '{a: <a href="Foo.html">Foo</a>}'
    )


def test_inline_tags_are_not_type_expressions() -> None:
    """Verify that inline tags and HTML are not parsed as types."""
    assert build_link("{@link Foo}", link_map={}) == "{@link Foo}"
    assert not is_complex_type_expression("Foo")
    assert is_complex_type_expression("{a: number}")
    assert is_complex_type_expression("Object<string, Foo>")


def test_link_options() -> None:
    """Verify CSS class, fragment and monospace handling."""
    links = {"Foo": "Foo.html"}
    assert build_link("Foo", link_map=links, css_class="x", fragment_id="bar") == (
        '<a href="Foo.html#bar" class="x">Foo</a>'
    )
    assert build_link("Foo", link_map=links, monospace=True) == (
        '<a href="Foo.html"><code>Foo</code></a>'
    )
    assert build_link("Bar", link_map={}, monospace=True) == "<code>Bar</code>"


def test_link_text_api_path_stripped() -> None:
    """Verify that API paths in link text are reduced to the name."""
    links = {"module:esri/layers/Layer": "module-esri-layers-Layer.html"}
    assert build_link(
        "module:esri/layers/Layer", link_map=links, path_roots=["esri"]
    ) == '<a href="module-esri-layers-Layer.html">Layer</a>'


def test_href_is_percent_encoded() -> None:
    """Verify that the href is encoded but the text is not."""
    assert build_link("Foo", link_map={"Foo": "Foo Bar.html"}) == (
        '<a href="Foo%20Bar.html">Foo</a>'
    )
    assert build_link("Array.<Foo>", link_map={"Foo": "Foo Bar.html"}) == (
        'Array.&lt;<a href="Foo%20Bar.html">Foo</a>>'
    )


def test_linkto_uses_context(ctx: LinkContext) -> None:
    """Verify that linkto looks up URLs registered in the context."""
    get_filename(ctx, "Foo")
    assert linkto(ctx, "Foo") == '<a href="Foo.html">Foo</a>'
    assert linkto(ctx, "Foo", "the foo", "cls", "bar") == (
        '<a href="Foo.html#bar" class="cls">the foo</a>'
    )
    assert linkto(ctx, "Missing") == "Missing"
    linkto(ctx, "Foo||Bar")
    assert ctx.has_errors()
