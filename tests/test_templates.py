"""Unit tests for TemplateRenderer (kubescaffold.templates).

Tests cover:
- Rendering with the file as the context
- Strict undefined handling for missing names and attributes
- Malformed templates
- Whitespace handling of block tags
"""

from __future__ import annotations

import pytest

from kubescaffold.input import Input
from kubescaffold.templates import TemplateRenderer, TemplateRenderError


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


class TestRenderString:
    def test_substitutes_context(self, renderer):
        assert renderer.render_string("Hello {{ name }}!", {"name": "World"}) == "Hello World!"

    def test_missing_name_raises(self, renderer):
        with pytest.raises(TemplateRenderError, match="missing"):
            renderer.render_string("{{ missing }}", {})

    def test_missing_attribute_raises(self, renderer):
        with pytest.raises(TemplateRenderError):
            renderer.render_string("{{ file.nope }}", {"file": Input()})

    def test_malformed_template_raises(self, renderer):
        with pytest.raises(TemplateRenderError):
            renderer.render_string("{% if x %}unterminated", {"x": True})

    def test_block_tags_leave_no_blank_lines(self, renderer):
        template = "a\n{% if flag %}\nyes\n{% else %}\nno\n{% endif %}\nb\n"
        assert renderer.render_string(template, {"flag": True}) == "a\nyes\nb\n"
        assert renderer.render_string(template, {"flag": False}) == "a\nno\nb\n"

    def test_keeps_trailing_newline(self, renderer):
        assert renderer.render_string("x\n", {}) == "x\n"

    def test_no_html_escaping(self, renderer):
        assert renderer.render_string("{{ v }}", {"v": "&obj{}"}) == "&obj{}"


class TestRenderFile:
    def test_fields_exposed_by_name(self, renderer):
        i = Input(template_body="{{ domain }}/{{ repo }}", domain="example.com", repo="acme")
        assert renderer.render_file(i) == "example.com/acme"

    def test_unknown_field_raises(self, renderer):
        i = Input(template_body="{{ kind }}")
        with pytest.raises(TemplateRenderError):
            renderer.render_file(i)

