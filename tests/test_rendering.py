"""Tests for rendering fields through the bundled Jinja2 templates."""

import pytest
from jinja2 import TemplateNotFound

from crud_fields import (
    CrudFields,
    FieldContext,
    FieldView,
    JinjaViewRenderer,
    MappingRecord,
    SelectField,
    TextField,
    get_config,
    old_input_bag,
)
from crud_fields.rendering import asset_url


@pytest.fixture
def jinja():
    return JinjaViewRenderer()


class TestJinjaViewRenderer:
    """Tests for the default renderer."""

    def test_render_text_edit_form(self, post, jinja):
        """Test a bound text field renders its value and metadata."""
        fields = post.edit_form()
        fields.renderer = jinja
        html = fields.find("title").render()
        assert 'name="title"' in html
        assert 'id="field-title"' in html
        assert 'value="Hello"' in html
        assert 'placeholder="Title of the post"' in html
        assert "Title" in html

    def test_render_error_and_old_input(self, post, jinja):
        """Test that old input replaces the value and errors are shown."""
        fields = post.edit_form(
            errors={"title": "The title must be at least 3 characters."},
            old_input={"title": "Hi"},
        )
        html = fields.find("title").render(renderer=jinja)
        assert 'value="Hi"' in html
        assert "has-error" in html
        assert "The title must be at least 3 characters." in html

    def test_values_are_escaped(self, jinja):
        """Test that values are HTML-escaped."""
        field = TextField("title")
        CrudFields([field], renderer=jinja).bind(MappingRecord({"title": '"><script>'}))
        html = field.render()
        assert "<script>" not in html
        assert "&#34;&gt;&lt;script&gt;" in html

    def test_render_full_form(self, post, jinja):
        """Test rendering every bundled template."""
        fields = post.edit_form()
        fields.renderer = jinja
        html = fields.render()
        assert 'class="form-control tinymce"' in html
        assert 'accept=".jpeg,.png"' in html
        assert "cover.png" in html
        assert '<option value="2" selected>Tutorials</option>' in html
        assert 'value="draft" checked' in html
        assert 'data-date-format="Y-m-d"' in html
        assert 'value="2024-03-15"' in html
        assert 'data-min-date="2020-01-01"' in html

    def test_render_create_form(self, post, jinja):
        """Test that create forms render empty values and defaults."""
        fields = type(post).create_form()
        fields.renderer = jinja
        html = fields.render()
        assert 'value="live" checked' in html
        assert 'value="None"' not in html

    def test_select_default_in_create_mode(self, jinja):
        """Test that a select preselects its default until input exists."""
        field = SelectField("level").with_options({"low": "Low", "high": "High"}, "high")
        html = field.render(FieldContext(), jinja)
        assert '<select name="level"' in html
        assert '<option value="high" selected>High</option>' in html
        old = FieldContext(old_input=old_input_bag({"level": "low"}))
        html = field.render(old, jinja)
        assert '<option value="low" selected>Low</option>' in html
        assert '<option value="high">High</option>' in html

    def test_record_value_beats_default(self, jinja):
        """Test that an edit form shows the stored option, not the default."""
        field = SelectField("level").with_options({"low": "Low", "high": "High"}, "high")
        html = field.render(FieldContext(record=MappingRecord({"level": "low"})), jinja)
        assert '<option value="low" selected>Low</option>' in html
        assert '<option value="high">High</option>' in html

    def test_multiple_select(self, jinja):
        """Test that every selected option is marked."""
        field = SelectField("tags").with_options({"py": "Python", "js": "JavaScript", "go": "Go"}).multiple()
        html = field.render(FieldContext(record=MappingRecord({"tags": ["py", "go"]})), jinja)
        assert 'name="tags[]"' in html
        assert '<option value="py" selected>' in html
        assert '<option value="js">' in html
        assert '<option value="go" selected>' in html

    def test_template_override(self, tmp_path):
        """Test that a search path takes precedence over bundled templates."""
        (tmp_path / "fields").mkdir()
        (tmp_path / "fields" / "text.html").write_text("custom {{ name }}")
        renderer = JinjaViewRenderer(str(tmp_path))
        assert renderer.render("fields/text.html", {"name": "title"}) == "custom title"

    def test_unknown_template(self, jinja):
        """Test that missing views raise the engine's error."""
        with pytest.raises(TemplateNotFound):
            jinja.render("fields/missing.html", {})

    def test_field_view_render(self, renderer):
        """Test rendering a FieldView with any renderer."""
        view = FieldView("fields/text.html", {"name": "title"})
        assert view.render(renderer) == "<fields/text.html:title>"


class TestAssetUrl:
    """Tests for asset prefixing."""

    def test_no_prefix(self):
        """Test that paths pass through by default."""
        assert asset_url("js/field.js") == "js/field.js"

    def test_prefix(self, monkeypatch):
        """Test that the configured prefix is joined once."""
        monkeypatch.setattr(get_config(), "asset_prefix", "/static/")
        assert asset_url("/js/field.js") == "/static/js/field.js"
