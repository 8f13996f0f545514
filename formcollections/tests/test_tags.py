from django.test import SimpleTestCase, override_settings
from django.utils.safestring import SafeString, mark_safe

from formcollections.tags import build_attrs, hidden_field_tag, input_tag, label_tag, tag_id, tag_name


class TagNameTest(SimpleTestCase):
    def test_single(self):
        self.assertEqual(tag_name("user", "active"), "user[active]")

    def test_multiple(self):
        self.assertEqual(tag_name("user", "category_ids", multiple=True), "user[category_ids][]")

    def test_index(self):
        self.assertEqual(tag_name("user", "active", index=0), "user[0][active]")


class TagIdTest(SimpleTestCase):
    def test_with_value(self):
        self.assertEqual(tag_id("user", "active", True), "user_active_true")

    def test_nested_object_name(self):
        self.assertEqual(tag_id("post[author]", "role", "Editor"), "post_author_role_editor")

    def test_namespace_and_index(self):
        self.assertEqual(tag_id("user", "active", "1", namespace="ns", index=2), "ns_user_2_active_1")

    def test_none_value_keeps_trailing_separator(self):
        """None and "" both sanitize to an empty value segment."""
        self.assertEqual(tag_id("user", "flag", None), "user_flag_")
        self.assertEqual(tag_id("user", "flag", ""), "user_flag_")


class BuildAttrsTest(SimpleTestCase):
    def test_false_and_none_drop_attributes(self):
        attrs = build_attrs({"checked": True, "disabled": True}, {"checked": False, "disabled": None})
        self.assertEqual(attrs, {})

    def test_boolean_attributes_xhtml(self):
        self.assertEqual(build_attrs({"checked": True}), {"checked": "checked"})

    @override_settings(FORM_COLLECTIONS_BOOLEAN_ATTRIBUTES="html5")
    def test_boolean_attributes_html5(self):
        self.assertEqual(build_attrs({"checked": True}), {"checked": True})

    @override_settings(FORM_COLLECTIONS_BOOLEAN_ATTRIBUTES="bogus")
    def test_unknown_style_falls_back_to_xhtml(self):
        with self.assertLogs("formcollections.conf", level="WARNING"):
            self.assertEqual(build_attrs({"checked": True}), {"checked": "checked"})

    def test_non_boolean_values_become_text(self):
        self.assertEqual(build_attrs({"class": True, "data-id": 3}), {"class": "true", "data-id": "3"})

    def test_false_on_plain_attributes_renders_as_text(self):
        """Only boolean attributes drop on False; class=False stays as 'false'."""
        self.assertEqual(build_attrs({"class": False}), {"class": "false"})
        self.assertEqual(build_attrs({"class": False, "data-value": False}), {"class": "false", "data-value": "false"})

    def test_none_drops_plain_attributes(self):
        self.assertEqual(build_attrs({"class": "a"}, {"class": None}), {})


class TagRenderingTest(SimpleTestCase):
    def test_input_tag_escapes_attributes(self):
        html = input_tag("radio", {"value": '"><script>'})
        self.assertIsInstance(html, SafeString)
        self.assertIn('value="&quot;&gt;&lt;script&gt;"', html)
        self.assertIn('type="radio"', html)

    def test_label_tag_escapes_plain_content(self):
        self.assertEqual(str(label_tag("x", "<b>")), '<label for="x">&lt;b&gt;</label>')

    def test_label_tag_keeps_safe_content(self):
        self.assertEqual(str(label_tag("x", mark_safe("<b>hi</b>"))), '<label for="x"><b>hi</b></label>')

    def test_hidden_field_tag(self):
        self.assertEqual(
            str(hidden_field_tag("user[category_ids][]")),
            '<input name="user[category_ids][]" type="hidden" value="">',
        )
