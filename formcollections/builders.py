from django.utils.html import conditional_escape
from django.utils.safestring import SafeString

from .tags import input_tag, label_tag
from .utils import value_to_text

# Owned by the collection; per-item ids must stay unique.
RESERVED_INPUT_ATTRIBUTES = frozenset({"id", "name", "value", "type"})


class CollectionItemBuilder:
    """
    Per-item object handed to a rendering block.

    Exposes the raw item as ``object``, its extracted ``value`` and its label
    ``text`` (escaped, so it composes with rendered tags), and renders the
    label and input for that item.
    """

    input_type = None

    def __init__(self, item, value, text, tag_id, tag_name, input_html_options):
        self.object = item
        self.value = value
        self.text = conditional_escape(value_to_text(text))
        self.tag_id = tag_id
        self.tag_name = tag_name
        self.input_html_options = input_html_options

    def __repr__(self):
        return f"<{self.__class__.__name__} id={self.tag_id!r} value={self.value!r}>"

    def label(self, html_options=None, content=None) -> SafeString:
        if content is None:
            content = self.text
        elif callable(content):
            content = content()
        return label_tag(self.tag_id, content, html_options)

    def render_input(self, html_options=None) -> SafeString:
        attrs = {"value": value_to_text(self.value), "name": self.tag_name, "id": self.tag_id}
        merged = dict(self.input_html_options)
        merged.update(html_options or {})
        for key, value in merged.items():
            if key not in RESERVED_INPUT_ATTRIBUTES:
                attrs[key] = value
        return input_tag(self.input_type, attrs)


class RadioButtonBuilder(CollectionItemBuilder):
    input_type = "radio"

    def radio_button(self, html_options=None) -> SafeString:
        return self.render_input(html_options)


class CheckBoxBuilder(CollectionItemBuilder):
    input_type = "checkbox"

    def check_box(self, html_options=None) -> SafeString:
        return self.render_input(html_options)
