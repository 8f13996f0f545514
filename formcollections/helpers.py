"""
Collection helpers: one radio button or check box (plus its label) per item.

    collection_radio_buttons("user", "active", [True, False])
    collection_check_boxes("user", "category_ids", categories, "id", "name", {"checked": [1, 3]})

A ``block`` callable receives a builder per item and returns that item's markup,
e.g. ``lambda b: b.label(content=b.radio_button)`` to wrap the input in its label.
"""
import logging
from collections.abc import Mapping

from django.utils.html import conditional_escape
from django.utils.safestring import SafeString, mark_safe

from .builders import CheckBoxBuilder, RadioButtonBuilder
from .conf import include_hidden_default
from .exceptions import InvalidCollectionError
from .tags import hidden_field_tag, tag_id, tag_name
from .utils import as_text_list, value_for_collection, value_to_text

logger = logging.getLogger(__name__)


def _listify_collection(collection):
    if collection is None:
        return []
    if isinstance(collection, Mapping):
        return list(collection.items())
    if isinstance(collection, (str, bytes)):
        raise InvalidCollectionError(f"Collection must be an iterable of items, got {type(collection).__name__}")
    try:
        return list(collection)
    except TypeError as exc:
        raise InvalidCollectionError(f"Collection is not iterable: {collection!r}") from exc


def _normalize_selection(selection):
    """A predicate stays as-is; scalars and iterables become a list of texts."""
    if selection is None or callable(selection):
        return selection
    return as_text_list(selection)


def _object_value(obj, method):
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(method)
    return getattr(obj, method, None)


class CollectionHelper:
    builder_class = None
    multiple = False

    def __init__(self, object_name, method, collection, value_method=None, text_method=None,
                 options=None, html_options=None):
        self.object_name = object_name
        self.method = method
        self.value_method = value_method
        self.text_method = text_method
        self.options = dict(options or {})
        self.html_options = dict(html_options or {})
        self.collection = _listify_collection(collection)

        self.object = self.options.get("object")
        self.namespace = self.options.get("namespace")
        self.index = self.options.get("index")
        self.checked = _normalize_selection(self.options.get("checked"))
        self.disabled = _normalize_selection(self.options.get("disabled"))
        self.tag_name = tag_name(object_name, method, multiple=self.multiple, index=self.index)

    def render(self, block=None) -> SafeString:
        logger.debug(
            "[form-collections] render %s object=%s method=%s items=%d block=%s",
            self.__class__.__name__,
            self.object_name,
            self.method,
            len(self.collection),
            block is not None,
        )
        rendered = []
        for item in self.collection:
            builder = self.instantiate_builder(item)
            if block is None:
                rendered.append(self.render_component(builder))
            else:
                output = block(builder)
                rendered.append(conditional_escape(output) if output is not None else "")
        return mark_safe("".join(rendered))

    def instantiate_builder(self, item):
        value = value_for_collection(item, self.value_method)
        text = value_for_collection(item, self.text_method)
        return self.builder_class(
            item,
            value,
            text,
            tag_id(self.object_name, self.method, value, namespace=self.namespace, index=self.index),
            self.tag_name,
            self.default_html_options_for_collection(item, value),
        )

    def default_html_options_for_collection(self, item, value) -> dict:
        html_options = dict(self.html_options)
        if self.checked is not None:
            html_options["checked"] = self._accepts(self.checked, item, value)
        elif self._object_selects(value):
            html_options["checked"] = True
        if self.disabled is not None and self._accepts(self.disabled, item, value):
            html_options["disabled"] = True
        return html_options

    def _accepts(self, selection, item, value) -> bool:
        if callable(selection):
            return bool(selection(item))
        return value_to_text(value) in selection

    def _object_selects(self, value) -> bool:
        current = _object_value(self.object, self.method)
        if current is None:
            return False
        return value_to_text(value) in self.current_value_texts(current)

    def current_value_texts(self, current):
        return [value_to_text(current)]

    def render_component(self, builder) -> SafeString:
        raise NotImplementedError


class CollectionRadioButtons(CollectionHelper):
    builder_class = RadioButtonBuilder

    def render_component(self, builder):
        return builder.radio_button() + builder.label()


class CollectionCheckBoxes(CollectionHelper):
    builder_class = CheckBoxBuilder
    multiple = True

    def render(self, block=None):
        rendered = super().render(block)
        include_hidden = self.options.get("include_hidden")
        if include_hidden is None:
            include_hidden = include_hidden_default()
        if include_hidden:
            # Keeps the param present when every box is unchecked.
            rendered += hidden_field_tag(self.tag_name, "")
        return rendered

    def current_value_texts(self, current):
        return as_text_list(current)

    def render_component(self, builder):
        return builder.check_box() + builder.label()


def collection_radio_buttons(object_name, method, collection, value_method=None, text_method=None,
                             options=None, html_options=None, block=None):
    return CollectionRadioButtons(
        object_name, method, collection, value_method, text_method, options, html_options
    ).render(block)


def collection_check_boxes(object_name, method, collection, value_method=None, text_method=None,
                           options=None, html_options=None, block=None):
    return CollectionCheckBoxes(
        object_name, method, collection, value_method, text_method, options, html_options
    ).render(block)
