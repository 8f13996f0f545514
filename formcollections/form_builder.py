from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from .helpers import collection_check_boxes, collection_radio_buttons

# Builder-level options passed down to every helper call.
SCOPED_OPTIONS = ("namespace", "index")


class FormBuilder:
    """Binds helpers to one object name and, optionally, the object being edited."""

    def __init__(self, object_name, obj=None, options=None):
        self.object_name = object_name
        self.object = obj
        self.options = dict(options or {})

    def __repr__(self):
        return f"<FormBuilder object_name={self.object_name!r}>"

    def _merge_options(self, options):
        merged = {key: self.options[key] for key in SCOPED_OPTIONS if key in self.options}
        merged["object"] = self.object
        merged.update(options or {})
        return merged

    def collection_radio_buttons(self, method, collection, value_method=None, text_method=None,
                                 options=None, html_options=None, block=None):
        return collection_radio_buttons(
            self.object_name,
            method,
            collection,
            value_method,
            text_method,
            self._merge_options(options),
            html_options,
            block,
        )

    def collection_check_boxes(self, method, collection, value_method=None, text_method=None,
                               options=None, html_options=None, block=None):
        return collection_check_boxes(
            self.object_name,
            method,
            collection,
            value_method,
            text_method,
            self._merge_options(options),
            html_options,
            block,
        )


def fields_for(object_name, obj=None, block=None, **options):
    """
    Scope helpers to ``object_name``.

    With a ``block`` the block's output is returned as HTML; otherwise the builder itself.
    """
    builder = FormBuilder(object_name, obj, options)
    if block is None:
        return builder
    output = block(builder)
    if output is None:
        return mark_safe("")
    return conditional_escape(output)
