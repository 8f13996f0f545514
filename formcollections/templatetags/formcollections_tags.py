from django import template

from formcollections.helpers import collection_check_boxes as render_collection_check_boxes
from formcollections.helpers import collection_radio_buttons as render_collection_radio_buttons

register = template.Library()

HELPER_OPTION_KEYS = frozenset({"checked", "disabled", "include_hidden", "namespace", "index", "object"})


def _split_kwargs(kwargs):
    """Separate helper options from html attributes (data_role -> data-role)."""
    options = {}
    html_options = {}
    for key, value in kwargs.items():
        if key in HELPER_OPTION_KEYS:
            options[key] = value
        else:
            html_options[key.replace("_", "-")] = value
    return options, html_options


@register.simple_tag
def collection_radio_buttons(object_name, method, collection, value_method=None, text_method=None, **kwargs):
    """
    Usage: {% collection_radio_buttons "user" "active" choices 0 1 checked=user.active class="radio" %}
    """
    options, html_options = _split_kwargs(kwargs)
    return render_collection_radio_buttons(
        object_name, method, collection, value_method, text_method, options, html_options
    )


@register.simple_tag
def collection_check_boxes(object_name, method, collection, value_method=None, text_method=None, **kwargs):
    """
    Usage: {% collection_check_boxes "user" "category_ids" categories "id" "name" checked=selected_ids %}
    """
    options, html_options = _split_kwargs(kwargs)
    return render_collection_check_boxes(
        object_name, method, collection, value_method, text_method, options, html_options
    )
