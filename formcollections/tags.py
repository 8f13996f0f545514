from django.forms.utils import flatatt
from django.utils.html import format_html
from django.utils.safestring import SafeString

from .conf import boolean_attribute_style
from .utils import sanitized_method_name, sanitized_object_name, sanitized_value, value_to_text

BOOLEAN_ATTRIBUTES = frozenset({"checked", "disabled", "readonly", "required", "multiple", "autofocus", "selected"})


def tag_name(object_name, method, multiple=False, index=None) -> str:
    if index is not None:
        name = f"{object_name}[{index}][{method}]"
    else:
        name = f"{object_name}[{method}]"
    return f"{name}[]" if multiple else name


def tag_id(object_name, method, value, namespace=None, index=None) -> str:
    parts = [sanitized_object_name(object_name)]
    if index is not None:
        parts.append(value_to_text(index))
    parts.append(sanitized_method_name(method))
    parts.append(sanitized_value(value))
    tag = "_".join(parts)
    if namespace:
        tag = f"{namespace}_{tag}"
    return tag


def build_attrs(*attr_dicts) -> dict:
    """
    Merge attribute dicts left to right into renderable values.

    None drops the attribute, as does False on a boolean attribute; other False
    values render as "false". Boolean attributes follow the configured style.
    """
    style = boolean_attribute_style()
    attrs = {}
    for attr_dict in attr_dicts:
        for key, value in (attr_dict or {}).items():
            key = str(key)
            if value is None or (value is False and key in BOOLEAN_ATTRIBUTES):
                attrs.pop(key, None)
            elif value is True and key in BOOLEAN_ATTRIBUTES:
                attrs[key] = True if style == "html5" else key
            else:
                attrs[key] = value_to_text(value)
    return attrs


def input_tag(input_type, attrs=None) -> SafeString:
    return format_html("<input{}>", flatatt(build_attrs({"type": input_type}, attrs)))


def label_tag(for_id, content, attrs=None) -> SafeString:
    return format_html("<label{}>{}</label>", flatatt(build_attrs(attrs, {"for": for_id})), content)


def hidden_field_tag(name, value="") -> SafeString:
    return input_tag("hidden", {"name": name, "value": value_to_text(value)})
