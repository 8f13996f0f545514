import logging
import re
from collections.abc import Mapping

from django.utils.encoding import force_str

from .exceptions import CollectionAccessorError

logger = logging.getLogger(__name__)

_OBJECT_NAME_UNSAFE = re.compile(r"\]\[|[^-a-zA-Z0-9:.]")
_VALUE_UNSAFE = re.compile(r"[^-\w]", re.ASCII)
_WHITESPACE = re.compile(r"\s")

# Scalars compared as a single value even though some of them are iterable.
_SCALAR_TYPES = (str, bytes, Mapping)


def value_to_text(value) -> str:
    """Text form used for values, labels, ids and comparisons."""
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return force_str(value)


def value_for_collection(item, accessor):
    """
    Extract a value from a collection item.

    - None: the item itself
    - callable: accessor(item)
    - int: item[accessor] (tuple position)
    - str: mapping key, else attribute (called when it is a method)
    """
    if accessor is None:
        return item
    try:
        if callable(accessor):
            return accessor(item)
        if isinstance(accessor, int) and not isinstance(accessor, bool):
            return item[accessor]
        if isinstance(accessor, str):
            if isinstance(item, Mapping) and accessor in item:
                return item[accessor]
            attr = getattr(item, accessor)
            return attr() if callable(attr) else attr
    except (AttributeError, KeyError, IndexError, TypeError) as exc:
        logger.warning("[form-collections] accessor failed accessor=%r item=%r error=%s", accessor, item, exc)
        raise CollectionAccessorError(accessor, item, str(exc)) from exc
    raise CollectionAccessorError(accessor, item, "unsupported accessor type")


def as_text_list(value):
    """Normalize a scalar or iterable selection into a list of texts."""
    if value is None:
        return []
    if isinstance(value, _SCALAR_TYPES):
        return [value_to_text(value)]
    try:
        return [value_to_text(v) for v in value]
    except TypeError:
        return [value_to_text(value)]


def sanitized_object_name(object_name) -> str:
    return _OBJECT_NAME_UNSAFE.sub("_", force_str(object_name)).removesuffix("_")


def sanitized_method_name(method) -> str:
    return force_str(method).removesuffix("?")


def sanitized_value(value) -> str:
    text = _WHITESPACE.sub("_", value_to_text(value))
    return _VALUE_UNSAFE.sub("", text).lower()
