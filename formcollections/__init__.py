"""Collection form helpers: radio button and check box groups bound to a model attribute."""

from .form_builder import FormBuilder, fields_for
from .helpers import collection_check_boxes, collection_radio_buttons

__all__ = [
    "FormBuilder",
    "collection_check_boxes",
    "collection_radio_buttons",
    "fields_for",
]
