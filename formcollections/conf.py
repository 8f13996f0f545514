import logging

from django.conf import settings

logger = logging.getLogger(__name__)

BOOLEAN_ATTRIBUTE_STYLES = ("xhtml", "html5")


def include_hidden_default() -> bool:
    return bool(getattr(settings, "FORM_COLLECTIONS_INCLUDE_HIDDEN", True))


def boolean_attribute_style() -> str:
    """
    How boolean attributes such as ``checked`` are written.

    - xhtml: checked="checked"
    - html5: checked
    """
    style = str(getattr(settings, "FORM_COLLECTIONS_BOOLEAN_ATTRIBUTES", "xhtml") or "").lower()
    if style not in BOOLEAN_ATTRIBUTE_STYLES:
        logger.warning("[form-collections] unknown boolean attribute style=%s, using xhtml", style)
        return "xhtml"
    return style
