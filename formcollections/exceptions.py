class FormCollectionsError(Exception):
    """Base error for collection form helpers."""


class CollectionAccessorError(FormCollectionsError, AttributeError):
    """Raised when a value/text accessor cannot be resolved on a collection item."""

    def __init__(self, accessor, item, reason=""):
        self.accessor = accessor
        self.item = item
        message = f"Cannot resolve accessor {accessor!r} on item {item!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidCollectionError(FormCollectionsError, TypeError):
    """Raised when the collection passed to a helper is not iterable."""
