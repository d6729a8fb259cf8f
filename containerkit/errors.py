"""Exceptions raised by the containers in this package."""


class CollectionError(Exception):
    """Base class for every error raised by a container."""


class OutOfRangeError(CollectionError, IndexError):
    """An index is outside the container, or the container is empty."""


class ValueNotFoundError(CollectionError, LookupError):
    """The requested element is not held by the container."""


class InvalidRangeError(CollectionError, ValueError):
    """A range of indices is malformed or does not fit the container."""


class InvalidCapacityError(CollectionError, ValueError):
    """A requested capacity or growth factor cannot be used."""


class MaxCapacityError(CollectionError, OverflowError):
    """The container has already reached its largest possible capacity."""