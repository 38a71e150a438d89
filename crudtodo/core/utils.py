from typing import Any, ContextManager
from abc import ABC, abstractmethod

MAX_TODO_ID = 2 ** 32 - 1


class BaseStoreLock(ABC):
    """Makes sure only one operation touches the store's state at a time."""

    @abstractmethod
    def is_locked(self) -> "bool":  # pragma: no cover
        """
        Indicates whether an operation is currently holding the lock.
        """

    @abstractmethod
    def lock(self) -> "ContextManager":  # pragma: no cover
        """Returns a ContextManager that holds the lock while it's active.
        """


class BaseRecordConverter(ABC):
    """Abstract class used for converting Todo objects to records that can be saved to the data store and back."""

    @abstractmethod
    def to_metadata(self, record: "Any") -> "Any":  # pragma: no cover
        """Converts a record from the data store to a Todo.

        Args:
            record (Any): Data store native object.

        Returns:
            (Any): Todo object.
        """

    @abstractmethod
    def to_record(self, metadata_object: "Any") -> "Any":  # pragma: no cover
        """Converts a Todo to a record that can be saved to the data store.

        Args:
            metadata_object (Any): Todo object.

        Returns:
            (Any): Data store native object.
        """


def saturating_increment(value: "int", max_value: "int") -> "int":
    """Adds one to the value without ever going past max_value.

    Args:
        value (int): The current value.
        max_value (int): Largest value that can be represented.

    Returns:
        int: value + 1, or value itself once it has reached max_value.
    """
    if value >= max_value:
        return value
    return value + 1
