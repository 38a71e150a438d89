from typing import Any, Callable, Optional
from abc import ABC, abstractmethod
from .metadata import Todo
from .utils import BaseRecordConverter, saturating_increment, MAX_TODO_ID
import copy
import logging

logger = logging.getLogger(__name__)


class BaseTodoStore(ABC):
    """Abstract class that owns the todo records and the identifier counter.

    The CRUD operations are implemented here once. Backends only provide the storage
    primitives (reading and writing records and the counter) and the transaction boundary.

    Attributes:
        record_converter (BaseRecordConverter): Instance used to convert Todo objects to data store native records and back.
        max_id (int): Largest identifier the counter can reach. Once reached, the counter stays there.
    """

    record_converter: "BaseRecordConverter"
    max_id: "int"

    def __init__(
        self, record_converter: "BaseRecordConverter", max_id: "int" = MAX_TODO_ID,
    ):
        if max_id < 1:
            raise ValueError("max_id must be a positive integer, got %r" % max_id)
        self.record_converter = record_converter
        self.max_id = max_id

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(max_id={self.max_id})"

    def create(self, title: "str") -> "int":
        """Creates a new todo that is not done yet.

        Args:
            title (str): The todo's title.

        Returns:
            int: The identifier allocated for the todo.

        Raises:
            TypeError: If the title isn't a string.
        """
        _check_title(title)

        def _create():
            todo_id = self.get_next_id()
            todo = Todo(id=todo_id, title=title, status=False)
            self.save_todo_record(record=self.record_converter.to_record(todo))
            self.save_next_id(value=saturating_increment(todo_id, self.max_id))
            return todo_id

        todo_id = self.run_in_transaction(callback=_create)
        logger.debug("Created todo %s", todo_id)
        return todo_id

    def read(self, id: "int") -> "Todo":
        """Returns a copy of the todo with the given id.

        Args:
            id (int): The todo's identifier.

        Raises:
            TodoNotFoundException: If there's no todo with the given id.
        """
        record = self.run_in_transaction(
            callback=lambda: self.get_todo_record(id=id), read_only=True
        )
        return copy.deepcopy(self.record_converter.to_metadata(record=record))

    def update(
        self, id: "int", title: "Optional[str]" = None, status: "Optional[bool]" = None
    ):
        """Changes the fields that were given, leaving the others as they are.
        Calling it with neither title nor status rewrites the todo unchanged.

        Args:
            id (int): The todo's identifier.
            title (Optional[str]): New title, if it should change.
            status (Optional[bool]): New status, if it should change.

        Raises:
            TodoNotFoundException: If there's no todo with the given id. No todo is created in that case.
            TypeError: If the title isn't a string or the status isn't a bool. The todo is left unchanged.
        """
        if title is not None:
            _check_title(title)
        if status is not None and not isinstance(status, bool):
            raise TypeError("status must be a bool, got %r" % (status,))

        def _update():
            todo = self.record_converter.to_metadata(
                record=self.get_todo_record(id=id)
            )
            if title is not None:
                todo.title = title
            if status is not None:
                todo.status = status
            self.save_todo_record(record=self.record_converter.to_record(todo))

        self.run_in_transaction(callback=_update)
        logger.debug("Updated todo %s", id)

    def delete(self, id: "int"):
        """Removes the todo. Its identifier is never handed out again.

        Args:
            id (int): The todo's identifier.

        Raises:
            TodoNotFoundException: If there's no todo with the given id.
        """

        def _delete():
            self.get_todo_record(id=id)
            self.delete_todo_record(id=id)

        self.run_in_transaction(callback=_delete)
        logger.debug("Deleted todo %s", id)

    def peek_next_id(self) -> "int":
        """Returns the identifier the next call to create will allocate, without allocating it."""
        return self.run_in_transaction(callback=self.get_next_id, read_only=True)

    @abstractmethod
    def get_todo_record(self, id: "int") -> "Any":  # pragma: no cover
        """Returns the record saved under the given id.

        Args:
            id (int): The todo's identifier.

        Raises:
            TodoNotFoundException: If there's no record with the given id.
        """

    @abstractmethod
    def save_todo_record(self, record: "Any"):  # pragma: no cover
        """Inserts the record or replaces the one saved under the same id.

        Args:
            record (Any): Data store native record.
        """

    @abstractmethod
    def delete_todo_record(self, id: "int"):  # pragma: no cover
        """Removes the record saved under the given id.

        Args:
            id (int): The todo's identifier.
        """

    @abstractmethod
    def get_next_id(self) -> "int":  # pragma: no cover
        """Returns the current value of the identifier counter."""

    @abstractmethod
    def save_next_id(self, value: "int"):  # pragma: no cover
        """Stores a new value for the identifier counter.

        Args:
            value (int): New counter value.
        """

    @abstractmethod
    def run_in_transaction(
        self, callback: "Callable[[], Any]", read_only: "bool" = False
    ) -> "Any":  # pragma: no cover
        """Runs the callback while holding the store's lock so that no other operation sees a partial change.

        Args:
            callback (Callable[[], Any]): The operation being performed.
            read_only (bool): Whether the callback only reads the state.

        Returns:
            Any: Whatever the callback returns.
        """


def _check_title(title: "Any"):
    if not isinstance(title, str):
        raise TypeError("title must be a str, got %r" % (title,))
