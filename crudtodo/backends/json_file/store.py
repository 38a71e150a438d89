from crudtodo.backends.in_memory.store import InMemoryTodoStore
from crudtodo.core.serializer import BaseStateSerializer
from crudtodo.core.utils import BaseRecordConverter, MAX_TODO_ID
from crudtodo.core.exceptions import CorruptedStateException
from .serializer import JSONStateSerializer
from .utils import FileStoreLock
from typing import Any, Callable, Dict, Optional
import os
import logging

logger = logging.getLogger(__name__)


class JSONFileTodoStore(InMemoryTodoStore):
    """Store whose state lives in a JSON file.

    Every operation locks the file, loads the state, runs and, if it changed anything,
    writes the state back. Stores created for the same path share their todos.

    Attributes:
        path (str): Path of the JSON file.
        state_serializer (BaseStateSerializer): Converts the state to the file's contents and back.
    """

    path: "str"
    state_serializer: "BaseStateSerializer"

    def __init__(
        self,
        path: "str",
        lock_timeout: "float" = -1,
        record_converter: "Optional[BaseRecordConverter]" = None,
        state_serializer: "Optional[BaseStateSerializer]" = None,
        max_id: "int" = MAX_TODO_ID,
    ):
        super().__init__(
            record_converter=record_converter,
            max_id=max_id,
            lock=FileStoreLock(lock_file=path + ".lock", timeout=lock_timeout),
        )
        self.path = path
        self.state_serializer = state_serializer or JSONStateSerializer()

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(path='{self.path}', max_id={self.max_id})"

    def _load(self) -> "Dict":
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = f.read()
        except FileNotFoundError:
            return self._empty_db()

        if not data.strip():
            return self._empty_db()

        state = self.state_serializer.deserialize(data)
        if state["next_id"] > self.max_id:
            raise CorruptedStateException(
                "next_id %d is greater than max_id %d" % (state["next_id"], self.max_id)
            )

        logger.debug("Loaded todos from %s", self.path)
        return state

    def _flush(self):
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(self.state_serializer.serialize(self._db))
        os.replace(tmp_path, self.path)
        logger.debug("Saved todos to %s", self.path)

    def run_in_transaction(
        self, callback: "Callable[[], Any]", read_only: "bool" = False
    ) -> "Any":
        with self.lock.lock():
            self._db = self._load()
            result = callback()
            if not read_only:
                self._flush()
            return result
