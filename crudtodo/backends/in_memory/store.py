from crudtodo.core.store import BaseTodoStore
from crudtodo.core.utils import BaseRecordConverter, BaseStoreLock, MAX_TODO_ID
from crudtodo.core.exceptions import TodoNotFoundException
from .converters import TodoRecordConverter
from .utils import InMemoryStoreLock
from typing import Any, Callable, Dict, Optional
import copy


class InMemoryTodoStore(BaseTodoStore):
    lock: "BaseStoreLock"

    def __init__(
        self,
        record_converter: "Optional[BaseRecordConverter]" = None,
        max_id: "int" = MAX_TODO_ID,
        lock: "Optional[BaseStoreLock]" = None,
    ):
        super().__init__(
            record_converter=record_converter or TodoRecordConverter(), max_id=max_id
        )
        self.lock = lock or InMemoryStoreLock()
        self._db = self._empty_db()

    @staticmethod
    def _empty_db() -> "Dict":
        return {
            "todos": {},
            "next_id": 1,
        }

    def _get_raw_db(self) -> "Dict":
        return self._db

    def get_todo_record(self, id: "int") -> "Dict":
        try:
            return self._db["todos"][id]
        except KeyError:
            raise TodoNotFoundException(id=id)

    def save_todo_record(self, record: "Dict"):
        self._db["todos"][record["id"]] = copy.deepcopy(record)

    def delete_todo_record(self, id: "int"):
        del self._db["todos"][id]

    def get_next_id(self) -> "int":
        return self._db["next_id"]

    def save_next_id(self, value: "int"):
        self._db["next_id"] = value

    def run_in_transaction(
        self, callback: "Callable[[], Any]", read_only: "bool" = False
    ) -> "Any":
        with self.lock.lock():
            return callback()
