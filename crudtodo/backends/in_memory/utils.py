from typing import ContextManager
from crudtodo.core.utils import BaseStoreLock
import threading


class InMemoryContextManager:
    lock: "InMemoryStoreLock"

    def __init__(self, lock: "InMemoryStoreLock"):
        self.lock = lock

    def __enter__(self):
        self.lock._lock.acquire()
        self.lock._depth += 1

    def __exit__(self, type, value, traceback):
        self.lock._depth -= 1
        self.lock._lock.release()


class InMemoryStoreLock(BaseStoreLock):
    def __init__(self):
        self._lock = threading.RLock()
        self._depth = 0

    def is_locked(self) -> "bool":
        return self._depth > 0

    def lock(self) -> "ContextManager":
        return InMemoryContextManager(lock=self)
