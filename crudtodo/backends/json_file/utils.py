from typing import ContextManager
from crudtodo.core.utils import BaseStoreLock
from crudtodo.core.exceptions import StoreLockTimeoutException
from filelock import FileLock, Timeout
import logging

logger = logging.getLogger(__name__)


class _FileLockContextManager:
    """Holds the file lock, turning a timeout into a StoreLockTimeoutException."""

    def __init__(self, store_lock: "FileStoreLock"):
        self.store_lock = store_lock

    def __enter__(self):
        try:
            self.store_lock._file_lock.acquire(timeout=self.store_lock.timeout)
        except Timeout:
            logger.warning(
                "Timed out waiting for the lock on %s", self.store_lock.lock_file
            )
            raise StoreLockTimeoutException(
                path=self.store_lock.lock_file, timeout=self.store_lock.timeout
            )

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.store_lock._file_lock.release()


class FileStoreLock(BaseStoreLock):
    """
    Keeps operations from different threads or processes from touching the same file at the same time.
    """

    def __init__(self, lock_file: "str", timeout: "float" = -1) -> None:
        """
        Args:
            lock_file (str): The path to the lock file.
            timeout (float): Maximum number of seconds to wait for the lock. A negative value waits forever.
        """
        self.lock_file = lock_file
        self.timeout = timeout
        self._file_lock = FileLock(lock_file)

    def is_locked(self) -> "bool":
        return self._file_lock.is_locked

    def lock(self) -> "ContextManager":
        return _FileLockContextManager(self)
