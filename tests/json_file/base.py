import tests.base
from crudtodo.core.store import BaseTodoStore
from crudtodo.core.utils import MAX_TODO_ID
from crudtodo.backends.json_file import JSONFileTodoStore
import tempfile
import os


class JSONFileBackendTestMixin(tests.base.BackendTestMixin):
    def _create_path(self) -> "str":
        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        return os.path.join(tmp_dir.name, "todos.json")

    def _create_store(self, max_id: "int" = MAX_TODO_ID) -> "BaseTodoStore":
        return JSONFileTodoStore(path=self._create_path(), max_id=max_id)
