import tests.base
from crudtodo.core.store import BaseTodoStore
from crudtodo.core.utils import MAX_TODO_ID
from crudtodo.backends.in_memory import InMemoryTodoStore


class InMemoryBackendTestMixin(tests.base.BackendTestMixin):
    def _create_store(self, max_id: "int" = MAX_TODO_ID) -> "BaseTodoStore":
        return InMemoryTodoStore(max_id=max_id)
