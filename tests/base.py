from crudtodo.core.store import BaseTodoStore
from crudtodo.core.utils import MAX_TODO_ID


class BackendTestMixin:
    def _create_store(self, max_id: "int" = MAX_TODO_ID) -> "BaseTodoStore":  # pragma: no cover
        raise NotImplementedError()
