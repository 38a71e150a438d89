from crudtodo.core.store import BaseTodoStore
from crudtodo.backends.json_file import JSONFileTodoStore
from crudtodo.settings import CrudTodoSettings, crudtodo_settings
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def create_store(settings: "Optional[CrudTodoSettings]" = None) -> "BaseTodoStore":
    """Builds the store configured in the settings.

    Args:
        settings (Optional[CrudTodoSettings]): Settings to be used. Defaults to the module level crudtodo_settings.
    """
    if settings is None:
        settings = crudtodo_settings

    store_class = settings.STORE_CLASS
    if not isinstance(store_class, type) or not issubclass(store_class, BaseTodoStore):
        raise TypeError(
            "STORE_CLASS must be a subclass of BaseTodoStore, got %r" % store_class
        )

    if issubclass(store_class, JSONFileTodoStore):
        store = store_class(
            path=settings.JSON_FILE.PATH,
            lock_timeout=settings.JSON_FILE.LOCK_TIMEOUT,
            max_id=settings.MAX_TODO_ID,
        )
    else:
        store = store_class(max_id=settings.MAX_TODO_ID)

    logger.debug("Created %r", store)
    return store
