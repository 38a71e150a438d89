from .store import InMemoryTodoStore
from .utils import InMemoryStoreLock
from .converters import TodoRecordConverter
