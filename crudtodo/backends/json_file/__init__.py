from .store import JSONFileTodoStore
from .utils import FileStoreLock
from .serializer import JSONStateSerializer
