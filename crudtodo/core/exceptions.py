class CrudTodoException(Exception):
    pass


class TodoNotFoundException(CrudTodoException):
    def __init__(self, id: "int"):
        self.id = id
        super(TodoNotFoundException, self).__init__(f"Todo with ID '{id}' not found.")


class TodoAlreadyExistsException(CrudTodoException):
    def __init__(self, id: "int"):
        self.id = id
        super(TodoAlreadyExistsException, self).__init__(
            f"Todo with ID '{id}' already exists."
        )


class CorruptedStateException(CrudTodoException):
    def __init__(self, message: "str"):
        super().__init__("Could not load the store state: %s" % message)


class StoreLockTimeoutException(CrudTodoException):
    def __init__(self, path: "str", timeout: "float"):
        self.path = path
        self.timeout = timeout
        super().__init__(
            "Could not acquire the lock on '%s'. Timeout: %s seconds" % (path, timeout)
        )
