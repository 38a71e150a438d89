class Todo:
    """A single todo record.

    Attributes:
        id (int): Identifier assigned by the store. Never changes after creation.
        title (str): Text describing the todo.
        status (bool): Whether the todo is done.
    """

    id: "int"
    title: "str"
    status: "bool"

    def __init__(self, id: "int", title: "str", status: "bool" = False):
        self.id = id
        self.title = title
        self.status = status

    def __repr__(self):  # pragma: no cover
        return f"Todo(id={self.id}, title='{self.title}', status={self.status})"

    def __eq__(self, other: "object"):
        if not isinstance(other, Todo):
            return NotImplemented

        return (
            self.id == other.id
            and self.title == other.title
            and self.status == other.status
        )

    def __hash__(self):
        return hash((self.id, self.title, self.status))
