from crudtodo.core.serializer import BaseStateSerializer
from crudtodo.core.exceptions import CorruptedStateException
from typing import Any, Dict, List
import json


class JSONStateSerializer(BaseStateSerializer):
    """Serializes the store's state as a JSON object. Records are written as a list sorted by id
    because JSON objects only accept string keys."""

    def __init__(self, indent: "Any" = None):
        self.indent = indent

    def serialize(self, state: "Dict") -> "str":
        todos = [state["todos"][todo_id] for todo_id in sorted(state["todos"])]
        return json.dumps(
            {"next_id": state["next_id"], "todos": todos}, indent=self.indent
        )

    def _check_record(self, record: "Any"):
        if not isinstance(record, dict):
            raise CorruptedStateException("Invalid record: %r" % (record,))

        missing = {"id", "title", "status"} - set(record.keys())
        if missing:
            raise CorruptedStateException(
                "Record %r is missing fields: %s" % (record, ", ".join(sorted(missing)))
            )

        if not _is_identifier(record["id"]):
            raise CorruptedStateException("Invalid id: %r" % (record["id"],))
        if not isinstance(record["title"], str):
            raise CorruptedStateException("Invalid title: %r" % (record["title"],))
        if not isinstance(record["status"], bool):
            raise CorruptedStateException("Invalid status: %r" % (record["status"],))

    def deserialize(self, data: "str") -> "Dict":
        try:
            raw = json.loads(data)
        except ValueError as e:
            raise CorruptedStateException(str(e))

        if not isinstance(raw, dict):
            raise CorruptedStateException("Expected a JSON object")

        next_id = raw.get("next_id")
        if not _is_identifier(next_id):
            raise CorruptedStateException("Invalid next_id: %r" % (next_id,))

        records: "List" = raw.get("todos", [])
        if not isinstance(records, list):
            raise CorruptedStateException("'todos' must be a list")

        todos: "Dict[int, Dict]" = {}
        for record in records:
            self._check_record(record)
            if record["id"] in todos:
                raise CorruptedStateException("Duplicate id: %d" % record["id"])
            if record["id"] > next_id:
                raise CorruptedStateException(
                    "Id %d was not allocated yet (next_id is %d)"
                    % (record["id"], next_id)
                )
            todos[record["id"]] = {
                "id": record["id"],
                "title": record["title"],
                "status": record["status"],
            }

        return {"todos": todos, "next_id": next_id}


def _is_identifier(value: "Any") -> "bool":
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1
