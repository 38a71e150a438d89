from crudtodo.core.utils import BaseRecordConverter
from crudtodo.core.metadata import Todo
from typing import Dict


class TodoRecordConverter(BaseRecordConverter):
    def to_metadata(self, record: "Dict") -> "Todo":
        return Todo(id=record["id"], title=record["title"], status=record["status"])

    def to_record(self, metadata_object: "Todo") -> "Dict":
        return {
            "id": metadata_object.id,
            "title": metadata_object.title,
            "status": metadata_object.status,
        }
