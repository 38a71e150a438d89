from typing import Dict
from abc import ABC, abstractmethod


class BaseStateSerializer(ABC):

    """Abstract class that converts the whole state of a store (its records and the identifier counter) to a string and back.

    The state is a dictionary with two keys:
        todos (Dict[int, Any]): The records, keyed by identifier.
        next_id (int): The identifier counter.
    """

    @abstractmethod
    def serialize(self, state: "Dict") -> "str":  # pragma: no cover
        """Converts the state to a string.

        Args:
            state (Dict): The store's state.
        """

    @abstractmethod
    def deserialize(self, data: "str") -> "Dict":  # pragma: no cover
        """Converts a string produced by serialize back to the state.

        Args:
            data (str): The serialized state.

        Raises:
            CorruptedStateException: If the data doesn't hold a valid state.
        """
