from typing import Dict, Any, Optional
import copy
import importlib
import json
import os
from crudtodo.core.utils import MAX_TODO_ID

DEFAULTS: "Dict[str, Any]" = {
    "STORE_CLASS": "crudtodo.backends.in_memory.InMemoryTodoStore",
    "MAX_TODO_ID": MAX_TODO_ID,
    "JSON_FILE": {
        "PATH": "todos.json",
        "LOCK_TIMEOUT": -1,
    },
}

IMPORT_STRINGS = [
    "STORE_CLASS",
]

ENVIRONMENT_VARIABLE = "CRUDTODO_SETTINGS"


def perform_import(val, setting_name):
    """
    If the given setting is a string import notation,
    then perform the necessary import.
    """
    if val is None:
        return None
    elif isinstance(val, str):
        return import_from_string(val, setting_name)
    return val


def import_from_string(val, setting_name):
    """
    Attempt to import a class from a string representation.
    """
    try:
        module_path, class_name = val.rsplit(".", 1)
        module = importlib.import_module(module_path)
        return getattr(module, class_name)
    except (ValueError, ImportError, AttributeError) as e:
        msg = "Could not import '%s' for setting '%s'. %s: %s." % (
            val,
            setting_name,
            e.__class__.__name__,
            e,
        )
        raise ImportError(msg)


def load_environment_settings() -> "Dict":
    """Reads the user settings from the CRUDTODO_SETTINGS environment variable, which holds a JSON object."""
    value = os.environ.get(ENVIRONMENT_VARIABLE)
    if not value:
        return {}

    try:
        user_settings = json.loads(value)
    except ValueError as e:
        raise ValueError("%s is not valid JSON: %s" % (ENVIRONMENT_VARIABLE, e))

    if not isinstance(user_settings, dict):
        raise ValueError("%s must hold a JSON object" % ENVIRONMENT_VARIABLE)
    return user_settings


class CrudTodoSettings:
    """
    A settings object that allows crudtodo settings to be accessed as
    properties. For example:

        from crudtodo.settings import crudtodo_settings
        print(crudtodo_settings.MAX_TODO_ID)

    User settings may be given as a dict, either flat or namespaced under
    the CRUDTODO key. When none are given, they're read from the
    CRUDTODO_SETTINGS environment variable.
    """

    def __init__(
        self,
        user_settings: "Optional[Dict]" = None,
        defaults=DEFAULTS,
        import_strings=IMPORT_STRINGS,
        namespace="CRUDTODO",
    ):
        self.defaults = defaults
        self.import_strings = import_strings
        if user_settings is None:
            user_settings = load_environment_settings()

        if namespace in user_settings:
            self._user_settings = user_settings[namespace]
        else:
            self._user_settings = user_settings

        self._cached_attrs = set()

    def __getattr__(self, attr):
        if attr.startswith("_") or attr not in self.defaults:
            raise AttributeError("Invalid setting: '%s'" % attr)

        try:
            val = self._user_settings[attr]
        except KeyError:
            val = self.defaults[attr]

        # Coerce import strings into classes
        if attr in self.import_strings:
            val = perform_import(val, attr)

        if isinstance(self.defaults[attr], dict):
            val = CrudTodoSettings(
                user_settings=self._user_settings.get(attr, {}),
                defaults=copy.deepcopy(self.defaults[attr]),
                import_strings=self.import_strings,
                namespace=attr,
            )

        # Cache the result
        self._cached_attrs.add(attr)
        setattr(self, attr, val)
        return val

    def reload(self):
        for attr in self._cached_attrs:
            delattr(self, attr)
        self._cached_attrs.clear()


crudtodo_settings = CrudTodoSettings()
