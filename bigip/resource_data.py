"""
Per-object field store handed to resource callbacks.

Values are addressed by schema name; nested list blocks use dotted paths
with the item index, e.g. `fqdn.0.interval`. The id doubles as the object's
identity: an empty id means the object does not exist.
"""

from copy import deepcopy

from bigip.exceptions import ConfigError
from bigip.schema import TYPE_LIST


class ResourceData:
    def __init__(self, schema, config=None, state=None, id=""):
        """
        Args:
            schema (dict): field name to Schema
            config (dict): desired values supplied by the user
            state (dict): values persisted by the previous run
            id (str): identity of the object, empty when not created
        """
        self._schema = schema
        self._id = id or ""
        self._data = {}
        # configured values win over the persisted ones
        for source in (state, config):
            for key, value in (source or {}).items():
                if key in schema and value is not None:
                    self._data[key] = _normalize(schema[key], value)

    def id(self):
        return self._id

    def set_id(self, value):
        self._id = value or ""

    def get(self, key):
        """Return the value at key, falling back to the default or zero value."""
        parts = key.split(".")
        sch = self._lookup_schema(parts)
        value = self._data
        for part in parts:
            if isinstance(value, list):
                index = int(part)
                value = value[index] if index < len(value) else None
            elif isinstance(value, dict):
                value = value.get(part)
            if value is None:
                break

        if value is None:
            if sch.default is not None:
                return deepcopy(sch.default)
            return sch.zero_value()
        return deepcopy(value)

    def set(self, key, value):
        """Store value at key.

        Raises:
            ConfigError: unknown key or value not matching the schema type
        """
        parts = key.split(".")
        sch = self._lookup_schema(parts)
        value = _normalize(sch, value)
        if value is not None and not sch.check_type(value):
            raise ConfigError(f"{key}: expected {sch.type}, got {value!r}")

        if len(parts) == 1:
            self._data[key] = value
            return

        # nested: <list field>.<index>.<field>
        block_list = self._data.setdefault(parts[0], [])
        index = int(parts[1])
        while len(block_list) <= index:
            block_list.append({})
        block_list[index][parts[2]] = value

    def state(self):
        """Return the id and every top level attribute."""
        return {
            "id": self._id,
            "attributes": {key: self.get(key) for key in self._schema},
        }

    def _lookup_schema(self, parts):
        sch = self._schema.get(parts[0])
        if sch is None:
            raise ConfigError(f"Invalid field address: {'.'.join(parts)!r}")
        if len(parts) == 1:
            return sch
        if (
            sch.type != TYPE_LIST
            or not sch.elem
            or len(parts) != 3
            or not parts[1].isdigit()
            or parts[2] not in sch.elem
        ):
            raise ConfigError(f"Invalid field address: {'.'.join(parts)!r}")
        return sch.elem[parts[2]]


def _normalize(sch, value):
    """A single block given as a mapping is the same as a one-item list."""
    if sch.type == TYPE_LIST and isinstance(value, dict):
        return [deepcopy(value)]
    return deepcopy(value)
