"""
Resources and their lifecycle callbacks.

A Resource ties a field schema to its callbacks. The callbacks receive
`(ctx, d, meta)` where `d` is the ResourceData of one object and `meta` the
configured device client.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from bigip.diagnostics import Diagnostics, from_err
from bigip.exceptions import ConfigError
from bigip.resource_data import ResourceData
from bigip.schema import TYPE_LIST, Schema


def import_state_passthrough(ctx, d, meta):
    """Importer keeping the imported id as-is, the next read fills the state."""
    return [d]


@dataclass
class Resource:
    schema: Dict[str, Schema]
    create: Callable = None
    read: Callable = None
    update: Callable = None
    delete: Callable = None
    importer: Callable = None
    description: str = ""

    def data(self, config=None, state=None, id=""):
        """Return the ResourceData of one object of this resource."""
        return ResourceData(self.schema, config=config, state=state, id=id)

    def validate(self, config):
        """Check a user configuration against the schema.

        Returns:
            Diagnostics, empty when the configuration is valid
        """
        return _validate_block(self.schema, config or {}, prefix="")

    def import_state(self, ctx, id, meta):
        """Run the importer for the given id and return the imported objects."""
        if self.importer is None:
            raise ConfigError("resource does not support import")
        d = self.data(id=id)
        return self.importer(ctx, d, meta)


def _validate_block(schema, config, prefix):
    diags = Diagnostics()
    for key in config:
        if key not in schema:
            diags.extend(from_err(ConfigError(f"unsupported argument '{prefix}{key}'")))

    for key, sch in schema.items():
        path = f"{prefix}{key}"
        if key not in config or config[key] is None:
            if sch.required:
                diags.extend(from_err(ConfigError(f"missing required argument {path!r}")))
            continue

        value = config[key]
        if sch.type == TYPE_LIST and isinstance(value, dict):
            value = [value]
        if not sch.check_type(value):
            diags.extend(
                from_err(ConfigError(f"{path!r} must be of type {sch.type}, got {value!r}"))
            )
            continue

        if sch.type == TYPE_LIST:
            if sch.max_items and len(value) > sch.max_items:
                diags.extend(
                    from_err(
                        ConfigError(f"{path!r} accepts at most {sch.max_items} item(s)")
                    )
                )
            if sch.elem:
                for i, item in enumerate(value):
                    if not isinstance(item, dict):
                        diags.extend(
                            from_err(ConfigError(f"'{path}.{i}' must be a block"))
                        )
                        continue
                    diags.extend(_validate_block(sch.elem, item, prefix=f"{path}.{i}."))

        if sch.validate_func is not None:
            _, errors = sch.validate_func(value, key)
            for err in errors:
                diags.extend(from_err(err))
    return diags
