"""Debug formatters over the dataclass schema of entities."""

from dataclasses import fields, is_dataclass
from typing import Any


def _type_name(tp: Any) -> str:
    return tp if isinstance(tp, str) else getattr(tp, "__name__", repr(tp))


def describe_schema(entity_cls: type) -> str:
    """Class name, bases and declared fields with their types."""
    if not is_dataclass(entity_cls):
        raise TypeError(f"{entity_cls!r} is not a dataclass")

    bases = ", ".join(b.__name__ for b in entity_cls.__mro__[1:] if b is not object)
    lines = [
        f"{entity_cls.__name__} ({entity_cls.__module__})",
        f"  bases: {bases or 'none'}",
        "  fields:",
    ]
    lines += [f"    {f.name}: {_type_name(f.type)}" for f in fields(entity_cls)]
    return "\n".join(lines)


def describe_instance(entity: Any) -> str:
    """Current field values of an entity."""
    if not is_dataclass(entity) or isinstance(entity, type):
        raise TypeError(f"{entity!r} is not a dataclass instance")

    lines = [f"{type(entity).__name__} instance:"]
    lines += [f"  {f.name} = {getattr(entity, f.name)!r}" for f in fields(entity)]
    return "\n".join(lines)
