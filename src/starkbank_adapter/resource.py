"""
Resource descriptors and the hydration of raw API records into typed objects
"""

import copy
from dataclasses import MISSING, dataclass, fields
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from . import api
from .errors import SchemaError, ValidationError

T = TypeVar("T")


@dataclass
class Resource:
    """Base class of every hydrated API object"""
    id: str


@dataclass(frozen=True)
class ResourceDescriptor:
    """Name of an API entity plus the function that hydrates its raw records"""
    name: str
    maker: Callable[[Dict[str, Any]], Any]

    @property
    def endpoint(self) -> str:
        return api.endpoint(self.name)

    @property
    def singular_key(self) -> str:
        return api.last_name(self.name)

    @property
    def plural_key(self) -> str:
        return api.last_name_plural(self.name)


_REGISTRY: Dict[str, ResourceDescriptor] = {}


def register(descriptor: ResourceDescriptor) -> ResourceDescriptor:
    """Add a descriptor to the registry, refusing to replace an existing one"""
    existing = _REGISTRY.get(descriptor.name)
    if existing is not None and existing is not descriptor:
        raise ValueError(f"Resource already registered: {descriptor.name}")
    _REGISTRY[descriptor.name] = descriptor
    return descriptor


def get_descriptor(name: str) -> ResourceDescriptor:
    """
    Look up a registered descriptor by resource name

    Raises:
        ValidationError: If no resource with that name is registered
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise ValidationError(
            f"Unknown resource: {name}. Known resources: {', '.join(registered_names())}"
        )


def registered_names() -> List[str]:
    return sorted(_REGISTRY)


def hydrate(cls: Type[T], resource_name: str, raw: Any,
            converters: Optional[Dict[str, Callable[[Any], Any]]] = None) -> T:
    """
    Build a dataclass instance from a raw API record

    Every key of the record must map onto a field of ``cls`` and every field
    without a default must be present. Converters are applied to non-null
    values of the named fields, e.g. datetime parsing or the maker of an
    embedded resource.

    Args:
        cls: Dataclass to instantiate
        resource_name: Name used in error messages
        raw: Decoded JSON object received from the API
        converters: Mapping of field name to conversion function

    Returns:
        Instance of ``cls`` owning its own copy of the record data

    Raises:
        SchemaError: If the record has unrecognised keys, lacks a required key
            or holds a value a converter cannot parse
    """
    if not isinstance(raw, dict):
        raise SchemaError(resource_name, "", f"expected a JSON object, got {type(raw).__name__}")

    # Keys are matched in their exact API spelling, 'taxId' and never 'tax_id'
    known = {api.snake_to_camel(f.name): f for f in fields(cls)}
    values = {}
    for raw_key, value in raw.items():
        if raw_key not in known:
            raise SchemaError(resource_name, raw_key, f"unrecognised field '{raw_key}'")
        values[known[raw_key].name] = copy.deepcopy(value)

    for api_key, field_ in known.items():
        required = field_.default is MISSING and field_.default_factory is MISSING
        if required and field_.name not in values:
            raise SchemaError(resource_name, api_key, f"missing required field '{api_key}'")

    for name, convert in (converters or {}).items():
        if values.get(name) is None:
            continue
        try:
            values[name] = convert(values[name])
        except (ValueError, TypeError) as e:
            raise SchemaError(resource_name, api.snake_to_camel(name),
                              f"invalid value for '{api.snake_to_camel(name)}': {e}")

    return cls(**values)
