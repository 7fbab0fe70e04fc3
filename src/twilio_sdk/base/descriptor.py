"""
Resource descriptors.

A descriptor is the configuration one resource type supplies to the generic
operations: where it lives, which JSON key holds its list, how to decode a
record and which filters and parameters it accepts.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from string import Formatter
from typing import Any, Generic, Mapping, Optional, Set, Tuple, TypeVar
from urllib.parse import quote

from .decoding import RecordDecoder

T = TypeVar("T")


def _template_fields(template: str) -> Set[str]:
    return {name for _, name, _, _ in Formatter().parse(template) if name}


@dataclass(frozen=True)
class ResourceDescriptor(Generic[T]):
    """
    Configuration for one resource type.

    Attributes:
        name: Resource name used in error messages, e.g. "Recording"
        key: JSON key holding the record array in list responses
        decoder: Turns one JSON object into a record
        list_path: Path template of the collection
        instance_path: Path template of a single instance
        filters: Read filters, python name -> query parameter name
        create_params: Create parameters, python name -> form parameter name
        update_params: Update parameters, python name -> form parameter name
        required_create: Python names of parameters create cannot omit
    """

    name: str
    key: str
    decoder: RecordDecoder[T]
    list_path: str
    instance_path: Optional[str] = None
    filters: Mapping[str, str] = field(default_factory=dict)
    create_params: Mapping[str, str] = field(default_factory=dict)
    update_params: Mapping[str, str] = field(default_factory=dict)
    required_create: Tuple[str, ...] = ()

    def list_uri(self, **path_params: Any) -> str:
        """Render the collection path."""
        return self._render(self.list_path, path_params)

    def instance_uri(self, **path_params: Any) -> str:
        """
        Render the instance path.

        Raises:
            TypeError: If the resource has no instance path
        """
        if self.instance_path is None:
            raise TypeError(f"{self.name} does not support instance operations")
        return self._render(self.instance_path, path_params)

    def _render(self, template: str, path_params: Mapping[str, Any]) -> str:
        expected = _template_fields(template)
        missing = sorted(name for name in expected if not path_params.get(name))
        if missing:
            raise ValueError(f"{self.name} requires path parameter(s): {', '.join(missing)}")
        unexpected = sorted(set(path_params) - expected)
        if unexpected:
            raise TypeError(f"{self.name} got unexpected path parameter(s): {', '.join(unexpected)}")
        return template.format(**{name: quote(str(path_params[name]), safe="") for name in expected})
