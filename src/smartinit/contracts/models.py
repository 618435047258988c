# src/smartinit/contracts/models.py
"""
Contract data types: one AttributeSpec per declared attribute, collected
into an immutable ClassContract per consumer class.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple


class factory:
    """
    Marks a default that is produced by calling `func()` for every instance.

        @initialize_with("name", tags=factory(list))
    """

    __slots__ = ("func",)

    def __init__(self, func: Callable[[], Any]):
        if not callable(func):
            raise TypeError(f"factory() expects a callable, got {type(func).__name__}")
        self.func = func

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"factory({name})"


@dataclass(frozen=True)
class AttributeSpec:
    name: str
    has_default: bool = False
    default_value: Any = None

    def resolve_default(self) -> Any:
        """Produce a default value that no other instance shares."""
        if not self.has_default:
            raise LookupError(f"Attribute '{self.name}' has no default")
        value = self.default_value
        if isinstance(value, factory):
            return value.func()
        return copy.deepcopy(value)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"name": self.name, "required": not self.has_default}
        if self.has_default:
            d["default"] = (
                repr(self.default_value)
                if isinstance(self.default_value, factory)
                else self.default_value
            )
        return d


@dataclass(frozen=True)
class ClassContract:
    """
    Declared attributes of one class, in declaration order.

    `primary_operation` is None while the callable adapter is disabled.
    """

    owner: type
    attributes: Tuple[AttributeSpec, ...]
    primary_operation: Optional[str] = None
    _index: Dict[str, AttributeSpec] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {a.name: a for a in self.attributes})

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self.attributes)

    @property
    def required_names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self.attributes if not a.has_default)

    @property
    def defaulted_names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self.attributes if a.has_default)

    @property
    def callable_enabled(self) -> bool:
        return self.primary_operation is not None

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def get(self, name: str) -> Optional[AttributeSpec]:
        return self._index.get(name)

    def with_primary_operation(self, name: str) -> "ClassContract":
        return replace(self, primary_operation=name)

    def to_dict(self) -> Dict[str, Any]:
        attributes: List[Dict[str, Any]] = [a.to_dict() for a in self.attributes]
        return {
            "class": f"{self.owner.__module__}.{self.owner.__qualname__}",
            "attributes": attributes,
            "callable": self.callable_enabled,
            "primary_operation": self.primary_operation,
        }
