# src/smartinit/engine/construction.py
"""
Construction engine.

Turns a keyword mapping into a fully bound instance of a declared class.
Validation runs to completion before anything is bound, so a failed
construction never leaves a half-initialized object behind.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from smartinit.contracts.models import ClassContract
from smartinit.errors import MissingAttributeError, UnknownAttributeError
from smartinit.logging import get_logger

_logger = get_logger(__name__)

# Instance slot holding the bound values, read by the generated properties.
VALUES_ATTR = "_smartinit_values"


def check_supplied(contract: ClassContract, supplied: Mapping[str, Any]) -> None:
    """
    Raise if `supplied` does not match the contract.

    Unknown keys are checked first; when both problems exist the
    UnknownAttributeError also carries the missing names.
    """
    unknown = [k for k in supplied if k not in contract]
    missing = [n for n in contract.required_names if n not in supplied]

    if unknown:
        _logger.debug(
            "%s: rejecting unknown keywords %s", contract.owner.__qualname__, unknown
        )
        raise UnknownAttributeError(unknown, owner=contract.owner, missing=missing)
    if missing:
        _logger.debug(
            "%s: missing required keywords %s", contract.owner.__qualname__, missing
        )
        raise MissingAttributeError(missing, owner=contract.owner)


def resolve_values(
    contract: ClassContract,
    supplied: Mapping[str, Any],
) -> Dict[str, Any]:
    """Final value per declared attribute, in declaration order."""
    values: Dict[str, Any] = {}
    for spec in contract.attributes:
        if spec.name in supplied:
            values[spec.name] = supplied[spec.name]
        else:
            values[spec.name] = spec.resolve_default()
    return values


def construct(
    contract: ClassContract,
    supplied: Mapping[str, Any],
    instance: Optional[Any] = None,
    target: Optional[type] = None,
) -> Any:
    """
    Validate `supplied` and bind the resolved values onto an instance.

    When `instance` is None a new one is allocated without running its
    __init__, of class `target` (a subclass inheriting the contract) or
    else the contract owner.
    """
    check_supplied(contract, supplied)
    values = resolve_values(contract, supplied)

    if instance is None:
        cls = target or contract.owner
        instance = cls.__new__(cls)
    object.__setattr__(instance, VALUES_ATTR, MappingProxyType(values))
    return instance


def bound_values(instance: Any) -> Mapping[str, Any]:
    """Read-only view of the values bound on a constructed instance."""
    try:
        return instance.__dict__[VALUES_ATTR]
    except (AttributeError, KeyError):
        raise AttributeError(
            f"{type(instance).__qualname__} instance has not been constructed"
        ) from None