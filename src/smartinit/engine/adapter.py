# src/smartinit/engine/adapter.py
"""
Callable adapter: construct an instance and invoke its primary operation
in one step.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from smartinit.contracts.models import ClassContract
from smartinit.engine.construction import construct
from smartinit.errors import UnsupportedOperationError
from smartinit.logging import get_logger

_logger = get_logger(__name__)


def _primary_operation(contract: ClassContract, instance: Any) -> Callable[[], Any]:
    name = contract.primary_operation
    operation = getattr(instance, name, None) if name else None
    if operation is None or not callable(operation):
        raise UnsupportedOperationError(
            f"{contract.owner.__qualname__} has no callable primary operation '{name}'",
            owner=contract.owner,
        )
    return operation


def call(
    contract: ClassContract,
    supplied: Mapping[str, Any],
    target: Optional[type] = None,
) -> Any:
    """
    Construct from `supplied`, then return `instance.<primary_operation>()`.

    Construction errors propagate unchanged.
    """
    if not contract.callable_enabled:
        raise UnsupportedOperationError(
            f"{contract.owner.__qualname__} is not callable; use is_callable to enable it",
            owner=contract.owner,
        )

    instance = construct(contract, supplied, target=target)
    operation = _primary_operation(contract, instance)
    _logger.debug(
        "%s.call -> %s()", contract.owner.__qualname__, contract.primary_operation
    )
    return operation()


class CallEntryPoint:
    """
    Descriptor installed as `call` on a callable class.

    On the class it is the construct-and-invoke entry point:
        Service.call(attribute_1="a")
    On an instance it falls through to the method the class body defined
    under the same name, if any.
    """

    def __init__(self, wrapped: Optional[Any] = None):
        self.wrapped = wrapped

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            from smartinit.contracts.registry import get_contract

            cls = owner

            def entry(**kwargs: Any) -> Any:
                return call(get_contract(cls), kwargs, target=cls)

            entry.__name__ = "call"
            entry.__qualname__ = f"{cls.__qualname__}.call"
            entry.__doc__ = f"Construct {cls.__qualname__} and invoke its primary operation."
            return entry

        if self.wrapped is None:
            raise AttributeError(
                f"'{type(instance).__qualname__}' object has no attribute 'call'"
            )
        if hasattr(self.wrapped, "__get__"):
            return self.wrapped.__get__(instance, owner)
        return self.wrapped
