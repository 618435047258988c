# src/smartinit/api/decorators.py
"""
Class decorators for declaring attribute contracts.

    from smartinit import initialize_with, is_callable

    @is_callable
    @initialize_with("user_id", notify=True)
    class SendWelcome:
        def call(self):
            ...

    SendWelcome.call(user_id=42)
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, Union, overload

from smartinit.contracts.registry import declare, enable_callable

C = TypeVar("C", bound=type)


def initialize_with(*required: str, **defaulted: Any) -> Callable[[C], C]:
    """
    Declare the attributes a class is constructed from.

    Positional names are required; keyword names carry their default.
    Use `smartinit.factory(func)` for a default built per instance.

    Raises:
        DeclarationError: on invalid or duplicate names (when decorating)
    """

    def decorator(cls: C) -> C:
        declare(cls, required, defaulted)
        return cls

    return decorator


@overload
def is_callable(cls: C) -> C: ...


@overload
def is_callable(*, method_name: str = "call") -> Callable[[C], C]: ...


def is_callable(
    cls: Optional[C] = None, *, method_name: str = "call"
) -> Union[C, Callable[[C], C]]:
    """
    Add `Cls.call(**kwargs)`, which constructs an instance and returns the
    result of `instance.<method_name>()`.

    Apply it above `initialize_with`. Works bare (`@is_callable`) or with
    arguments (`@is_callable(method_name="run")`).
    """

    def decorator(klass: C) -> C:
        enable_callable(klass, method_name)
        return klass

    if cls is not None:
        return decorator(cls)
    return decorator
