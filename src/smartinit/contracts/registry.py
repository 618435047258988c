# src/smartinit/contracts/registry.py
"""
Declaration registry.

Maps each consumer class to its ClassContract. Entries are written once,
when the class is declared (normally at import time), and only read
afterwards.
"""

from __future__ import annotations

import copy
import inspect
import keyword
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from smartinit.contracts.models import AttributeSpec, ClassContract, factory
from smartinit.engine.adapter import CallEntryPoint
from smartinit.engine.construction import bound_values, construct
from smartinit.errors import DeclarationError
from smartinit.logging import get_logger

_logger = get_logger(__name__)

# Registry: class -> contract
_CONTRACTS: Dict[type, ClassContract] = {}

CALL_ENTRY_NAME = "call"


def _check_name(cls: type, name: Any) -> None:
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise DeclarationError(
            f"{cls.__qualname__}: {name!r} is not a valid attribute name"
        )
    if name.startswith("_"):
        raise DeclarationError(
            f"{cls.__qualname__}: attribute '{name}' must not start with an underscore"
        )
    if name in cls.__dict__:
        raise DeclarationError(
            f"{cls.__qualname__}: attribute '{name}' conflicts with a name "
            "already defined on the class"
        )


def _check_copyable(cls: type, name: str, value: Any) -> None:
    if isinstance(value, factory):
        return
    try:
        copy.deepcopy(value)
    except Exception as e:
        raise DeclarationError(
            f"{cls.__qualname__}: default for '{name}' cannot be copied per instance "
            f"({type(e).__name__}: {e}); declare it as factory(...) instead"
        ) from e


def _build_specs(
    cls: type,
    required_names: Iterable[str],
    defaulted: Mapping[str, Any],
) -> Tuple[AttributeSpec, ...]:
    if isinstance(required_names, str):
        raise DeclarationError(
            f"{cls.__qualname__}: required names must be a sequence, not a string"
        )

    specs: List[AttributeSpec] = []
    seen = set()
    for name in required_names:
        _check_name(cls, name)
        if name in seen:
            raise DeclarationError(f"{cls.__qualname__}: duplicate attribute '{name}'")
        seen.add(name)
        specs.append(AttributeSpec(name))

    for name, value in defaulted.items():
        _check_name(cls, name)
        if name in seen:
            raise DeclarationError(f"{cls.__qualname__}: duplicate attribute '{name}'")
        _check_copyable(cls, name, value)
        seen.add(name)
        specs.append(AttributeSpec(name, has_default=True, default_value=value))

    return tuple(specs)


def _reader(name: str) -> property:
    def read(self: Any) -> Any:
        try:
            return bound_values(self)[name]
        except KeyError:
            # inherited accessor not part of the subclass's own contract
            raise AttributeError(
                f"'{type(self).__qualname__}' object has no attribute '{name}'"
            ) from None

    read.__name__ = name
    return property(read, doc=f"Read-only attribute '{name}'.")


def _init(self: Any, **kwargs: Any) -> None:
    construct(get_contract(type(self)), kwargs, instance=self)


def _repr(self: Any) -> str:
    try:
        values = bound_values(self)
    except AttributeError:
        return f"<{type(self).__qualname__} (unconstructed)>"
    args = ", ".join(f"{k}={v!r}" for k, v in values.items())
    return f"{type(self).__qualname__}({args})"


def declare(
    cls: type,
    required_names: Iterable[str] = (),
    defaulted: Optional[Mapping[str, Any]] = None,
) -> ClassContract:
    """
    Register the attribute contract for `cls` and synthesize its constructor.

    Installs a keyword-only __init__, one read-only property per attribute
    and, unless the class defines one, a __repr__ listing the values.

    Raises:
        DeclarationError: on duplicate or invalid names, on a name that
            shadows something in the class body, if the class defines its
            own __init__, if `cls` was already declared, or if a default
            cannot be deep-copied (use `factory(...)` for those).
    """
    if not isinstance(cls, type):
        raise DeclarationError(f"declare() expects a class, got {type(cls).__name__}")
    if cls in _CONTRACTS:
        raise DeclarationError(f"{cls.__qualname__} is already declared")
    if "__init__" in cls.__dict__:
        raise DeclarationError(
            f"{cls.__qualname__} defines __init__; the generated constructor would replace it"
        )

    specs = _build_specs(cls, required_names, defaulted or {})
    contract = ClassContract(owner=cls, attributes=specs)

    for spec in specs:
        setattr(cls, spec.name, _reader(spec.name))
    cls.__init__ = _init
    if "__repr__" not in cls.__dict__:
        cls.__repr__ = _repr

    _CONTRACTS[cls] = contract
    _logger.debug(
        "Declared %s: required=%s defaulted=%s",
        cls.__qualname__,
        list(contract.required_names),
        list(contract.defaulted_names),
    )
    return contract


def _keep_entry_point_on_subclasses(cls: type) -> None:
    """Re-wrap `call` when a subclass body overrides it."""
    original = cls.__dict__.get("__init_subclass__")

    def __init_subclass__(sub: type, **kwargs: Any) -> None:
        if original is not None:
            original.__func__(sub, **kwargs)
        else:
            super(cls, sub).__init_subclass__(**kwargs)
        own = sub.__dict__.get(CALL_ENTRY_NAME)
        if own is not None and not isinstance(own, CallEntryPoint):
            setattr(sub, CALL_ENTRY_NAME, CallEntryPoint(own))

    cls.__init_subclass__ = classmethod(__init_subclass__)


def enable_callable(cls: type, primary_operation_name: str = "call") -> ClassContract:
    """
    Enable `cls.call(**kwargs)`: construct, then return
    `instance.<primary_operation_name>()`.

    The operation is looked up when `call` runs, not here, so it may be
    defined later or by a subclass.
    """
    contract = _CONTRACTS.get(cls)
    if contract is None:
        raise DeclarationError(
            f"{cls.__qualname__} must be declared (initialize_with) before enable_callable"
        )
    if not isinstance(primary_operation_name, str) or not primary_operation_name.isidentifier():
        raise DeclarationError(
            f"{cls.__qualname__}: {primary_operation_name!r} is not a valid operation name"
        )
    if CALL_ENTRY_NAME in contract:
        raise DeclarationError(
            f"{cls.__qualname__}: attribute '{CALL_ENTRY_NAME}' conflicts with the call entry point"
        )

    contract = contract.with_primary_operation(primary_operation_name)
    _CONTRACTS[cls] = contract

    existing = inspect.getattr_static(cls, CALL_ENTRY_NAME, None)
    if not isinstance(existing, CallEntryPoint):
        setattr(cls, CALL_ENTRY_NAME, CallEntryPoint(existing))
        _keep_entry_point_on_subclasses(cls)

    _logger.debug(
        "Enabled %s.call -> %s()", cls.__qualname__, primary_operation_name
    )
    return contract


def get_contract(cls: type) -> ClassContract:
    """Contract of `cls`, or of its nearest declared base class."""
    for klass in getattr(cls, "__mro__", ()):
        contract = _CONTRACTS.get(klass)
        if contract is not None:
            return contract
    raise DeclarationError(f"{getattr(cls, '__qualname__', cls)!s} has no declared attributes")


def is_declared(cls: type) -> bool:
    return any(klass in _CONTRACTS for klass in getattr(cls, "__mro__", ()))


def registered_classes() -> List[type]:
    return list(_CONTRACTS)
