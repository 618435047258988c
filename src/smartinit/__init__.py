# src/smartinit/__init__.py
"""
smartinit - declarative keyword constructors

Usage:
    from smartinit import initialize_with, is_callable

    @is_callable
    @initialize_with("attribute_1", attribute_2="default_value_2")
    class Service:
        def call(self):
            return [self.attribute_1, self.attribute_2]

    Service(attribute_1="a").attribute_2      # "default_value_2"
    Service.call(attribute_1="a")             # ["a", "default_value_2"]

    # Functional form, no decorators
    import smartinit
    smartinit.declare(Plain, ["host"], {"port": 8080})
    smartinit.construct(Plain, host="localhost")
"""

from smartinit.version import VERSION as __version__

from typing import Any, Dict, Union

# Decorators
from smartinit.api.decorators import initialize_with, is_callable

# Registry
from smartinit.contracts.models import AttributeSpec, ClassContract, factory
from smartinit.contracts.registry import (
    declare,
    enable_callable,
    get_contract,
    is_declared,
    registered_classes,
)

# Engine
from smartinit.engine import adapter as _adapter
from smartinit.engine import construction as _construction

# Configuration
from smartinit.config.models import SmartInitConfig
from smartinit.config.settings import resolve_effective_config

# Errors
from smartinit.errors import (
    AttributeContractError,
    ConfigError,
    DeclarationError,
    MissingAttributeError,
    SmartInitError,
    UnknownAttributeError,
    UnsupportedOperationError,
)

ContractSource = Union[type, ClassContract]


def _resolve(source: ContractSource) -> ClassContract:
    if isinstance(source, ClassContract):
        return source
    return get_contract(source)


def construct(source: ContractSource, /, **kwargs: Any) -> Any:
    """
    Build an instance of a declared class (or of a contract's owner).

    Equivalent to `cls(**kwargs)` for a declared class.
    """
    if isinstance(source, type):
        return _construction.construct(get_contract(source), kwargs, target=source)
    return _construction.construct(source, kwargs)


def call(source: ContractSource, /, **kwargs: Any) -> Any:
    """Construct, then return the result of the primary operation."""
    if isinstance(source, type):
        return _adapter.call(get_contract(source), kwargs, target=source)
    return _adapter.call(source, kwargs)


def describe(source: ContractSource) -> Dict[str, Any]:
    """Plain-dict description of a class contract."""
    return _resolve(source).to_dict()


def values_of(instance: Any) -> Dict[str, Any]:
    """Bound attribute values of a constructed instance, in declaration order."""
    return dict(_construction.bound_values(instance))


__all__ = [
    "__version__",
    "initialize_with",
    "is_callable",
    "declare",
    "enable_callable",
    "get_contract",
    "is_declared",
    "registered_classes",
    "construct",
    "call",
    "describe",
    "values_of",
    "factory",
    "AttributeSpec",
    "ClassContract",
    "SmartInitConfig",
    "resolve_effective_config",
    "SmartInitError",
    "DeclarationError",
    "ConfigError",
    "AttributeContractError",
    "UnknownAttributeError",
    "MissingAttributeError",
    "UnsupportedOperationError",
]
