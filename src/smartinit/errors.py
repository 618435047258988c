# src/smartinit/errors.py
"""
Error types for smartinit.

Every error raised by the library derives from SmartInitError, which is a
TypeError: the same category Python itself uses for a call with bad
keyword arguments. Callers should catch by class, not by message text.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple


class SmartInitError(TypeError):
    """Base class for all smartinit errors."""


class DeclarationError(SmartInitError):
    """Malformed or conflicting attribute declaration on a class."""


class ConfigError(SmartInitError):
    """Invalid smartinit configuration (file, environment or overrides)."""


class UnsupportedOperationError(SmartInitError):
    """`call` used on a class without a valid primary operation."""

    def __init__(self, message: str, owner: Optional[type] = None):
        super().__init__(message)
        self.owner = owner


def _owner_label(owner: Optional[type]) -> str:
    if owner is None:
        return "<contract>"
    return owner.__qualname__


def _quoted(names: Iterable[str]) -> str:
    return ", ".join(f"'{n}'" for n in names)


class AttributeContractError(SmartInitError):
    """Supplied keywords do not satisfy a class contract."""

    reason = "invalid"

    def __init__(self, names: Iterable[str], owner: Optional[type] = None):
        self.names: Tuple[str, ...] = tuple(names)
        self.owner = owner
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        noun = "attribute" if len(self.names) == 1 else "attributes"
        return f"{_owner_label(self.owner)}: {self.reason} {noun} {_quoted(self.names)}"


class UnknownAttributeError(AttributeContractError):
    """A supplied keyword is not part of the declared contract."""

    reason = "unknown"

    def __init__(
        self,
        names: Iterable[str],
        owner: Optional[type] = None,
        missing: Iterable[str] = (),
    ):
        # Missing names are reported alongside, but unknown keys take precedence.
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(names, owner)

    def _build_message(self) -> str:
        message = super()._build_message()
        if self.missing:
            message += f" (also missing {_quoted(self.missing)})"
        return message


class MissingAttributeError(AttributeContractError):
    """A required attribute was not supplied."""

    reason = "missing required"


def format_error_for_cli(exc: BaseException) -> str:
    """
    Render an exception as a single line suitable for terminal output.

    smartinit errors already carry a readable message; anything else is
    prefixed with its class name so the origin stays visible.
    """
    if isinstance(exc, SmartInitError):
        return str(exc)
    text = str(exc).strip().splitlines()
    first = text[0] if text else ""
    return f"{type(exc).__name__}: {first}" if first else type(exc).__name__
