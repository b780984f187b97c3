"""Registry of editor commands exposed to the host."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandInfo:
    id: str
    name: str
    factory: Callable[..., object]


_COMMAND_REGISTRY: dict[str, CommandInfo] = {}


def register_command(command_id: str, name: str) -> Callable:
    """Decorator to register a command class under a host-visible id."""

    def decorator(cls: Callable[..., object]) -> Callable[..., object]:
        _COMMAND_REGISTRY[command_id] = CommandInfo(command_id, name, cls)
        return cls

    return decorator


def get_command(command_id: str) -> CommandInfo | None:
    return _COMMAND_REGISTRY.get(command_id)


def list_commands() -> list[CommandInfo]:
    return sorted(_COMMAND_REGISTRY.values(), key=lambda info: info.id)
