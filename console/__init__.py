from __future__ import annotations

from importlib import import_module

__all__ = ["ConsoleSession", "SessionSettings"]

_EXPORTS = {
    "ConsoleSession": ".session",
    "SessionSettings": ".schemas",
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name], __name__)
        return getattr(module, name)
    raise AttributeError(name)
