"""Base models shared by configuration and runtime state.

Kept apart from config.py so that log.py can depend on it without an
import cycle (config.py imports the Logger model from log.py).
"""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class Closeable(Protocol):
    """Anything with a close() method."""

    def close(self) -> None:
        ...


class BaseCloseable(BaseModel):
    """Model that closes its Closeable fields when it is closed.

    Gives a cleanup cascade through nested models:
    Config.close() -> Logger.close() -> Sink.close()
    """

    def close(self):
        """Close every Closeable child, reporting (not raising) failures
        so that one broken child does not leak the rest."""
        for field_name in self.__class__.model_fields:
            child = getattr(self, field_name, None)
            if child is None or not isinstance(child, Closeable):
                continue
            try:
                child.close()
            except Exception as e:
                print(
                    f"Warning: Error closing {field_name}: {e}",
                    file=sys.stderr,
                )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):  # noqa: U100
        self.close()
        return False


class BaseConfig(BaseCloseable):
    """Marker base for configuration sections (YAML/env/CLI)."""


class BaseState(BaseCloseable):
    """Marker base for runtime state mutated while a workflow runs."""


__all__ = ["Closeable", "BaseCloseable", "BaseConfig", "BaseState"]
