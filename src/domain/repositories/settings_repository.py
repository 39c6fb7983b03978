"""World settings repository protocol."""

from typing import Any, Protocol


class ISettingsRepository(Protocol):
    """Repository interface for namespaced world settings."""

    async def get(self, namespace: str, key: str) -> Any | None:
        """Get a setting value, or None when it was never stored."""
        ...

    async def set(self, namespace: str, key: str, value: Any) -> Any:
        """Store a setting value and return it."""
        ...
