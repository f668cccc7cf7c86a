"""Port: the backend HTTP API as seen by the presentation client."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class AssistantApi(Protocol):
    """Abstract backend client. Every method raises ApiUnavailableError when the server is unreachable."""

    async def status(self) -> dict[str, Any]: ...

    async def history(self) -> dict[str, Any]: ...

    async def clear_history(self) -> dict[str, Any]: ...

    async def settings(self) -> dict[str, Any]: ...

    async def update_settings(self, partial: dict[str, Any]) -> dict[str, Any]: ...

    async def send(self, message: str) -> dict[str, Any]: ...

    async def export(self, destination: Path) -> Path:
        """Download the export dump into *destination* (a file path). Returns the path written."""
        ...

    async def aclose(self) -> None: ...
