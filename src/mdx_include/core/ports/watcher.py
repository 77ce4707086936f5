from typing import Protocol


class FileWatcherPort(Protocol):
    """Reports filesystem changes under a docs tree until stopped."""

    @property
    def running(self) -> bool: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...
