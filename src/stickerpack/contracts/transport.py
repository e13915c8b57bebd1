"""Transport protocol for handing a validated pack to a host integration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stickerpack.domain.value_objects import StickerPack


@runtime_checkable
class PackTransport(Protocol):
    """Protocol for collaborators that deliver a pack somewhere.

    Implementations report delivery problems by raising TransportError.
    The boolean return value is whatever the receiving side reported.
    """

    async def send(self, pack: StickerPack) -> bool:
        """Deliver a pack and report whether the receiver accepted it."""
        ...
