"""Submission gate between validation and a pack transport.

A pack is only handed to the transport once it passes validation. Every
outcome, including an invalid pack or a failing transport, is returned as
a Success or Failure value rather than raised.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stickerpack.domain.exceptions import TransportError
from stickerpack.domain.results import Failure, Result, Success
from stickerpack.domain.services.pack_validator import validate_pack

if TYPE_CHECKING:
    from stickerpack.contracts.transport import PackTransport
    from stickerpack.domain.value_objects import StickerPack

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "validation_failed"
UNEXPECTED_ERROR = "unexpected_error"


async def submit_pack(pack: StickerPack, transport: PackTransport) -> Result[bool]:
    """Validate a pack and hand it to a transport.

    Args:
        pack: The pack to submit.
        transport: Collaborator that delivers the pack.

    Returns:
        Success carrying the transport's answer, or Failure with code
        "validation_failed" (details are the error strings), the
        TransportError code, or "unexpected_error".
    """
    validation = validate_pack(pack)
    if not validation.is_valid:
        logger.debug(
            f"Pack '{pack.identifier}' rejected with {len(validation.errors)} error(s)"
        )
        return Failure(
            "Sticker pack validation failed",
            code=VALIDATION_FAILED,
            details=validation.errors,
        )

    try:
        accepted = await transport.send(pack)
    except TransportError as e:
        logger.warning(f"Transport failed for pack '{pack.identifier}': {e.message}")
        return Failure(e.message, code=e.code)
    except Exception as e:
        logger.error(f"Unexpected error submitting pack '{pack.identifier}': {e}")
        return Failure(f"Unexpected error: {e}", code=UNEXPECTED_ERROR)

    logger.debug(f"Pack '{pack.identifier}' submitted, accepted={accepted}")
    return Success(bool(accepted))
