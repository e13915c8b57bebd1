"""Application services - orchestration around pack validation."""

from .submission import submit_pack

__all__ = ["submit_pack"]
