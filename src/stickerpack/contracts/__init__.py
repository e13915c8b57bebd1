"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, the
application layer stays independent of how packs are validated or delivered.
"""

from .transport import PackTransport as PackTransport
from .validators import Validator as Validator

__all__ = [
    "PackTransport",
    "Validator",
]
