"""FastAPI dependency injection for validation services."""

from typing import Annotated

from fastapi import Depends

from stickerpack.application.validators import ValidatorRegistry, default_registry


def get_validator_registry() -> ValidatorRegistry:
    """Get a registry with the default advisory validators registered."""
    return default_registry()


RegistryDep = Annotated[ValidatorRegistry, Depends(get_validator_registry)]
