"""Read access to version-control history."""

from .gateway import InMemoryGateway, SourceControlGateway
from .repository import GitRepository

__all__ = ["GitRepository", "InMemoryGateway", "SourceControlGateway"]
