"""Plan export generators."""

from .blueprint import BlueprintConfig, BlueprintGenerator

__all__ = ["BlueprintConfig", "BlueprintGenerator"]
