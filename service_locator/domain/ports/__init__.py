"""Domain ports."""

from .container_port import ContainerPort

__all__ = ['ContainerPort']
