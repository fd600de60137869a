"""Domain ports (interfaces/protocols)."""

from checktree.domain.ports.host import HostPanel
from checktree.domain.ports.surface import RenderSurface

__all__ = [
    "HostPanel",
    "RenderSurface",
]
