"""Render mode entity."""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class RenderMode:
    """Inclusion syntax used to ask the edge device for a fragment."""

    key: str
    title: str
    render: Callable[[str], str]

    def __call__(self, url: str) -> str:
        return self.render(url)
