"""On-screen text labels."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Label:
    """A piece of text drawn at a fixed world position."""
    x: int
    y: int
    text: str = ""
    style: Dict[str, str] = field(default_factory=dict)
    visible: bool = True

    @property
    def font_size(self) -> int:
        """Pixel size parsed from a CSS-like ``"30px Arial"`` font string."""
        font = self.style.get("font", "")
        head = font.split(" ", 1)[0]
        if head.endswith("px") and head[:-2].isdigit():
            return int(head[:-2])
        return 16

    @property
    def font_family(self) -> str:
        font = self.style.get("font", "")
        parts = font.split(" ", 1)
        return parts[1] if len(parts) == 2 else ""
