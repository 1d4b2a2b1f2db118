from dataclasses import dataclass

from halfblock.escape import EscapeStyle
from halfblock.imaging import FilterKind


@dataclass(frozen=True)
class RenderConfig:
    width: int
    height: int
    alpha_threshold: int = 0
    escape_style: EscapeStyle = EscapeStyle.LITERAL
    resize_filter: FilterKind = FilterKind.NEAREST
    preserve_aspect: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Target size must be positive, got {self.width}x{self.height}")
        if not 0 <= self.alpha_threshold <= 255:
            raise ValueError(f"Alpha threshold must be between 0 and 255, got {self.alpha_threshold}")
