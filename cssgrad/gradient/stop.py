from dataclasses import dataclass
from typing import Optional

from cssgrad.color import RgbaColor


@dataclass(frozen=True)
class ColorStop:
    color: RgbaColor
    # Percentage along the gradient line. `None` means the position wasn't
    # given and normalize_stops() hasn't filled it in yet.
    position: Optional[float] = None

    def to_css(self):
        return f"{self.color.to_css()} {self.position:.1f}%"
