from __future__ import annotations

from dataclasses import dataclass

from pypad.domain.interfaces import IConfigService
from pypad.utils import constants as C


@dataclass(frozen=True)
class WindowConfig:
    """Initial size and cascade step for new document windows ([window] section)."""

    width: int = C.WINDOW_WIDTH
    height: int = C.WINDOW_HEIGHT
    min_width: int = C.WINDOW_MIN_WIDTH
    min_height: int = C.WINDOW_MIN_HEIGHT
    cascade_x: int = C.CASCADE_DX
    cascade_y: int = C.CASCADE_DY

    @classmethod
    def from_config(cls, cfg: IConfigService) -> WindowConfig:
        def _int(key: str, default: int) -> int:
            v = cfg.get_int("window", key, default)
            return default if v is None else v

        min_w = max(1, _int("min_width", C.WINDOW_MIN_WIDTH))
        min_h = max(1, _int("min_height", C.WINDOW_MIN_HEIGHT))
        return cls(
            width=max(min_w, _int("width", C.WINDOW_WIDTH)),
            height=max(min_h, _int("height", C.WINDOW_HEIGHT)),
            min_width=min_w,
            min_height=min_h,
            cascade_x=_int("cascade_x", C.CASCADE_DX),
            cascade_y=_int("cascade_y", C.CASCADE_DY),
        )
