from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class ModeShape:
    mode: int
    x: np.ndarray
    w: np.ndarray
    bl: float
