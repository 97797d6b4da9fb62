from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BeamType(Enum):
    CANTILEVER = "cantilever"
    SIMPLY_SUPPORTED = "simply-supported"
    FIXED_FIXED = "fixed-fixed"
    FIXED_PINNED = "fixed-pinned"


@dataclass(frozen=True)
class BeamProperties:
    """
    Geometry and material of a uniform rectangular beam, SI units throughout.
    """
    length: float
    width: float
    depth: float
    youngs_modulus: float
    density: float
    damping_ratio: Optional[float] = None

    @property
    def area(self):
        return self.width * self.depth

    @property
    def second_moment(self):
        return self.width * self.depth**3 / 12.0

    @property
    def flexural_rigidity(self):
        return self.youngs_modulus * self.second_moment

    @property
    def mass_per_length(self):
        return self.density * self.area


@dataclass(frozen=True)
class ModeRoot:
    mode: int
    bl: float
