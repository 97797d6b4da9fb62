from .beam_types import BeamType
from .cantilever_beam import CantileverBeam
from .clamped_clamped_beam import ClampedClampedBeam
from .clamped_pinned_beam import ClampedPinnedBeam
from .simply_supported_beam import SimplySupportedBeam


def as_beam_type(beam_type):
    if isinstance(beam_type, BeamType):
        return beam_type
    try:
        return BeamType(beam_type)
    except ValueError:
        valid = ", ".join(t.value for t in BeamType)
        raise ValueError(f"Unknown beam type {beam_type!r}, expected one of: {valid}") from None


def beam_for(beam_type):
    beam_type = as_beam_type(beam_type)
    if beam_type is BeamType.CANTILEVER:
        return CantileverBeam()
    elif beam_type is BeamType.SIMPLY_SUPPORTED:
        return SimplySupportedBeam()
    elif beam_type is BeamType.FIXED_FIXED:
        return ClampedClampedBeam()
    elif beam_type is BeamType.FIXED_PINNED:
        return ClampedPinnedBeam()
    raise ValueError(f"No boundary condition implemented for {beam_type}")
