"""Forward, backward and float passes of the MPM engine."""

from .backward_pass import BackwardPass
from .base import RelaxationPass
from .criticality import derive_float
from .forward_pass import ForwardPass

__all__ = ["BackwardPass", "ForwardPass", "RelaxationPass", "derive_float"]
