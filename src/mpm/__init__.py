"""MPM - Metra Potential Method critical path analysis."""

__version__ = "0.1.0"
