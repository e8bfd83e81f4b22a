"""Parsing primitives: positions, spans, a rewindable stack, tokens and precedence climbing."""

__version__ = "0.1.0"
__all__ = ["position", "span", "stack", "token", "prec_climber"]