"""
Errors raised by the simulation core.
NO UI DEPENDENCIES.

Invalid player commands are never errors; they are rejected silently.
Only broken internal invariants raise.
"""


class InvariantViolation(RuntimeError):
    """An internal invariant was broken. The tick must not continue."""
