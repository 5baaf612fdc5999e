from __future__ import annotations


class InvariantViolation(RuntimeError):
    """Raised when engine state is about to break a board invariant.

    These indicate a defect in the engine, never a bad user action: illegal
    selections and targets are reported as ``Rejected`` outcomes instead.
    """
