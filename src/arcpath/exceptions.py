"""Exception hierarchy for arcpath."""


class ArcpathError(Exception):
    """Base exception for all arcpath errors."""

    pass


class GeometryError(ArcpathError):
    """Errors in geometric calculations."""

    pass


class ImpossibleGeometryError(GeometryError):
    """The requested geometry does not exist (e.g. radius too small for a chord)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Impossible geometry: {reason}")


class UnsupportedGeometryError(GeometryError):
    """The input uses a feature outside the supported line/circular-arc subset."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"Unsupported geometry: {feature}")


class PreconditionViolationError(ArcpathError):
    """An operation was invoked on a path that does not have the required structure."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot {operation}: {reason}")


class PathSyntaxError(ArcpathError):
    """Malformed SVG path data."""

    def __init__(self, data: str, reason: str) -> None:
        self.data = data
        self.reason = reason
        super().__init__(f"Invalid path data '{data}': {reason}")


class BooleanOperationError(ArcpathError):
    """Errors raised by the boolean-operation engine."""

    pass


class NoIntersectionError(BooleanOperationError):
    """The two boundaries do not cross, so the operation has no loop to trace."""

    def __init__(self, operation: str, count: int) -> None:
        self.operation = operation
        self.count = count
        super().__init__(
            f"Boolean {operation} needs crossing boundaries, found {count} intersection(s)"
        )


class NonConvergentError(BooleanOperationError):
    """The loop walk did not return to its starting state."""

    def __init__(self, steps: int, reason: str) -> None:
        self.steps = steps
        self.reason = reason
        super().__init__(f"Loop walk did not converge after {steps} steps: {reason}")


class LoopSelectionError(BooleanOperationError):
    """No traced loop matches the classification required by the operation."""

    def __init__(self, operation: str, loop_count: int) -> None:
        self.operation = operation
        self.loop_count = loop_count
        super().__init__(
            f"No loop matches boolean {operation} ({loop_count} loop(s) traced)"
        )
