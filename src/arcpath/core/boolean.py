"""Boolean operations between closed paths.

The engine works on the crossings of the two boundaries:

1. Find every crossing, located along both paths.
2. Order the crossings along each path.
3. Walk loops: follow one path to the next crossing, switch to the other
   path there, and turn toward the subject's interior side at every switch.
   Each loop is the boundary of one face of the arrangement.
4. Classify every stretch of a loop as inside or outside the path it does
   not belong to, and select the loop the operation asks for.
5. Stitch the stretches of the selected loop into one closed path.

The walk itself is a pure state machine (``LoopWalker``) so termination can
be tested apart from the geometry.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from arcpath.config import BooleanOperation
from arcpath.core.vector import points_equal
from arcpath.domain import PathIntersection, Segment, Side
from arcpath.exceptions import (
    LoopSelectionError,
    NoIntersectionError,
    NonConvergentError,
    PreconditionViolationError,
)
from arcpath.utils.debug import debug_geometry

if TYPE_CHECKING:
    from arcpath.core.path import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkState:
    """Position of the loop walk.

    Attributes:
        index: Crossing the walk stands on
        side: Path the walk continues along
        forward: Direction along that path's crossing order
    """

    index: int
    side: Side
    forward: bool

    @property
    def invert(self) -> bool:
        """True when the path is traversed against its own direction."""
        return not self.forward


@dataclass(frozen=True, slots=True)
class Ordering:
    """Cyclic order of the crossings along one path."""

    order: tuple[int, ...]
    after: tuple[int, ...]
    before: tuple[int, ...]

    @classmethod
    def along(cls, intersections: Sequence[PathIntersection], side: Side) -> "Ordering":
        count = len(intersections)
        order = sorted(range(count), key=lambda i: intersections[i].location(side).sort_key)
        after = [0] * count
        before = [0] * count
        for position, index in enumerate(order):
            after[index] = order[(position + 1) % count]
            before[index] = order[position - 1]
        return cls(tuple(order), tuple(after), tuple(before))

    def next(self, index: int, forward: bool) -> int:
        return self.after[index] if forward else self.before[index]


class LoopWalker:
    """Enumerates the loops formed by two interleaved crossing orderings.

    Args:
        crossing_flags: For each side, the ``crosses_from_the_right`` flag of
            every crossing along that side
        orderings: For each side, the crossing order along that side
        turn_right: Turn right at crossings (clockwise subject) instead of left
        step_limit: Longest loop accepted before the walk is declared stuck
    """

    def __init__(
        self,
        crossing_flags: dict[Side, Sequence[bool]],
        orderings: dict[Side, Ordering],
        turn_right: bool,
        step_limit: int,
    ) -> None:
        self.crossing_flags = crossing_flags
        self.orderings = orderings
        self.turn_right = turn_right
        self.step_limit = step_limit
        self.count = len(orderings[Side.SELF].order)

    def step(self, state: WalkState) -> WalkState:
        """Move to the next crossing along the current side and switch sides."""
        index = self.orderings[state.side].next(state.index, state.forward)
        side = state.side.opposite
        forward = (self.crossing_flags[side][index] != state.forward) != self.turn_right
        return WalkState(index, side, forward)

    def walk(self, start: WalkState) -> Iterator[WalkState]:
        """Yield the states of the loop through ``start``, beginning with it.

        Raises:
            NonConvergentError: If the walk exceeds the step limit or reaches
                a state it already went through other than ``start``
        """
        seen = {start}
        state = start
        yield state
        while True:
            state = self.step(state)
            if state == start:
                return
            if state in seen:
                raise NonConvergentError(len(seen), f"state {state} visited twice")
            if len(seen) >= self.step_limit:
                raise NonConvergentError(len(seen), f"step limit of {self.step_limit} reached")
            seen.add(state)
            yield state

    def loops(self) -> Iterator[list[WalkState]]:
        """Every distinct loop, starting from subject-side states first."""
        visited: set[WalkState] = set()
        for side in (Side.SELF, Side.OTHER):
            for index in range(self.count):
                for forward in (True, False):
                    start = WalkState(index, side, forward)
                    if start in visited:
                        continue
                    loop = list(self.walk(start))
                    visited.update(loop)
                    yield loop


@dataclass
class TracedLoop:
    """A loop with the boundary stretch of each of its steps.

    Attributes:
        states: Walk states, one per step
        pieces: Open path traversed by each step
        inside: Whether each piece lies inside the path it does not belong to
    """

    states: list[WalkState]
    pieces: list["Path"]
    inside: list[bool]


class BooleanEngine:
    """Intersection, difference and union of two closed paths.

    Args:
        subject: The path the operation is applied to
        clip: The other operand
    """

    def __init__(self, subject: "Path", clip: "Path") -> None:
        for operand, name in ((subject, "subject"), (clip, "clip")):
            if not operand.is_closed():
                raise PreconditionViolationError("compute boolean operation", f"{name} path is open")
        self.subject = subject
        self.clip = clip
        self.tolerance = subject.tolerance
        self._intersections: list[PathIntersection] | None = None

    def path(self, side: Side) -> "Path":
        return self.subject if side is Side.SELF else self.clip

    @property
    def intersections(self) -> list[PathIntersection]:
        """Crossings of the two boundaries, with duplicates at shared vertices merged."""
        if self._intersections is None:
            unique: list[PathIntersection] = []
            for crossing in self.subject.find_path_intersections(self.clip):
                if any(points_equal(crossing.point, kept.point, self.tolerance) for kept in unique):
                    continue
                unique.append(crossing)
            self._intersections = unique
        return self._intersections

    def walker(self, operation: BooleanOperation) -> LoopWalker:
        """Loop walker over the current crossings.

        Raises:
            NoIntersectionError: If the boundaries cross fewer than twice
        """
        crossings = self.intersections
        if len(crossings) < 2:
            raise NoIntersectionError(operation.value, len(crossings))
        orderings = {side: Ordering.along(crossings, side) for side in Side}
        flags = {
            side: [c.location(side).crosses_from_the_right for c in crossings] for side in Side
        }
        limit = max(self.tolerance.loop_step_limit, 2 * len(crossings))
        return LoopWalker(flags, orderings, self.subject.rotates_clockwise(), limit)

    def trace(self, states: Sequence[WalkState]) -> TracedLoop:
        """Extract and classify the boundary stretch of every step of a loop."""
        crossings = self.intersections
        pieces: list["Path"] = []
        inside: list[bool] = []
        for k, state in enumerate(states):
            following = states[(k + 1) % len(states)]
            here = crossings[state.index].location(state.side)
            there = crossings[following.index].location(state.side)
            piece = self.path(state.side).subpath(
                here.segment, here.x, there.segment, there.x, invert=state.invert
            )
            pieces.append(piece)
            inside.append(self.path(state.side.opposite).contains_point(piece.evaluate_anywhere(0.5)))
        return TracedLoop(list(states), pieces, inside)

    def assemble(self, loop: TracedLoop) -> "Path":
        """Join the pieces of a loop into a simplified closed path."""
        from arcpath.core.path import Path

        result = Path(tolerance=self.tolerance)
        for piece in loop.pieces:
            result.merge(piece)
        if not result.is_closed():
            result.close()
        result.simplify()
        return result

    def _select(
        self, operation: BooleanOperation, matches: Callable[[TracedLoop], bool]
    ) -> TracedLoop:
        count = 0
        try:
            for states in self.walker(operation).loops():
                count += 1
                loop = self.trace(states)
                logger.debug(
                    "Traced loop %d for %s: %s",
                    count,
                    operation.value,
                    [(s.index, s.side.name, s.forward, inside) for s, inside in zip(states, loop.inside)],
                )
                if matches(loop):
                    return loop
        except NonConvergentError:
            debug_geometry(self.subject, self.clip, [c.point for c in self.intersections])
            raise
        debug_geometry(self.subject, self.clip, [c.point for c in self.intersections])
        raise LoopSelectionError(operation.value, count)

    def intersection(self) -> "Path":
        """Region inside both paths: the loop whose every stretch is inside."""
        loop = self._select(BooleanOperation.INTERSECTION, lambda loop: all(loop.inside))
        return self.assemble(loop)

    def difference(self) -> "Path":
        """Region inside the subject and outside the clip.

        The selected loop runs along the subject outside the clip and along
        the clip inside the subject.
        """

        def is_difference(loop: TracedLoop) -> bool:
            return all(
                inside == (state.side is Side.OTHER)
                for state, inside in zip(loop.states, loop.inside)
            )

        return self.assemble(self._select(BooleanOperation.DIFFERENCE, is_difference))

    def union(self) -> "Path":
        """Region inside either path.

        Paths sharing an edge are stitched along it. Otherwise the outer loop
        is traced; it is the all-outside loop winding against the subject.
        """
        stitched = self._stitch_shared_edge()
        if stitched is not None:
            return stitched

        # TODO: unions whose result has a hole need multi-loop results
        subject_clockwise = self.subject.rotates_clockwise()
        outer: dict[int, "Path"] = {}

        def is_outer(loop: TracedLoop) -> bool:
            if any(loop.inside):
                return False
            candidate = self.assemble(loop)
            if candidate.rotates_clockwise() == subject_clockwise:
                return False
            outer[0] = candidate
            return True

        self._select(BooleanOperation.UNION, is_outer)
        return outer[0].invert()

    def _stitch_shared_edge(self) -> "Path | None":
        for edge in self._line_segments(self.subject):
            clip = self.clip
            index = self._find_antiparallel(edge, clip)
            if index is None:
                if self._find_parallel(edge, clip) is None:
                    continue
                clip = clip.invert()
                index = self._find_antiparallel(edge, clip)
                if index is None:
                    continue
            logger.debug("Stitching union along shared edge %s -> %s", edge.start, edge.end)
            result = self.subject.subpath(edge.index, 1.0, edge.index, 0.0)
            result.merge(clip.subpath(index, 1.0, index, 0.0))
            if not result.is_closed():
                result.close()
            result.simplify()
            return result
        return None

    def _line_segments(self, path: "Path") -> Iterator[Segment]:
        for seg in path.segments():
            if not seg.is_arc and not points_equal(seg.start, seg.end, self.tolerance):
                yield seg

    def _find_antiparallel(self, edge: Segment, path: "Path") -> int | None:
        for seg in self._line_segments(path):
            if points_equal(seg.start, edge.end, self.tolerance) and points_equal(
                seg.end, edge.start, self.tolerance
            ):
                return seg.index
        return None

    def _find_parallel(self, edge: Segment, path: "Path") -> int | None:
        for seg in self._line_segments(path):
            if points_equal(seg.start, edge.start, self.tolerance) and points_equal(
                seg.end, edge.end, self.tolerance
            ):
                return seg.index
        return None
