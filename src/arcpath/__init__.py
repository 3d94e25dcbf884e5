"""arcpath - 2D paths made of straight segments and circular arcs.

arcpath builds, edits and combines closed and open boundaries expressed in a
restricted SVG path-data grammar (M, L, circular A, Z). It supports filleting,
mirroring, offsetting, thickening and boolean operations (intersection,
difference, union) between closed paths.

Example:
    >>> from arcpath import Path
    >>> square = Path.from_d("M 0 0 L 0 10 L 10 10 L 10 0 Z")
    >>> notch = Path.from_d("M 5 5 L 5 20 L 8 20 L 8 5 Z")
    >>> str(square.boolean_difference(notch))
    'M 10 10 L 10 0 L 0 0 L 0 10 L 5 10 L 5 5 L 8 5 L 8 10 Z'
"""

__version__ = "0.1.0"

from arcpath.core.path import Path  # noqa: E402

__all__ = ["Path", "__version__"]
