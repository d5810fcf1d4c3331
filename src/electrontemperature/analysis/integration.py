from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

ArrayLike = Union[Sequence[float], "npt.NDArray[np.float64]"]


def integral(x: ArrayLike, y: ArrayLike) -> float:
    """
    Integrate sampled values with the trapezoidal rule.

    Args:
        x: Ordered sample positions.
        y: Function values at the sample positions.

    Raises:
        ValueError: If `x` and `y` differ in length.

    Returns:
        Sum of the trapezoid areas between consecutive samples,
        0.0 for fewer than two samples.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    if x.shape != y.shape:
        raise ValueError(f"Sample arrays must have the same length, got {x.size} and {y.size}.")

    if x.size < 2:
        return 0.0

    return float(np.sum((y[:-1] + y[1:]) * np.diff(x) / 2.0))
