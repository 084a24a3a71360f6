import numpy as np

# fixed dimension of the system
N = 10
# absolute magnitude below which a pivot counts as zero
SINGULAR_TOLERANCE = 1e-10


class SingularMatrixError(ValueError):
    pass


def _check(a, b, n):
    if not isinstance(a, np.ndarray) or not isinstance(b, np.ndarray):
        raise TypeError("a and b must be numpy arrays")
    # all arithmetic and the pivot threshold assume double precision
    if a.dtype != np.float64 or b.dtype != np.float64:
        raise TypeError(f"a and b must be float64, got {a.dtype} and {b.dtype}")
    if a.shape != (n, n):
        raise ValueError(f"a must have shape ({n}, {n}), got {a.shape}")
    if b.shape != (n,):
        raise ValueError(f"b must have shape ({n},), got {b.shape}")


def solve(a, b, n=N):
    """Solve a @ x = b in place.

    On success a holds the upper triangular form, b holds x and True is
    returned. A near-zero pivot returns False and leaves both arrays in a
    partially eliminated state.
    """
    _check(a, b, n)
    for p in range(n):
        # find index of pivot element, first maximum wins
        s = np.argmax(np.abs(a[p:, p])) + p
        if abs(a[s, p]) < SINGULAR_TOLERANCE:
            return False
        if s != p:
            # swap whole rows, including already eliminated columns
            a[[p, s]] = a[[s, p]]
            b[[p, s]] = b[[s, p]]
        for i in range(p + 1, n):
            factor = a[i, p] / a[p, p]
            b[i] -= factor * b[p]
            a[i, p + 1:] -= factor * a[p, p + 1:]
            a[i, p] = 0.0
    # backward substitution
    for i in reversed(range(n)):
        for j in range(i + 1, n):
            b[i] -= a[i, j] * b[j]
        b[i] /= a[i, i]
    return True


def solution(a, b, n=N):
    """Return x for a @ x = b without touching the inputs."""
    # create copies for in-place computations
    m = np.array(a, dtype=np.float64)
    x = np.array(b, dtype=np.float64)
    if not solve(m, x, n):
        raise SingularMatrixError("Matrix is singular or near-singular")
    return x
