# -*- coding: utf-8 -*-
# Wingmac/geometry/spline/tridiagonal.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose:
--------
Thomas algorithm for tridiagonal systems A x = d, where A is given by its three
diagonals. Used by the cubic spline fitter to solve for knot tangents.

Conventions:
------------
   - All four inputs have length n. `lower[0]` and `upper[n-1]` are ignored.
   - No pivoting. Callers must pass a diagonally well-conditioned system; a zero
     pivot is a precondition violation (the result is inf/nan, not an exception).
"""

from typing import Sequence
import numpy as np

__all__ = ["solve_tridiagonal"]


def solve_tridiagonal(lower: Sequence[float],
                      main: Sequence[float],
                      upper: Sequence[float],
                      rhs: Sequence[float]) -> np.ndarray:
    """
    Solve a tridiagonal system with forward elimination + back substitution.

    Parameters
    ----------
    lower, main, upper : Sequence[float]
        Sub-, main and super-diagonal coefficients, each of length n.
    rhs : Sequence[float]
        Right-hand side of length n.

    Returns
    -------
    np.ndarray
        Solution vector x of shape (n,).

    Raises
    ------
    ValueError
        If the input lengths disagree.
    """
    a = np.asarray(lower, dtype=np.float64)
    b = np.asarray(main, dtype=np.float64)
    c = np.asarray(upper, dtype=np.float64)
    d = np.asarray(rhs, dtype=np.float64)
    n = d.shape[0]
    if not (a.shape[0] == b.shape[0] == c.shape[0] == n):
        raise ValueError(
            "Diagonals and rhs must share length n (got {}, {}, {}, {}).".format(
                a.shape[0], b.shape[0], c.shape[0], n)
        )
    if n == 0:
        return np.empty(0)

    c_p = np.zeros(n)
    d_p = np.zeros(n)
    x = np.zeros(n)

    # forward elimination
    with np.errstate(divide="ignore", invalid="ignore"):
        c_p[0] = c[0] / b[0]
        d_p[0] = d[0] / b[0]
        for i in range(1, n):
            denom = b[i] - a[i] * c_p[i - 1]
            if i < n - 1:
                c_p[i] = c[i] / denom
            d_p[i] = (d[i] - a[i] * d_p[i - 1]) / denom

    # back substitution
    x[n - 1] = d_p[n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = d_p[i] - c_p[i] * x[i + 1]
    return x
