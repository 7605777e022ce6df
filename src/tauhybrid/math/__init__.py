"""Module with fast, Numba-accelerated, compiled math routines.

- `kinematics.py` includes angular separations and four-momentum conversions
"""

from .kinematics import *
