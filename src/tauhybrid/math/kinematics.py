"""Numba JIT compiled implementation of collider kinematics routines.

Angles follow the usual collider convention: pseudorapidity `eta` and
azimuthal angle `phi` in radians.
"""

import numba as nb
import numpy as np

__all__ = [
    "delta_phi",
    "delta_r",
    "delta_r_array",
    "pt_eta_phi_m_to_p4",
]


@nb.njit(cache=True)
def delta_phi(phi1: nb.float64, phi2: nb.float64) -> nb.float64:
    """Compute the azimuthal angle difference, wrapped in [-pi, pi].

    Parameters
    ----------
    phi1 : float
        Azimuthal angle of the first object
    phi2 : float
        Azimuthal angle of the second object

    Returns
    -------
    float
        Wrapped azimuthal angle difference
    """
    return (phi1 - phi2 + np.pi) % (2.0 * np.pi) - np.pi


@nb.njit(cache=True)
def delta_r(
    eta1: nb.float64, phi1: nb.float64, eta2: nb.float64, phi2: nb.float64
) -> nb.float64:
    """Compute the angular separation between two objects.

    Parameters
    ----------
    eta1 : float
        Pseudorapidity of the first object
    phi1 : float
        Azimuthal angle of the first object
    eta2 : float
        Pseudorapidity of the second object
    phi2 : float
        Azimuthal angle of the second object

    Returns
    -------
    float
        Angular separation
    """
    deta = eta1 - eta2
    dphi = delta_phi(phi1, phi2)

    return np.sqrt(deta * deta + dphi * dphi)


@nb.njit(cache=True)
def delta_r_array(
    eta: nb.float64, phi: nb.float64, etas: nb.float64[:], phis: nb.float64[:]
) -> nb.float64[:]:
    """Compute the angular separation between one object and a set of others.

    Parameters
    ----------
    eta : float
        Pseudorapidity of the reference object
    phi : float
        Azimuthal angle of the reference object
    etas : np.ndarray
        (N) Pseudorapidities of the other objects
    phis : np.ndarray
        (N) Azimuthal angles of the other objects

    Returns
    -------
    np.ndarray
        (N) Angular separations
    """
    dr = np.empty(len(etas), dtype=np.float64)
    for i in range(len(etas)):
        dr[i] = delta_r(eta, phi, etas[i], phis[i])

    return dr


@nb.njit(cache=True)
def pt_eta_phi_m_to_p4(
    pt: nb.float64, eta: nb.float64, phi: nb.float64, mass: nb.float64
) -> nb.float64[:]:
    """Converts collider coordinates to a Cartesian four-momentum.

    Parameters
    ----------
    pt : float
        Transverse momentum
    eta : float
        Pseudorapidity
    phi : float
        Azimuthal angle
    mass : float
        Invariant mass

    Returns
    -------
    np.ndarray
        (4) Four-momentum as (E, px, py, pz)
    """
    px = pt * np.cos(phi)
    py = pt * np.sin(phi)
    pz = pt * np.sinh(eta)
    energy = np.sqrt(px * px + py * py + pz * pz + mass * mass)

    return np.array([energy, px, py, pz], dtype=np.float64)
