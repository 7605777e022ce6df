"""Module with a parent class of all data structures."""

from dataclasses import asdict, dataclass

import numpy as np

from tauhybrid.math import pt_eta_phi_m_to_p4


@dataclass(eq=False)
class DataBase:
    """Base class of all data structures.

    Defines basic methods shared by all data structures.
    """

    def __eq__(self, other):
        """Checks that all attributes of two class instances are the same.

        This overloads the default dataclass `__eq__` method to include an
        appopriate check for vector (numpy) attributes and for floating point
        attributes which are not a number.

        Parameters
        ----------
        other : obj
            Other instance of the same object class

        Returns
        -------
        bool
            `True` if all attributes of both objects are identical
        """
        # Check that the two objects belong to the same class
        if self.__class__ != other.__class__:
            return False

        # Check that all base attributes are identical
        for k, v in self.__dict__.items():
            v_other = getattr(other, k)
            if isinstance(v, np.ndarray):
                if v.shape != v_other.shape or (v_other != v).any():
                    return False

            elif isinstance(v, float) and np.isnan(v):
                if not (isinstance(v_other, float) and np.isnan(v_other)):
                    return False

            elif v_other != v:
                return False

        return True

    def as_dict(self):
        """Returns the data class as dictionary of (key, value) pairs.

        Returns
        -------
        dict
            Dictionary of attribute names and their values
        """
        return asdict(self)


@dataclass(eq=False)
class FourMomentumBase(DataBase):
    """Base class of all objects which carry a four-momentum.

    The four-momentum is stored in collider coordinates: transverse momentum,
    pseudorapidity, azimuthal angle and mass.

    Attributes
    ----------
    pt : float
        Transverse momentum (GeV)
    eta : float
        Pseudorapidity
    phi : float
        Azimuthal angle (radians)
    mass : float
        Invariant mass (GeV)
    """

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
    mass: float = 0.0

    @property
    def p4(self):
        """Cartesian four-momentum of the object.

        Returns
        -------
        np.ndarray
            (4) Four-momentum as (E, px, py, pz)
        """
        return pt_eta_phi_m_to_p4(self.pt, self.eta, self.phi, self.mass)

    @property
    def energy(self):
        """Energy of the object (GeV)."""
        return float(self.p4[0])

    @property
    def p(self):
        """Momentum magnitude of the object (GeV)."""
        return float(np.linalg.norm(self.p4[1:]))

    def set_kinematics(self, other):
        """Copies the four-momentum of another object onto this one.

        Parameters
        ----------
        other : FourMomentumBase
            Object to copy the kinematics of
        """
        self.pt = other.pt
        self.eta = other.eta
        self.phi = other.phi
        self.mass = other.mass
