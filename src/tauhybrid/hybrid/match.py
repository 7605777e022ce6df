"""Associates jets with reconstructed tau candidates."""

import numpy as np

from tauhybrid.math import delta_r_array

__all__ = ["JetSelector", "TauMatcher", "TauClaims"]


class JetSelector:
    """Kinematic selection of the jets considered for hybrid taus."""

    def __init__(self, pt_min, eta_max):
        """Initialize the selection.

        Parameters
        ----------
        pt_min : float
            Minimum jet transverse momentum (GeV)
        eta_max : float
            Maximum absolute jet pseudorapidity
        """
        assert eta_max >= 0, f"The jet |eta| cut must be positive, got {eta_max}."
        self.pt_min = pt_min
        self.eta_max = eta_max

    def __call__(self, jet):
        """Checks whether a jet passes the kinematic selection.

        Parameters
        ----------
        jet : Jet
            Jet to check

        Returns
        -------
        bool
            `True` if the jet passes the selection
        """
        return not (jet.pt < self.pt_min or abs(jet.eta) > self.eta_max)


class TauMatcher:
    """Greedy jet to tau matcher.

    For each jet, claims the first tau of the collection (in input order)
    which has not been claimed yet and which lies within `dr_max` of the jet.
    This is a first-match policy, not a nearest-match one: for a small enough
    `dr_max` both find the same pairs.

    The matcher itself only holds the matching radius. The claims of one
    event are tracked by the :class:`TauClaims` object returned by
    :meth:`claims`, so that several events can be matched concurrently.
    """

    def __init__(self, dr_max):
        """Initialize the matcher.

        Parameters
        ----------
        dr_max : float
            Angular separation below which a jet and a tau are matched
        """
        assert dr_max >= 0, f"The matching radius must be positive, got {dr_max}."
        self.dr_max = dr_max

    def claims(self, taus):
        """Opens the claim record of a new event, with all taus available.

        Parameters
        ----------
        taus : List[TauCandidate]
            Ordered collection of tau candidates of the event

        Returns
        -------
        TauClaims
            Claim record of the event
        """
        return TauClaims(taus, self.dr_max)


class TauClaims:
    """Availability of the tau candidates of one event.

    A tau is claimed at most once. The record is owned by a single call of
    the producer and discarded at the end of the event.
    """

    def __init__(self, taus, dr_max):
        """Loads the tau collection of an event, makes all taus available.

        Parameters
        ----------
        taus : List[TauCandidate]
            Ordered collection of tau candidates
        dr_max : float
            Angular separation below which a jet and a tau are matched
        """
        self.dr_max = dr_max
        self._etas = np.array([t.eta for t in taus], dtype=np.float64)
        self._phis = np.array([t.phi for t in taus], dtype=np.float64)
        self._available = np.ones(len(taus), dtype=bool)
        self._claimed = []

    @property
    def num_taus(self):
        """Number of taus in the event."""
        return len(self._available)

    @property
    def claimed(self):
        """Indexes of the claimed taus, in the order they were claimed."""
        return list(self._claimed)

    @property
    def unclaimed(self):
        """Indexes of the taus which are still available, in input order."""
        return np.flatnonzero(self._available).tolist()

    def available(self, index):
        """Checks whether a tau is still available for matching.

        Parameters
        ----------
        index : int
            Position of the tau in the event collection

        Returns
        -------
        bool
            `True` if the tau has not been claimed yet
        """
        return bool(self._available[index])

    def match(self, jet):
        """Finds and claims the tau matched to a jet, if any.

        Parameters
        ----------
        jet : Jet
            Jet to match

        Returns
        -------
        int, optional
            Position of the claimed tau, `None` if no tau matches
        """
        if not self.num_taus:
            return None

        dr = delta_r_array(float(jet.eta), float(jet.phi), self._etas, self._phis)
        index = np.flatnonzero(self._available & (dr < self.dr_max))
        if not len(index):
            return None

        index = int(index[0])
        self._available[index] = False
        self._claimed.append(index)

        return index
