"""Module with the data classes which represent tau candidates."""

from copy import deepcopy
from dataclasses import dataclass
from typing import List

from tauhybrid.utils.globals import NULL_DECAY_MODE, NULL_TAU_ID

from .base import DataBase, FourMomentumBase

__all__ = ["TauID", "TauCandidate"]


@dataclass(eq=False)
class TauID(DataBase):
    """Named identification tag of a tau candidate.

    Attributes
    ----------
    name : str
        Name of the identification tag
    value : float
        Value of the identification tag
    """

    name: str = ""
    value: float = NULL_TAU_ID

    def as_pair(self):
        """Returns the tag as a `(name, value)` pair."""
        return self.name, self.value


@dataclass(eq=False)
class TauCandidate(FourMomentumBase):
    """Reconstructed hadronic tau decay hypothesis.

    Attributes
    ----------
    charge : int
        Electric charge of the candidate
    decay_mode : int
        Decay mode code assigned at reconstruction (-1 if not reconstructed)
    index : int
        Position of the candidate in its input collection (-1 if the candidate
        was seeded by a jet)
    is_from_jet : bool
        Whether the candidate was synthesized from an unmatched jet
    tau_ids : List[TauID]
        Ordered list of identification tags
    """

    charge: int = 0
    decay_mode: int = NULL_DECAY_MODE
    index: int = -1
    is_from_jet: bool = False
    tau_ids: List[TauID] = None

    def __post_init__(self):
        """Gives a default value to the tag list, casts `(name, value)` pairs
        to :class:`TauID` objects.
        """
        self.tau_ids = [self._to_tau_id(t) for t in (self.tau_ids or [])]

    def __str__(self):
        """Human-readable string representation of the tau candidate."""
        return (
            f"TauCandidate(index={self.index}, pt={self.pt:0.3f}, "
            f"eta={self.eta:0.3f}, phi={self.phi:0.3f}, charge={self.charge}, "
            f"is_from_jet={self.is_from_jet}, num_tau_ids={len(self.tau_ids)})"
        )

    @staticmethod
    def _to_tau_id(tau_id):
        if isinstance(tau_id, TauID):
            return tau_id

        name, value = tau_id
        return TauID(name, value)

    @property
    def tau_id_names(self):
        """Names of the identification tags, in storage order."""
        return [t.name for t in self.tau_ids]

    def has_tau_id(self, name):
        """Checks whether an identification tag is available.

        Parameters
        ----------
        name : str
            Name of the identification tag

        Returns
        -------
        bool
            `True` if a tag with this name is stored
        """
        return name in self.tau_id_names

    def tau_id(self, name):
        """Returns the value of an identification tag.

        If the same name appears more than once, the first occurrence wins.

        Parameters
        ----------
        name : str
            Name of the identification tag

        Returns
        -------
        float
            Value of the identification tag
        """
        for tau_id in self.tau_ids:
            if tau_id.name == name:
                return tau_id.value

        raise KeyError(
            f"Identification tag not found: {name}. Available tags: "
            f"{self.tau_id_names}"
        )

    def set_tau_ids(self, tau_ids):
        """Replaces the list of identification tags.

        Parameters
        ----------
        tau_ids : List[Union[TauID, Tuple[str, float]]]
            New ordered list of identification tags
        """
        self.tau_ids = [self._to_tau_id(t) for t in tau_ids]

    def copy(self):
        """Returns an independant copy of the candidate.

        Returns
        -------
        TauCandidate
            Copy of the candidate
        """
        return deepcopy(self)

    def extended(self, tau_ids):
        """Returns a copy of the candidate with extra identification tags
        appended at the end of its tag list.

        Parameters
        ----------
        tau_ids : List[Union[TauID, Tuple[str, float]]]
            Identification tags to append

        Returns
        -------
        TauCandidate
            Copy of the candidate with the extended tag list
        """
        tau = self.copy()
        tau.set_tau_ids(tau.tau_ids + list(tau_ids))

        return tau
