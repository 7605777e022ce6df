"""Module with the record of ParticleNet-derived tau identification tags."""

from dataclasses import dataclass

from tauhybrid.utils.globals import (
    NULL_DECAY_MODE,
    NULL_TAU_ID,
    PNET_TAU_IDS,
)

from .base import DataBase
from .tau import TauID

__all__ = ["PNetTauIDs"]


@dataclass(eq=False)
class PNetTauIDs(DataBase):
    """Identification tags derived from the ParticleNet scores of one jet.

    Attributes
    ----------
    decay_mode : int
        Decay mode code of the most probable tau hypothesis
    vs_jet : float
        Tau score over the sum of tau and jet scores
    vs_e : float
        Tau score over the sum of tau and electron scores
    vs_mu : float
        Tau score over the sum of tau and muon scores
    """

    decay_mode: int = NULL_DECAY_MODE
    vs_jet: float = NULL_TAU_ID
    vs_e: float = NULL_TAU_ID
    vs_mu: float = NULL_TAU_ID

    @classmethod
    def null(cls):
        """Builds a record with every tag set to the not-computed sentinel."""
        return cls(int(NULL_TAU_ID), NULL_TAU_ID, NULL_TAU_ID, NULL_TAU_ID)

    def as_tau_ids(self):
        """Converts the record to identification tags, in storage order.

        Returns
        -------
        List[TauID]
            Decay mode, vsJet, vsElectron and vsMuon tags
        """
        values = (self.decay_mode, self.vs_jet, self.vs_e, self.vs_mu)

        return [TauID(n, float(v)) for n, v in zip(PNET_TAU_IDS, values)]
