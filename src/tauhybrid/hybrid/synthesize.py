"""Builds tau candidates from jets which did not match any reconstructed tau."""

from tauhybrid.data import TauCandidate, TauID
from tauhybrid.utils.globals import CHARGE_WINDOW, DM_FINDING_ID, NULL_TAU_ID

__all__ = ["TauSynthesizer"]


class TauSynthesizer:
    """Turns tau-like unmatched jets into jet-seeded tau candidates.

    The candidate takes the kinematics of the jet and the charge inferred from
    its scores. No constituents are assigned to it, so the only baseline tag
    it carries is a decay mode finding placeholder set to the sentinel value,
    followed by the ParticleNet-derived tags.
    """

    def __init__(self, charge_window=CHARGE_WINDOW):
        """Initialize the synthesizer.

        Parameters
        ----------
        charge_window : float, default 0.2
            Half-width of the ambiguous region around a positive charge
            probability of 0.5. Jets in that region are not used.
        """
        assert 0 <= charge_window <= 0.5, (
            "The charge ambiguity window must be in [0, 0.5], "
            f"got {charge_window}."
        )
        self.charge_window = charge_window

    def accept(self, evaluation):
        """Checks whether a jet passes the tau-like selection.

        Parameters
        ----------
        evaluation : JetEvaluation
            Scores of the jet

        Returns
        -------
        bool
            `True` if a tau candidate should be built from the jet
        """
        return evaluation.is_tau_like(self.charge_window)

    def __call__(self, jet, evaluation):
        """Builds a tau candidate from a jet, if it is tau-like.

        Parameters
        ----------
        jet : Jet
            Jet which did not match any tau candidate
        evaluation : JetEvaluation
            Scores of the jet

        Returns
        -------
        TauCandidate, optional
            Jet-seeded tau candidate, `None` if the jet is not tau-like
        """
        if not self.accept(evaluation):
            return None

        tau = TauCandidate(charge=evaluation.charge, is_from_jet=True)
        tau.set_kinematics(jet)
        tau.set_tau_ids(
            [TauID(DM_FINDING_ID, NULL_TAU_ID), *evaluation.tau_ids.as_tau_ids()]
        )

        return tau
