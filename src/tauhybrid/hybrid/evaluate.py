"""Derives tau identification discriminants from the scores of one jet."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from tauhybrid.data import PNetTauIDs
from tauhybrid.utils.globals import CHARGE_WINDOW, NULL_DECAY_MODE

from .catalog import ScoreDescriptor

__all__ = ["JetEvaluation", "JetEvaluator"]


@dataclass(frozen=True)
class JetEvaluation:
    """Summary of the classifier scores of one jet.

    Attributes
    ----------
    sum_tau : float
        Sum of the tau-flavor scores
    sum_lepton : float
        Sum of the lepton-flavor scores
    sum_electron : float
        Sum of the electron-flavor scores
    sum_muon : float
        Sum of the muon-flavor scores
    best_tau : ScoreDescriptor, optional
        Descriptor of the highest tau-flavor score
    best_tau_score : float
        Value of the highest tau-flavor score (-1 if there is none)
    plus_charge_prob : float
        Fraction of the tau-flavor score which comes from positive taus
    is_tau_best : bool
        Whether the highest tau-flavor score is the highest of all scores
    charge : int
        Charge inferred from the best tau-flavor score
    tau_ids : PNetTauIDs
        Derived identification tags
    """

    sum_tau: float
    sum_lepton: float
    sum_electron: float
    sum_muon: float
    best_tau: Optional[ScoreDescriptor]
    best_tau_score: float
    plus_charge_prob: float
    is_tau_best: bool
    charge: int
    tau_ids: PNetTauIDs

    def is_tau_like(self, window=CHARGE_WINDOW):
        """Checks whether the jet looks like a hadronic tau.

        A jet is tau-like if its best tau-flavor score is globally the best
        and its charge assignment is not ambiguous.

        Parameters
        ----------
        window : float, default 0.2
            Half-width of the ambiguous region around a positive charge
            probability of 0.5

        Returns
        -------
        bool
            `True` if the jet passes the tau-like selection
        """
        return self.is_tau_best and abs(0.5 - self.plus_charge_prob) >= window


class JetEvaluator:
    """Evaluates the ParticleNet discriminants of jets.

    Reads the raw scores listed in a :class:`ScoreCatalog` from each jet and
    aggregates them into the decay mode, vsJet, vsElectron and vsMuon tags.
    """

    def __init__(self, catalog, label):
        """Initialize the evaluator.

        Parameters
        ----------
        catalog : ScoreCatalog
            Classified list of scores to read from each jet
        label : str
            Label which namespaces the scores in the jet score bank
        """
        self.catalog = catalog
        self.label = label

    def __call__(self, jet, decay_mode=NULL_DECAY_MODE):
        """Evaluate the discriminants of one jet.

        The decay mode is only assigned by a jet whose best tau hypothesis is
        globally best and carries a known decay tag. Otherwise the decay mode
        given as an argument is kept, which lets a caller carry the last
        assigned decay mode from one jet to the next.

        Parameters
        ----------
        jet : Jet
            Jet with its bank of classifier scores
        decay_mode : int, default -1
            Decay mode code to keep if this jet does not assign one

        Returns
        -------
        JetEvaluation
            Aggregated scores and derived identification tags
        """
        # Sum the tau scores, find the best one and the positive charge share
        best_tau, best_score = None, -1.0
        sum_tau, plus_prob = 0.0, 0.0
        for desc in self.catalog.tau:
            score = jet.score(self.label, desc.name)
            sum_tau += score
            if desc.plus_charge:
                plus_prob += score
            if score > best_score:
                best_tau, best_score = desc, score

        if sum_tau > 0:
            plus_prob /= sum_tau

        # Sum the lepton scores, check that none of them beats the best tau
        sum_lep, sum_ele, sum_mu = 0.0, 0.0, 0.0
        is_tau_best = sum_tau > 0
        for desc in self.catalog.lepton:
            score = jet.score(self.label, desc.name)
            sum_lep += score
            if score > best_score:
                is_tau_best = False
            if desc.is_electron:
                sum_ele += score
            elif desc.is_muon:
                sum_mu += score

        # Only read the jet scores if the tau hypothesis still stands
        if is_tau_best:
            for desc in self.catalog.jet:
                if jet.score(self.label, desc.name) > best_score:
                    is_tau_best = False

        # Ratios are left unguarded, degenerate ones are not finite
        sum_tau = np.float64(sum_tau)
        with np.errstate(divide="ignore", invalid="ignore"):
            vs_jet = sum_tau / (1.0 - sum_lep)
            vs_e = sum_tau / (sum_tau + sum_ele)
            vs_mu = sum_tau / (sum_tau + sum_mu)

        # Decay mode and charge are only assigned if the tau is globally best
        charge = 0
        if is_tau_best:
            charge = best_tau.charge
            if best_tau.decay_mode is not None:
                decay_mode = int(best_tau.decay_mode)

        tau_ids = PNetTauIDs(
            decay_mode=decay_mode,
            vs_jet=float(vs_jet),
            vs_e=float(vs_e),
            vs_mu=float(vs_mu),
        )

        return JetEvaluation(
            sum_tau=float(sum_tau),
            sum_lepton=sum_lep,
            sum_electron=sum_ele,
            sum_muon=sum_mu,
            best_tau=best_tau,
            best_tau_score=best_score,
            plus_charge_prob=plus_prob,
            is_tau_best=is_tau_best,
            charge=charge,
            tau_ids=tau_ids,
        )
