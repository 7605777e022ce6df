"""Module with a data class object which represents a jet with classifier
scores attached to it.
"""

from dataclasses import dataclass
from typing import Dict

from .base import FourMomentumBase

__all__ = ["Jet", "MissingScoreError", "score_key"]


class MissingScoreError(LookupError):
    """Raised when a classifier score is requested from a jet which does not
    carry it. This always points at a misconfigured score name or label.
    """


def score_key(label, name):
    """Builds the lookup key of a classifier score.

    Parameters
    ----------
    label : str
        Label which namespaces the classifier scores
    name : str
        Name of the score within its label

    Returns
    -------
    str
        Score key of the form `label:name`
    """
    return f"{label}:{name}"


@dataclass(eq=False)
class Jet(FourMomentumBase):
    """Reconstructed jet with a bank of classifier scores.

    Attributes
    ----------
    scores : Dict[str, float]
        Classifier scores, keyed by `label:name`
    """

    scores: Dict[str, float] = None

    def __post_init__(self):
        """Gives a default value to the score bank."""
        if self.scores is None:
            self.scores = {}

    @classmethod
    def from_scores(cls, pt, eta, phi, mass=0.0, label=None, **scores):
        """Builds a jet from its kinematics and a set of named scores.

        Parameters
        ----------
        pt : float
            Transverse momentum (GeV)
        eta : float
            Pseudorapidity
        phi : float
            Azimuthal angle (radians)
        mass : float, default 0.
            Invariant mass (GeV)
        label : str, optional
            If provided, used to prefix each score name
        **scores : dict
            Score values, keyed by name

        Returns
        -------
        Jet
            Jet object
        """
        if label is not None:
            scores = {score_key(label, k): v for k, v in scores.items()}

        return cls(pt=pt, eta=eta, phi=phi, mass=mass, scores=dict(scores))

    def score(self, label, name):
        """Fetches one classifier score.

        Parameters
        ----------
        label : str
            Label which namespaces the classifier scores
        name : str
            Name of the score within its label

        Returns
        -------
        float
            Classifier score
        """
        key = score_key(label, name)
        if key not in self.scores:
            raise MissingScoreError(
                f"Jet does not carry the requested classifier score: {key}. "
                "Check the score label and the list of score names."
            )

        return float(self.scores[key])
