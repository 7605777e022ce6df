"""Catalog of the ParticleNet jet scores used to build hybrid taus.

The classifier exposes a flat list of scores whose semantics are encoded in
their names, e.g. `probtaup1h0p` (positive tau decaying to one charged hadron
and no neutral pion), `probele` or `probuds`. The catalog parses those names
once and sorts them in three buckets:
- tau-flavor scores (name contains `tau`)
- lepton-flavor scores (name contains `ele` or `mu`)
- jet-flavor scores (anything else)

Only names which contain `prob` are probabilities; others (e.g. `ptcorr`)
are discarded.
"""

from dataclasses import dataclass
from typing import Optional

from tauhybrid.utils.enums import ScoreFlavorEnum, TauDecayModeEnum
from tauhybrid.utils.globals import (
    ELECTRON_PATTERN,
    MINUS_MARKER,
    MUON_PATTERN,
    PLUS_MARKER,
    SCORE_PATTERN,
    TAU_PATTERN,
)
from tauhybrid.utils.logger import logger

__all__ = ["ScoreDescriptor", "ScoreCatalog", "strip_label"]


def strip_label(score_name):
    """Removes the label prefix of a score identifier, if any.

    Parameters
    ----------
    score_name : str
        Score identifier, of the form `label:name` or `name`

    Returns
    -------
    str
        Score name without its label
    """
    return score_name.split(":", 1)[-1]


@dataclass(frozen=True)
class ScoreDescriptor:
    """Parsed form of one classifier score name.

    Attributes
    ----------
    name : str
        Score name, without label
    flavor : ScoreFlavorEnum
        Semantic bucket of the score
    charge : int
        Charge encoded after the `tau` pattern (-1, +1, or 0 if absent)
    decay_tag : str, optional
        Decay tag which follows the charge marker (tau-flavor only)
    decay_mode : TauDecayModeEnum, optional
        Decay mode of the decay tag, `None` if the tag is not known
    lepton : str, optional
        Lepton pattern matched by the score name (lepton-flavor only)
    plus_charge : bool
        Whether the score contributes to the positive charge probability
    """

    name: str
    flavor: ScoreFlavorEnum
    charge: int = 0
    decay_tag: Optional[str] = None
    decay_mode: Optional[TauDecayModeEnum] = None
    lepton: Optional[str] = None
    plus_charge: bool = False

    @classmethod
    def parse(cls, name):
        """Parses a score name into a descriptor.

        Parameters
        ----------
        name : str
            Score name, without label

        Returns
        -------
        ScoreDescriptor
            Parsed descriptor
        """
        if TAU_PATTERN in name:
            # The charge marker, if any, immediately follows the tau pattern
            pos = name.find(TAU_PATTERN) + len(TAU_PATTERN)
            marker = name[pos] if pos < len(name) else ""
            charge = 0
            if marker == MINUS_MARKER:
                pos += 1
                charge = -1
            elif marker == PLUS_MARKER:
                pos += 1
                charge = 1

            decay_tag = name[pos:]

            return cls(
                name=name,
                flavor=ScoreFlavorEnum.TAU,
                charge=charge,
                decay_tag=decay_tag,
                decay_mode=TauDecayModeEnum.from_tag(decay_tag),
                plus_charge=(TAU_PATTERN + PLUS_MARKER) in name,
            )

        if ELECTRON_PATTERN in name:
            return cls(name, ScoreFlavorEnum.LEPTON, lepton=ELECTRON_PATTERN)

        if MUON_PATTERN in name:
            return cls(name, ScoreFlavorEnum.LEPTON, lepton=MUON_PATTERN)

        return cls(name, ScoreFlavorEnum.JET)

    @property
    def is_electron(self):
        """Whether this is an electron-flavor score."""
        return self.lepton == ELECTRON_PATTERN

    @property
    def is_muon(self):
        """Whether this is a muon-flavor score."""
        return self.lepton == MUON_PATTERN


class ScoreCatalog:
    """Immutable classification of the classifier scores in three buckets.

    Built once from the configured list of score identifiers and shared
    read-only by every event processed afterwards.
    """

    def __init__(self, score_names):
        """Parse and classify the list of score identifiers.

        Parameters
        ----------
        score_names : List[str]
            Ordered list of score identifiers, of the form `label:name`
            or `name`
        """
        descriptors = []
        for score_name in score_names:
            name = strip_label(score_name)
            if SCORE_PATTERN not in name:
                continue

            descriptors.append(ScoreDescriptor.parse(name))

        self._descriptors = tuple(descriptors)
        self.tau = self._bucket(ScoreFlavorEnum.TAU)
        self.lepton = self._bucket(ScoreFlavorEnum.LEPTON)
        self.jet = self._bucket(ScoreFlavorEnum.JET)

        # Report on what was found
        if not len(self._descriptors):
            logger.warning(
                "None of the provided score names is a probability. "
                "All tau, lepton and jet score sums will be zero."
            )
        for desc in self.tau:
            if desc.decay_mode is None:
                logger.debug(
                    "Tau score `%s` has an unknown decay tag `%s`.",
                    desc.name,
                    desc.decay_tag,
                )

    def _bucket(self, flavor):
        return tuple(d for d in self._descriptors if d.flavor == flavor)

    def __len__(self):
        return len(self._descriptors)

    def __iter__(self):
        return iter(self._descriptors)

    def __eq__(self, other):
        if not isinstance(other, ScoreCatalog):
            return NotImplemented

        return self._descriptors == other._descriptors

    def __repr__(self):
        return (
            f"ScoreCatalog(tau={list(self.tau_names)}, "
            f"lepton={list(self.lepton_names)}, jet={list(self.jet_names)})"
        )

    @property
    def num_scores(self):
        """Number of probability scores kept in the catalog."""
        return len(self._descriptors)

    @property
    def names(self):
        """Names of every score kept in the catalog, in input order."""
        return tuple(d.name for d in self._descriptors)

    @property
    def tau_names(self):
        """Names of the tau-flavor scores, in input order."""
        return tuple(d.name for d in self.tau)

    @property
    def lepton_names(self):
        """Names of the lepton-flavor scores, in input order."""
        return tuple(d.name for d in self.lepton)

    @property
    def jet_names(self):
        """Names of the jet-flavor scores, in input order."""
        return tuple(d.name for d in self.jet)
