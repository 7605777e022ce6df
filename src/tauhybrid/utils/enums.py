"""Module which contains enumerated variables shared across the project."""

from enum import Enum, IntEnum

from .globals import NULL_DECAY_MODE, TAG_TO_DECAY_MODE

__all__ = ["TauDecayModeEnum", "ScoreFlavorEnum"]


class TauDecayModeEnum(IntEnum):
    """Enumerates the reconstructed hadronic tau decay modes."""

    NULL = NULL_DECAY_MODE
    ONE_PRONG_0PI0 = TAG_TO_DECAY_MODE["1h0p"]
    ONE_PRONG_1PI0 = TAG_TO_DECAY_MODE["1h1p"]
    ONE_PRONG_2PI0 = TAG_TO_DECAY_MODE["1h2p"]
    THREE_PRONG_0PI0 = TAG_TO_DECAY_MODE["3h0p"]
    THREE_PRONG_1PI0 = TAG_TO_DECAY_MODE["3h1p"]

    @classmethod
    def from_tag(cls, tag):
        """Parses a ParticleNet decay tag.

        Parameters
        ----------
        tag : str
            Decay tag, e.g. `1h0p`

        Returns
        -------
        TauDecayModeEnum, optional
            Decay mode, `None` if the tag is not known
        """
        if tag not in TAG_TO_DECAY_MODE:
            return None

        return cls(TAG_TO_DECAY_MODE[tag])


class ScoreFlavorEnum(str, Enum):
    """Enumerates the semantic buckets of the classifier scores."""

    TAU = "tau"
    LEPTON = "lepton"
    JET = "jet"
