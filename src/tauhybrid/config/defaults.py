"""Default configuration of the hybrid tau producer.

The score names follow the AK4 PUPPI ParticleNet tagger: one tau-flavor
score per (charge, decay mode) pair, electron and muon scores, and the
b, c, light-quark and gluon jet scores. The regression outputs (`ptcorr`,
`ptreshigh`, `ptreslow`) are listed too; they are not probabilities and
are discarded by the score catalog.
"""

from copy import deepcopy

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_PNET_LABEL",
    "DEFAULT_PNET_SCORE_NAMES",
    "default_config",
]

DEFAULT_PNET_LABEL = "pfParticleNetFromMiniAODAK4PuppiCentralJetTags"

DEFAULT_PNET_SCORE_NAMES = [
    f"{DEFAULT_PNET_LABEL}:{name}"
    for name in (
        "probmu",
        "probele",
        "probtaup1h0p",
        "probtaup1h1p",
        "probtaup1h2p",
        "probtaup3h0p",
        "probtaup3h1p",
        "probtaum1h0p",
        "probtaum1h1p",
        "probtaum1h2p",
        "probtaum3h0p",
        "probtaum3h1p",
        "probb",
        "probc",
        "probuds",
        "probg",
        "ptcorr",
        "ptreshigh",
        "ptreslow",
    )
]

DEFAULT_CONFIG = {
    "producer": {
        "dr_max": 0.4,
        "jet_pt_min": 20.0,
        "jet_eta_max": 2.5,
        "pnet_label": DEFAULT_PNET_LABEL,
        "pnet_score_names": DEFAULT_PNET_SCORE_NAMES,
        "charge_window": 0.2,
    }
}


def default_config():
    """Returns an independant copy of the default configuration.

    Returns
    -------
    dict
        Default configuration dictionary
    """
    return deepcopy(DEFAULT_CONFIG)
