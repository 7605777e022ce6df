"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import pytest

from tauhybrid.data import Jet, TauCandidate

LABEL = "reco"


@pytest.fixture(name="label")
def fixture_label():
    """Label which namespaces the classifier scores in the tests."""
    return LABEL


@pytest.fixture(name="score_names")
def fixture_score_names():
    """Minimal list of score identifiers with one score of each flavor."""
    return [
        f"{LABEL}:probtaup1h0p",
        f"{LABEL}:probtaum3h1p",
        f"{LABEL}:probele",
        f"{LABEL}:probjet",
    ]


@pytest.fixture(name="full_score_names")
def fixture_full_score_names():
    """Complete list of score identifiers, including regression outputs."""
    names = ["probmu", "probele"]
    for charge in ("p", "m"):
        for tag in ("1h0p", "1h1p", "1h2p", "3h0p", "3h1p"):
            names.append(f"probtau{charge}{tag}")
    names += ["probb", "probc", "probuds", "probg", "ptcorr"]

    return [f"{LABEL}:{name}" for name in names]


@pytest.fixture(name="make_jet")
def fixture_make_jet():
    """Factory which builds a jet with scores for the minimal score list.

    Scores which are not specified are set to 0.
    """

    def make_jet(
        pt=50.0,
        eta=0.0,
        phi=0.0,
        mass=5.0,
        probtaup1h0p=0.0,
        probtaum3h1p=0.0,
        probele=0.0,
        probjet=0.0,
    ):
        return Jet.from_scores(
            pt,
            eta,
            phi,
            mass,
            label=LABEL,
            probtaup1h0p=probtaup1h0p,
            probtaum3h1p=probtaum3h1p,
            probele=probele,
            probjet=probjet,
        )

    return make_jet


@pytest.fixture(name="make_tau")
def fixture_make_tau():
    """Factory which builds a reconstructed tau with two baseline tags."""

    def make_tau(pt=40.0, eta=0.0, phi=0.0, charge=1, decay_mode=0):
        return TauCandidate(
            pt=pt,
            eta=eta,
            phi=phi,
            mass=0.8,
            charge=charge,
            decay_mode=decay_mode,
            tau_ids=[
                ("decayModeFindingNewDMs", 1.0),
                ("byDeepTau2018v2p5VSjetraw", 0.9),
            ],
        )

    return make_tau
