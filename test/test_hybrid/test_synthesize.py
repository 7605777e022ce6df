"""Tests for the jet-seeded tau synthesizer."""

import pytest

from tauhybrid.hybrid import JetEvaluator, ScoreCatalog, TauSynthesizer


@pytest.fixture(name="evaluator")
def fixture_evaluator(score_names, label):
    """Evaluator of the minimal score list."""
    return JetEvaluator(ScoreCatalog(score_names), label)


class TestTauSynthesizer:
    """Test the construction of taus from unmatched jets."""

    def test_tau_like_jet(self, evaluator, make_jet):
        """Test that a tau-like jet yields a candidate with its kinematics."""
        jet = make_jet(
            pt=50.0,
            eta=1.2,
            phi=-0.7,
            mass=3.0,
            probtaup1h0p=0.6,
            probtaum3h1p=0.1,
            probele=0.1,
            probjet=0.2,
        )
        tau = TauSynthesizer()(jet, evaluator(jet))

        assert tau is not None
        assert tau.is_from_jet
        assert tau.index == -1
        assert (tau.pt, tau.eta, tau.phi, tau.mass) == (50.0, 1.2, -0.7, 3.0)
        assert tau.charge == 1
        assert tau.decay_mode == -1
        assert tau.tau_id_names == [
            "decayModeFindingNewDMs",
            "byPNetDecayMode",
            "byPNetVSjetraw",
            "byPNetVSeraw",
            "byPNetVSmuraw",
        ]
        assert tau.tau_id("decayModeFindingNewDMs") == -1.0
        assert tau.tau_id("byPNetDecayMode") == 0.0
        assert tau.tau_id("byPNetVSjetraw") == pytest.approx(0.7 / 0.9)

    def test_not_tau_best(self, evaluator, make_jet):
        """Test that a jet whose best score is not a tau is dropped."""
        jet = make_jet(probtaup1h0p=0.2, probtaum3h1p=0.1, probjet=0.7)
        assert TauSynthesizer()(jet, evaluator(jet)) is None

    def test_ambiguous_charge(self, evaluator, make_jet):
        """Test that a jet with an ambiguous charge is dropped."""
        jet = make_jet(probtaup1h0p=0.4, probtaum3h1p=0.35, probjet=0.25)
        synthesizer = TauSynthesizer()
        assert not synthesizer.accept(evaluator(jet))
        assert synthesizer(jet, evaluator(jet)) is None

    def test_window(self, evaluator, make_jet):
        """Test that the ambiguity window is configurable."""
        jet = make_jet(probtaup1h0p=0.4, probtaum3h1p=0.35, probjet=0.25)
        tau = TauSynthesizer(charge_window=0.0)(jet, evaluator(jet))
        assert tau is not None
        assert tau.charge == 1

    def test_invalid_window(self):
        """Test that a window outside of [0, 0.5] is refused."""
        with pytest.raises(AssertionError):
            TauSynthesizer(charge_window=0.6)
