"""Tests for the jet data module."""

import pytest

from tauhybrid.data import Jet, MissingScoreError


class TestJet:
    """Test the jet data class and its score lookup."""

    def test_default(self):
        """Test Jet creation with default values."""
        jet = Jet()
        assert jet.scores == {}
        assert jet.pt == 0.0

    def test_from_scores_label(self):
        """Test that score names are prefixed with the label."""
        jet = Jet.from_scores(30.0, 1.0, 2.0, label="pnet", probele=0.2)
        assert jet.scores == {"pnet:probele": 0.2}
        assert jet.score("pnet", "probele") == 0.2
        assert jet.mass == 0.0

    def test_from_scores_no_label(self):
        """Test that pre-labelled score keys are kept as is."""
        jet = Jet.from_scores(30.0, 1.0, 2.0, **{"pnet:probmu": 0.1})
        assert jet.score("pnet", "probmu") == 0.1

    def test_missing_score(self):
        """Test that a missing score fails loudly."""
        jet = Jet.from_scores(30.0, 1.0, 2.0, label="pnet", probele=0.2)
        with pytest.raises(MissingScoreError):
            jet.score("pnet", "probmu")
        with pytest.raises(LookupError):
            jet.score("other", "probele")
