"""Tests for the jet selection and the jet to tau matcher."""

import pytest

from tauhybrid.data import Jet
from tauhybrid.hybrid import JetSelector, TauClaims, TauMatcher


class TestJetSelector:
    """Test the jet kinematic selection."""

    @pytest.mark.parametrize(
        "pt, eta, passed",
        [
            (50.0, 0.0, True),
            (20.0, 0.0, True),
            (19.9, 0.0, False),
            (50.0, 2.5, True),
            (50.0, -2.5, True),
            (50.0, 2.6, False),
            (50.0, -2.6, False),
        ],
    )
    def test_selection(self, pt, eta, passed):
        """Test that boundary values pass the selection."""
        selector = JetSelector(pt_min=20.0, eta_max=2.5)
        assert selector(Jet(pt=pt, eta=eta)) == passed


class TestTauMatcher:
    """Test the greedy first-match policy."""

    def test_no_taus(self):
        """Test that nothing matches in an event without taus."""
        claims = TauMatcher(0.4).claims([])
        assert isinstance(claims, TauClaims)
        assert claims.num_taus == 0
        assert claims.match(Jet(pt=50.0)) is None
        assert claims.claimed == []
        assert claims.unclaimed == []

    def test_first_not_nearest(self, make_tau):
        """Test that the first tau within the radius wins, not the nearest."""
        claims = TauMatcher(0.4).claims([make_tau(eta=0.3), make_tau(eta=0.05)])
        assert claims.match(Jet(pt=50.0, eta=0.0)) == 0
        assert claims.match(Jet(pt=50.0, eta=0.0)) == 1
        assert claims.match(Jet(pt=50.0, eta=0.0)) is None
        assert claims.claimed == [0, 1]

    def test_strict_radius(self, make_tau):
        """Test that a tau exactly at the matching radius is not matched."""
        claims = TauMatcher(0.5).claims([make_tau(eta=0.5, phi=0.0)])
        assert claims.match(Jet(pt=50.0, eta=0.0, phi=0.0)) is None
        assert claims.available(0)

    def test_claim_once(self, make_tau):
        """Test that a claimed tau is never matched again in the event."""
        claims = TauMatcher(0.4).claims([make_tau(phi=3.1), make_tau(phi=1.0)])
        assert claims.match(Jet(pt=50.0, phi=-3.1)) == 0
        assert not claims.available(0)
        assert claims.match(Jet(pt=50.0, phi=-3.1)) is None
        assert claims.unclaimed == [1]

    def test_claim_order(self, make_tau):
        """Test that claimed indexes are reported in claim order."""
        claims = TauMatcher(0.1).claims([make_tau(eta=-1.0), make_tau(eta=1.0)])
        assert claims.match(Jet(pt=50.0, eta=1.0)) == 1
        assert claims.match(Jet(pt=50.0, eta=-1.0)) == 0
        assert claims.claimed == [1, 0]
        assert claims.unclaimed == []

    def test_events_independent(self, make_tau):
        """Test that the claims of two events opened together do not mix."""
        matcher = TauMatcher(0.4)
        first = matcher.claims([make_tau()])
        second = matcher.claims([make_tau(eta=2.0), make_tau()])

        assert first.match(Jet(pt=50.0)) == 0
        assert second.available(0) and second.available(1)
        assert second.match(Jet(pt=50.0)) == 1
        assert first.claimed == [0]
        assert second.claimed == [1]
        assert second.unclaimed == [0]
