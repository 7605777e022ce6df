"""Top-level module of the hybrid tau reconstruction package.

Merges reconstructed tau candidates with ParticleNet jet tau-tagging scores
into a single hybrid tau collection per event.
"""

# Import main workflow entry point
from .driver import Driver
from .version import __version__

# Import the per-event producer and its score catalog
from .hybrid import HybridTauProducer, ScoreCatalog

# Import commonly used data structures
from .data import Jet, PNetTauIDs, TauCandidate, TauID
