"""Hybrid tau reconstruction from tau candidates and jet tagger scores.

The processing of one event flows strictly forward:
- `ScoreCatalog`: classifies the tagger score names (built once)
- `JetSelector`: applies the jet kinematic selection
- `JetEvaluator`: derives the identification tags of each jet
- `TauMatcher`: pairs each jet with the first available nearby tau
- `TauClaims`: tracks which taus of one event were already claimed
- `TauSynthesizer`: builds taus from unmatched tau-like jets
- `HybridTauProducer`: assembles the output collection
"""

from .catalog import ScoreCatalog, ScoreDescriptor
from .evaluate import JetEvaluation, JetEvaluator
from .match import JetSelector, TauClaims, TauMatcher
from .producer import HybridSummary, HybridTauProducer
from .synthesize import TauSynthesizer
