"""Data structures of the hybrid tau reconstruction.

- `TauCandidate`: reconstructed tau with its identification tags
- `TauID`: one named identification tag
- `Jet`: reconstructed jet with its bank of classifier scores
- `PNetTauIDs`: identification tags derived from the classifier scores
"""

from .jet import Jet, MissingScoreError
from .tau import TauCandidate, TauID
from .tauid import PNetTauIDs
