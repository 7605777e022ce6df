"""Producer of the hybrid tau collection.

Merges the reconstructed tau candidates of an event with the ParticleNet
scores of its jets. The output collection is made of, in order:
1. One entry per selected jet, in jet order: either the tau matched to the
   jet, with the ParticleNet tags appended, or a new tau seeded by the jet
   if it is tau-like (jets which are neither contribute nothing);
2. Every tau which was not matched to a jet, in tau order, with the
   ParticleNet tags appended and set to the not-computed sentinel.
"""

from dataclasses import dataclass

from tauhybrid.config.errors import ConfigTypeError, ConfigValidationError
from tauhybrid.data import PNetTauIDs
from tauhybrid.utils.globals import CHARGE_WINDOW, NULL_DECAY_MODE
from tauhybrid.utils.logger import logger

from .catalog import ScoreCatalog
from .evaluate import JetEvaluator
from .match import JetSelector, TauMatcher
from .synthesize import TauSynthesizer

__all__ = ["HybridSummary", "HybridTauProducer"]


@dataclass
class HybridSummary:
    """Bookkeeping of how the hybrid tau collection of one event was built.

    Attributes
    ----------
    num_taus : int
        Number of input tau candidates
    num_jets : int
        Number of input jets
    num_rejected : int
        Number of jets which failed the kinematic selection
    num_matched : int
        Number of jets matched to a tau candidate
    num_synthesized : int
        Number of taus built from unmatched jets
    num_not_tau_like : int
        Number of unmatched jets which failed the tau-like selection
    num_leftover : int
        Number of tau candidates which were not matched to any jet
    """

    num_taus: int = 0
    num_jets: int = 0
    num_rejected: int = 0
    num_matched: int = 0
    num_synthesized: int = 0
    num_not_tau_like: int = 0
    num_leftover: int = 0

    @property
    def num_output(self):
        """Size of the output collection."""
        return self.num_matched + self.num_synthesized + self.num_leftover


class HybridTauProducer:
    """Builds the hybrid tau collection of each event.

    The score catalog is built once at construction time and reused
    read-only for every event. No other state survives from one event to
    the next: the tau claims and the running decay mode of an event live in
    the call which processes it, so events may be processed concurrently.

    .. code-block:: yaml

        producer:
          dr_max: 0.4
          jet_pt_min: 20.
          jet_eta_max: 2.5
          pnet_label: <label>
          pnet_score_names: [<label>:probtaup1h0p, ...]
    """

    name = "hybrid_tau"

    # Name of the input data products, can be overridden in the configuration
    _sources = (("taus", "taus"), ("jets", "jets"))

    # Required configuration parameters
    _required = (
        "dr_max",
        "jet_pt_min",
        "jet_eta_max",
        "pnet_label",
        "pnet_score_names",
    )

    def __init__(
        self,
        dr_max,
        jet_pt_min,
        jet_eta_max,
        pnet_label,
        pnet_score_names,
        charge_window=CHARGE_WINDOW,
        sources=None,
        output_key="hybrid_taus",
    ):
        """Initialize the producer.

        Parameters
        ----------
        dr_max : float
            Maximum angular separation between a jet and a matched tau
        jet_pt_min : float
            Minimum transverse momentum of the jets considered (GeV)
        jet_eta_max : float
            Maximum absolute pseudorapidity of the jets considered
        pnet_label : str
            Label which namespaces the ParticleNet scores of the jets
        pnet_score_names : List[str]
            Ordered list of ParticleNet score identifiers
        charge_window : float, default 0.2
            Half-width of the ambiguous region of the positive charge
            probability of jet-seeded taus
        sources : Dict[str, str], optional
            Dictionary which maps `taus` and `jets` onto the name of the
            corresponding collection in the event dictionary
        output_key : str, default 'hybrid_taus'
            Name of the output collection in the event dictionary
        """
        # Store the event dictionary keys
        self.sources = dict(self._sources)
        if sources is not None:
            for key, value in sources.items():
                assert key in self.sources, (
                    "Unexpected data product specified in `sources`: "
                    f"{key}. Should be one of {list(self.sources.keys())}."
                )
                self.sources[key] = value
        self.output_key = output_key

        # Build the score catalog, initialize the processing stages
        self.catalog = ScoreCatalog(pnet_score_names)
        self.selector = JetSelector(jet_pt_min, jet_eta_max)
        self.evaluator = JetEvaluator(self.catalog, pnet_label)
        self.matcher = TauMatcher(dr_max)
        self.synthesizer = TauSynthesizer(charge_window)

        logger.info(
            "Hybrid tau producer: %d tau, %d lepton and %d jet scores "
            "under label `%s`; dR < %g, jet pT >= %g, jet |eta| <= %g.",
            len(self.catalog.tau),
            len(self.catalog.lepton),
            len(self.catalog.jet),
            pnet_label,
            dr_max,
            jet_pt_min,
            jet_eta_max,
        )

    @classmethod
    def from_config(cls, cfg):
        """Builds the producer from a configuration block.

        Parameters
        ----------
        cfg : dict
            Producer configuration block

        Returns
        -------
        HybridTauProducer
            Initialized producer
        """
        if not isinstance(cfg, dict):
            raise ConfigTypeError(
                f"The producer configuration must be a dictionary, "
                f"got {type(cfg).__name__}."
            )

        missing = [k for k in cls._required if k not in cfg]
        if missing:
            raise ConfigValidationError(
                f"The producer configuration is missing parameters: {missing}."
            )

        allowed = (*cls._required, "charge_window", "sources", "output_key")
        unknown = [k for k in cfg if k not in allowed]
        if unknown:
            raise ConfigValidationError(
                f"Unknown producer configuration parameters: {unknown}. "
                f"Must be one of {list(allowed)}."
            )

        if isinstance(cfg["pnet_score_names"], str):
            raise ConfigTypeError(
                "`pnet_score_names` must be a list of score names, not a string."
            )

        return cls(**cfg)

    def __call__(self, data):
        """Builds the hybrid tau collection of one event dictionary.

        Parameters
        ----------
        data : dict
            Dictionary of data products of one event

        Returns
        -------
        dict
            Update to the event dictionary, with the output collection
        """
        taus = data[self.sources["taus"]]
        jets = data[self.sources["jets"]]

        return {self.output_key: self.produce(taus, jets)}

    def produce(self, taus, jets):
        """Builds the hybrid tau collection of one event.

        Parameters
        ----------
        taus : List[TauCandidate]
            Ordered collection of reconstructed tau candidates
        jets : List[Jet]
            Ordered collection of jets with their ParticleNet scores

        Returns
        -------
        List[TauCandidate]
            Ordered collection of hybrid taus
        """
        output, _ = self.build(taus, jets)

        return output

    def build(self, taus, jets):
        """Builds the hybrid tau collection of one event and its summary.

        Parameters
        ----------
        taus : List[TauCandidate]
            Ordered collection of reconstructed tau candidates
        jets : List[Jet]
            Ordered collection of jets with their ParticleNet scores

        Returns
        -------
        List[TauCandidate]
            Ordered collection of hybrid taus
        HybridSummary
            Bookkeeping of how the collection was built
        """
        summary = HybridSummary(num_taus=len(taus), num_jets=len(jets))
        claims = self.matcher.claims(taus)

        # Jet-driven entries: matched taus or jet-seeded taus. A jet which
        # does not assign a decay mode keeps the one of the previous jet.
        output = []
        decay_mode = NULL_DECAY_MODE
        for jet in jets:
            if not self.selector(jet):
                summary.num_rejected += 1
                continue

            evaluation = self.evaluator(jet, decay_mode)
            decay_mode = evaluation.tau_ids.decay_mode

            index = claims.match(jet)
            if index is not None:
                tau = taus[index].extended(evaluation.tau_ids.as_tau_ids())
                tau.index = index
                output.append(tau)
                summary.num_matched += 1
                continue

            tau = self.synthesizer(jet, evaluation)
            if tau is None:
                summary.num_not_tau_like += 1
                continue

            output.append(tau)
            summary.num_synthesized += 1

        # Taus which were not matched to any jet
        null_tau_ids = PNetTauIDs.null().as_tau_ids()
        for index in claims.unclaimed:
            tau = taus[index].extended(null_tau_ids)
            tau.index = index
            output.append(tau)
            summary.num_leftover += 1

        logger.debug(
            "Hybrid taus: %d matched, %d from jets, %d unmatched "
            "(%d/%d jets rejected, %d not tau-like).",
            summary.num_matched,
            summary.num_synthesized,
            summary.num_leftover,
            summary.num_rejected,
            summary.num_jets,
            summary.num_not_tau_like,
        )

        return output, summary
