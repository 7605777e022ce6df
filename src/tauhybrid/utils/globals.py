"""Global constants shared across the package."""

# Sentinel value of an identification tag which was not computed
NULL_TAU_ID = -1.0

# Decay mode code of a tau with no valid decay mode
NULL_DECAY_MODE = -1

# Map from ParticleNet decay tags onto decay mode codes
TAG_TO_DECAY_MODE = {
    "1h0p": 0,
    "1h1or2p": 1,
    "1h1p": 1,
    "1h2p": 2,
    "3h0p": 10,
    "3h1p": 11,
}

# Substring patterns used to classify the raw score names
SCORE_PATTERN = "prob"
TAU_PATTERN = "tau"
ELECTRON_PATTERN = "ele"
MUON_PATTERN = "mu"

# Charge markers which may immediately follow the tau pattern
MINUS_MARKER = "m"
PLUS_MARKER = "p"

# Names of the ParticleNet-derived identification tags, in storage order
PNET_DM_ID = "byPNetDecayMode"
PNET_VSJET_ID = "byPNetVSjetraw"
PNET_VSE_ID = "byPNetVSeraw"
PNET_VSMU_ID = "byPNetVSmuraw"
PNET_TAU_IDS = (PNET_DM_ID, PNET_VSJET_ID, PNET_VSE_ID, PNET_VSMU_ID)

# Name of the placeholder identification tag of jet-seeded taus
DM_FINDING_ID = "decayModeFindingNewDMs"

# Half-width of the ambiguous region around a 50% positive charge probability
CHARGE_WINDOW = 0.2
