# Score weights (must sum to 1.0)
WEIGHT_UPTIME = 0.40
WEIGHT_PROPOSAL_INCLUSION = 0.20
WEIGHT_ATTESTATION_INCLUSION = 0.20
WEIGHT_SLASHING_PREVENTION = 0.10
WEIGHT_BALANCE_GROWTH = 0.10

# Size of the validator set used for slashing prevention
DEFAULT_TOTAL_VALIDATORS = 1000

# Sample validator scored when no record is given
SAMPLE_BLOCKS_SIGNED = 950
SAMPLE_BLOCKS_ASSIGNED = 1000
SAMPLE_BLOCKS_PROPOSED = 100
SAMPLE_BLOCKS_PROPOSED_INCLUDED = 98
SAMPLE_ATTESTATIONS_CREATED = 1200
SAMPLE_ATTESTATIONS_INCLUDED = 1180
SAMPLE_SLASHINGS = 0
SAMPLE_INITIAL_BALANCE = 32.0  # ETH
SAMPLE_CURRENT_BALANCE = 34.0  # ETH

SCORE_LINE_TEMPLATE = "Ethereum Validator Score: {score}"
