# Similarity weights (sum to 1.0)
WEIGHT_CATEGORY = 0.4
WEIGHT_PRICE = 0.3
WEIGHT_TAGS = 0.3

# Default result sizes
DEFAULT_RECOMMENDATION_LIMIT = 10
DEFAULT_TRENDING_LIMIT = 5
DEFAULT_STRATEGY_LIMIT = 5

# Neighbour users scanned by collaborative filtering
SIMILAR_USERS_LIMIT = 10

# Strategy names (blend priority order, highest first)
STRATEGY_COLLABORATIVE = "collaborative"
STRATEGY_CONTENT_BASED = "content_based"
STRATEGY_TRENDING = "trending"

BLEND_PRIORITY = (STRATEGY_COLLABORATIVE, STRATEGY_CONTENT_BASED, STRATEGY_TRENDING)
