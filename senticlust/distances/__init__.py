"""Distance metrics between normalized texts."""

from .base import tokenize, get_distance_function, pairwise_distances, condensed
from .token import default_distance, jaccard_distance, cosine_distance
from .edit import levenshtein_distance
