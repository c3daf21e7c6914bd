"""
senticlust: sentiment classification and clustering for short texts

Provides distance metrics, a k-nearest-neighbour classifier, agglomerative
hierarchical clustering, flat cluster extraction, and evaluation metrics.
"""

__version__ = "0.1.0"

from .core.types import Document, MergeRecord, KNNParams, ClusteringResult, ExperimentResult
from .core.registry import Registry, get_registry

from . import distances
from . import classification
from . import clustering
from . import metrics
