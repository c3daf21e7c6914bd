"""Hierarchical clustering and flat cluster extraction."""

from .base import BaseClusterer
from .hac import HACClusterer, hierarchical_clustering, LINKAGE_METHODS
from .extract import form_clusters, CUT_MODES
