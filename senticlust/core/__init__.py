"""Core types, registry, and utilities."""

from .types import Document, MergeRecord, KNNParams, ClusteringResult, ExperimentResult
from .registry import Registry, get_registry
from .random import set_seed, get_rng
