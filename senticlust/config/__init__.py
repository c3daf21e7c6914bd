"""Experiment configuration."""

from .schema import (
    DataConfig,
    KNNConfig,
    ClusteringConfig,
    ExperimentConfig,
    load_config,
    validate_config,
)
