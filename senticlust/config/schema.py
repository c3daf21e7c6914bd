"""Configuration schema and validation."""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
import yaml

VOTE_TYPES = ("majority", "weighted")


@dataclass
class DataConfig:
    train_path: str = None
    test_path: Optional[str] = None
    text_column: str = "text"
    label_column: Optional[str] = "label"
    test_ratio: float = 0.0
    clean: bool = True


@dataclass
class KNNConfig:
    k: int = 3
    vote: str = "majority"
    distance: str = "default"


@dataclass
class ClusteringConfig:
    method: str = "average"
    distance: str = "default"
    n_clusters: int = 3
    cut: str = "subtree"
    max_documents: int = 500


@dataclass
class ExperimentConfig:
    name: str = "unnamed"
    seed: int = 42
    data: DataConfig = field(default_factory=DataConfig)
    knn: Optional[KNNConfig] = None
    clustering: Optional[ClusteringConfig] = None

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ExperimentConfig":
        """Build a config from a raw dict; absent sections stay disabled."""
        knn = config.get("knn")
        clustering = config.get("clustering")
        return cls(
            name=config.get("name", "unnamed"),
            seed=config.get("seed", 42),
            data=DataConfig(**config.get("data", {})),
            knn=KNNConfig(**knn) if knn is not None else None,
            clustering=ClusteringConfig(**clustering) if clustering is not None else None,
        )


def load_config(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate configuration, return list of errors."""
    from ..clustering import CUT_MODES

    errors = []

    if "data" not in config:
        errors.append("Missing 'data' section")
    elif not config["data"].get("train_path"):
        errors.append("Missing 'data.train_path'")
    else:
        ratio = config["data"].get("test_ratio", 0.0)
        if not isinstance(ratio, (int, float)) or not 0.0 <= ratio < 1.0:
            errors.append("'data.test_ratio' must be a number in [0, 1)")

    if "knn" not in config and "clustering" not in config:
        errors.append("Need at least one of 'knn' or 'clustering' sections")

    knn = config.get("knn")
    if knn is not None:
        k = knn.get("k", 3)
        if not isinstance(k, int) or isinstance(k, bool) or k < 1:
            errors.append("'knn.k' must be a positive integer")
        if knn.get("vote", "majority") not in VOTE_TYPES:
            errors.append(f"'knn.vote' must be one of {list(VOTE_TYPES)}")

    clustering = config.get("clustering")
    if clustering is not None:
        n_clusters = clustering.get("n_clusters", 3)
        if not isinstance(n_clusters, int) or isinstance(n_clusters, bool) or n_clusters < 2:
            errors.append("'clustering.n_clusters' must be an integer >= 2")
        if clustering.get("cut", "subtree") not in CUT_MODES:
            errors.append(f"'clustering.cut' must be one of {list(CUT_MODES)}")
        max_docs = clustering.get("max_documents", 500)
        if not isinstance(max_docs, int) or max_docs < 2:
            errors.append("'clustering.max_documents' must be an integer >= 2")

    return errors
