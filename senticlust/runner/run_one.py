"""Run a single experiment."""

import os
import time
import json
from datetime import datetime
from typing import Dict, Any, List, Tuple
import pandas as pd

from ..core.types import Document, ExperimentResult
from ..core.registry import get_registry
from ..core.random import set_seed
from ..config.schema import ExperimentConfig
from ..data import load_documents, split_documents
from ..metrics import (
    compute_classification_metrics,
    compute_clustering_metrics,
    run_sanity_checks,
)


def _load_splits(cfg: ExperimentConfig) -> Tuple[List[Document], List[Document]]:
    data = cfg.data
    train = load_documents(data.train_path, data.text_column, data.label_column, data.clean)

    if data.test_path:
        test = load_documents(
            data.test_path, data.text_column, data.label_column, data.clean,
            start_id=len(train),
        )
    elif data.test_ratio > 0:
        train, test = split_documents(train, data.test_ratio)
    else:
        test = []

    return train, test


def _run_classification(
    cfg: ExperimentConfig,
    train: List[Document],
    test: List[Document],
    output_dir: str,
    verbose: bool
) -> Dict[str, Any]:
    classifier = get_registry("classifiers").create(
        "knn", k=cfg.knn.k, vote=cfg.knn.vote, distance=cfg.knn.distance
    )
    classifier.fit(train)

    if verbose:
        print(f"  KNN reference set: {len(classifier.reference)} labelled documents")

    if not test:
        if verbose:
            print("  No test documents, skipping classification")
        return {}

    predictions = classifier.predict_documents(test)

    if output_dir:
        pd.DataFrame({
            "id": [doc.id for doc in test],
            "text": [doc.text for doc in test],
            "label": [doc.label for doc in test],
            "predicted_label": predictions,
        }).to_csv(os.path.join(output_dir, "predictions.csv"), index=False)

    labelled = [(doc.label, pred) for doc, pred in zip(test, predictions) if doc.is_labeled]
    if not labelled:
        if verbose:
            print("  Test documents carry no labels, skipping classification metrics")
        return {"n_predicted": len(predictions)}

    metrics = compute_classification_metrics(
        [label for label, _ in labelled],
        [pred for _, pred in labelled],
    )
    metrics["n_predicted"] = len(predictions)
    return metrics


def _run_clustering(
    cfg: ExperimentConfig,
    documents: List[Document],
    output_dir: str,
    verbose: bool
) -> Tuple[Dict[str, Any], Dict[str, bool]]:
    params = cfg.clustering
    documents = documents[:params.max_documents]

    if len(documents) < 2:
        if verbose:
            print("  Need at least 2 documents to cluster, skipping clustering")
        return {}, {}

    clusterer = get_registry("clusterers").create(
        "hac",
        method=params.method,
        distance=params.distance,
        n_clusters=params.n_clusters,
        cut=params.cut,
    )

    if verbose:
        print(f"  Clustering {len(documents)} documents ({params.method} linkage, {params.distance} distance)")

    result = clusterer.cluster([doc.normalized for doc in documents])

    if output_dir:
        pd.DataFrame(result.dendrogram_rows()).to_csv(
            os.path.join(output_dir, "dendrogram.csv"), index=False
        )
        pd.DataFrame({
            "id": [doc.id for doc in documents],
            "text": [doc.text for doc in documents],
            "label": [doc.label for doc in documents],
            "cluster": result.assignments,
        }).to_csv(os.path.join(output_dir, "assignments.csv"), index=False)

    labelled = [i for i, doc in enumerate(documents) if doc.is_labeled]
    labels = [documents[i].label for i in labelled]

    sanity = run_sanity_checks(
        distance_matrix=result.distance_matrix,
        dendrogram=result.dendrogram,
        assignments=result.assignments,
        n_clusters=params.n_clusters,
        labels=labels,
    )

    if not labelled:
        if verbose:
            print("  No labelled documents, skipping clustering evaluation")
        return {"n_clusters": result.n_clusters, "n_documents": len(documents)}, sanity

    metrics = compute_clustering_metrics(
        [result.assignments[i] for i in labelled], labels
    )
    metrics["n_clusters_total"] = result.n_clusters
    return metrics, sanity


def run_experiment(
    config: Dict[str, Any],
    output_dir: str = None,
    verbose: bool = True
) -> ExperimentResult:
    """
    Run a single experiment from configuration.

    Args:
        config: Experiment configuration dict.
        output_dir: Directory to save results.
        verbose: Print progress.

    Returns:
        ExperimentResult with all metrics.
    """
    cfg = ExperimentConfig.from_dict(config)
    set_seed(cfg.seed)

    start_time = time.time()

    if verbose:
        print(f"Running experiment: {cfg.name}")

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    train, test = _load_splits(cfg)

    if verbose:
        print(f"  Train documents: {len(train)}, Test documents: {len(test)}")

    classification = {}
    if cfg.knn is not None:
        classification = _run_classification(cfg, train, test, output_dir, verbose)

    clustering, sanity = {}, {}
    if cfg.clustering is not None:
        clustering, sanity = _run_clustering(cfg, train, output_dir, verbose)

    elapsed = time.time() - start_time

    result = ExperimentResult(
        classification=classification,
        clustering=clustering,
        sanity_checks=sanity,
        metadata={
            "config": config,
            "elapsed_seconds": elapsed,
            "timestamp": datetime.now().isoformat(),
            "n_train": len(train),
            "n_test": len(test),
        }
    )

    if verbose:
        print(f"\nResults:")
        if "accuracy" in classification:
            print(f"  KNN accuracy: {classification['accuracy']:.4f}")
            print(f"  KNN macro F1: {classification['macro_f1']:.4f}")
        if "accuracy" in clustering:
            print(f"  Clustering accuracy: {clustering['accuracy']:.4f}")
            print(f"  Rand Index: {clustering['rand_index']:.4f}")
        print(f"  Time: {elapsed:.1f}s")
        if sanity:
            print(f"  Sanity checks passed: {sanity.get('all_passed', False)}")

    if output_dir:
        with open(os.path.join(output_dir, "results.json"), "w") as f:
            json.dump(result.to_dict(), f, indent=2, default=str)

    return result
