"""Sentiment classifiers."""

from .base import BaseClassifier
from .knn import KNNClassifier, knn_classify, find_neighbors, DEFAULT_LABEL, WEIGHT_EPSILON
