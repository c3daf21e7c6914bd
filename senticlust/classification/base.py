"""Base classifier interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..core.types import Document, Label


class BaseClassifier(ABC):
    """
    Abstract base class for label classifiers.

    Classifiers are fitted on labelled documents and predict a label
    for each normalized text.
    """

    def __init__(self, name: str, **kwargs):
        self.name = name
        self.params = kwargs
        self._is_fitted = False

    @abstractmethod
    def fit(self, documents: Sequence[Document]) -> "BaseClassifier":
        """
        Store or learn from labelled reference documents.

        Args:
            documents: Documents; unlabelled ones are ignored.

        Returns:
            self
        """
        raise NotImplementedError

    @abstractmethod
    def predict_one(self, text: str) -> Label:
        """Predict the label of a single normalized text."""
        raise NotImplementedError

    def predict(self, texts: Sequence[str]) -> List[Label]:
        """Predict labels for several normalized texts."""
        return [self.predict_one(text) for text in texts]

    def predict_documents(self, documents: Sequence[Document]) -> List[Label]:
        """Predict labels for documents using their normalized text."""
        return self.predict([doc.normalized for doc in documents])

    @property
    def is_fitted(self) -> bool:
        return self._is_fitted
