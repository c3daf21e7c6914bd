"""Tweet loading and cleaning."""

from .tweets import clean_tweet, load_documents, split_documents
