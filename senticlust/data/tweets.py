"""
Tweet loading, cleaning, and train/test splitting.

CSV files are read with pandas. Column detection is explicit: the caller
names the text and label columns.
"""

import re
from typing import List, Optional, Sequence, Tuple
import pandas as pd

from ..core.types import Document
from ..core.random import get_rng

_MENTION = re.compile(r"@\w+")
_HASHTAG = re.compile(r"#\w+")
_RETWEET = re.compile(r"\bRT\b:?\s?")
_URL = re.compile(r"https?://\S+")
_SPACES = re.compile(r"\s{2,}")


def clean_tweet(text: str) -> str:
    """Strip mentions, hashtags, RT markers and URLs; collapse whitespace."""
    clean = _MENTION.sub("", text)
    clean = _HASHTAG.sub("", clean)
    clean = _RETWEET.sub("", clean)
    clean = _URL.sub("", clean)
    clean = _SPACES.sub(" ", clean)
    return clean.strip()


def load_documents(
    path: str,
    text_column: str = "text",
    label_column: Optional[str] = "label",
    clean: bool = True,
    start_id: int = 0,
) -> List[Document]:
    """
    Load documents from a CSV file.

    Args:
        path: CSV file path.
        text_column: Column holding the tweet text.
        label_column: Column holding the sentiment label, if any.
        clean: Apply clean_tweet to build the normalized text.
        start_id: First document id.

    Returns:
        Documents in file order. Empty labels become None; cell text
        such as "NA" or "null" is kept verbatim.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    if text_column not in df.columns:
        raise KeyError(
            f"Text column '{text_column}' not found in {path}. "
            f"Available: {list(df.columns)}"
        )

    has_labels = label_column is not None and label_column in df.columns

    documents = []
    for offset, record in enumerate(df.to_dict(orient="records")):
        text = record.get(text_column) or ""

        label = None
        if has_labels:
            value = (record.get(label_column) or "").strip()
            if value:
                label = value

        documents.append(Document(
            id=start_id + offset,
            text=text,
            cleaned=clean_tweet(text) if clean else text,
            label=label,
        ))

    return documents


def split_documents(
    documents: Sequence[Document],
    test_ratio: float = 0.3
) -> Tuple[List[Document], List[Document]]:
    """
    Shuffle and split documents into train and test sets.

    Uses the global seeded generator from core.random.
    """
    if not 0.0 <= test_ratio < 1.0:
        raise ValueError(f"test_ratio must be in [0, 1), got {test_ratio}")

    order = get_rng().permutation(len(documents))
    n_test = int(len(documents) * test_ratio)

    test = [documents[i] for i in order[:n_test]]
    train = [documents[i] for i in order[n_test:]]
    return train, test
