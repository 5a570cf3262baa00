"""Keyword frequency across reviews.

Upstream keyword metadata wins when a review has it; otherwise the review
text is tokenized.
"""

import re
from collections import Counter
from typing import AbstractSet, Iterable, Optional, Sequence

from internal.review.type import Review
from .constant import DEFAULT_KEYWORD_LIMIT, MIN_TOKEN_LENGTH, STOP_WORDS
from .type import KeywordCount

_PUNCTUATION = re.compile(r"[^\w\s]")


def tokenize(text: Optional[str], stop_words: AbstractSet[str] = STOP_WORDS) -> list[str]:
    if not text:
        return []
    cleaned = _PUNCTUATION.sub("", text.lower())
    return [
        token
        for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH
        and token not in stop_words
        and not token.isdigit()
    ]


def keywords_for_review(
    review: Review, stop_words: AbstractSet[str] = STOP_WORDS
) -> list[str]:
    if review.metadata.keywords:
        normalized = (k.strip().lower() for k in review.metadata.keywords)
        return [k for k in normalized if k]
    return tokenize(review.text, stop_words)


def count_keywords(keywords: Iterable[str], limit: int) -> list[KeywordCount]:
    """Rank by count, ties keep first-seen order."""
    counter = Counter(keywords)
    return [KeywordCount(keyword=k, count=c) for k, c in counter.most_common(limit)]


def extract_keywords(
    reviews: Sequence[Review],
    limit: int = DEFAULT_KEYWORD_LIMIT,
    stop_words: AbstractSet[str] = STOP_WORDS,
) -> list[KeywordCount]:
    if limit <= 0:
        return []
    return count_keywords(
        (keyword for review in reviews for keyword in keywords_for_review(review, stop_words)),
        limit,
    )


__all__ = [
    "tokenize",
    "keywords_for_review",
    "count_keywords",
    "extract_keywords",
]
