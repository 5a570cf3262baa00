from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ISentimentScorer(Protocol):
    """Scores review text when upstream enrichment left no sentiment."""

    def score(self, text: str) -> Optional[float]:
        """Return a score in [-1, 1], or None when the text gives no signal."""
        ...


__all__ = ["ISentimentScorer"]
