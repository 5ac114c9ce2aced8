"""Embedding similarity for the generic matcher.

Key formula for the match score:
    score = (cosine_similarity + 1) / 2

This maps cosine similarity from [-1, 1] to [0, 1]:
| Cosine | Score | Interpretation |
|--------|-------|----------------|
| 1.0    | 1.00  | Same meaning   |
| 0.0    | 0.50  | Unrelated      |
| -1.0   | 0.00  | Opposite       |
"""

import math


def cosine_similarity(vec1: list[float], vec2: list[float]) -> float:
    """Calculate cosine similarity between two vectors.

    Args:
        vec1: First embedding vector.
        vec2: Second embedding vector.

    Returns:
        Similarity in range [-1.0, 1.0]. Returns 0.0 when either vector
        has zero magnitude.

    Raises:
        ValueError: If vectors have different lengths, are empty, or
            contain NaN/Inf.
    """
    if len(vec1) != len(vec2):
        msg = f"Embeddings must have the same dimensions: {len(vec1)} vs {len(vec2)}"
        raise ValueError(msg)

    if len(vec1) == 0:
        msg = "Embeddings cannot be empty"
        raise ValueError(msg)

    if not all(math.isfinite(x) for x in vec1) or not all(
        math.isfinite(x) for x in vec2
    ):
        msg = "Embeddings must contain finite values (no NaN or Inf)"
        raise ValueError(msg)

    dot_product = sum(a * b for a, b in zip(vec1, vec2, strict=True))
    norm1 = math.sqrt(sum(a * a for a in vec1))
    norm2 = math.sqrt(sum(b * b for b in vec2))

    # Zero vector has no direction; tiny norms can also underflow to 0
    denominator = norm1 * norm2
    if denominator == 0:
        return 0.0

    result = dot_product / denominator

    # Floating point can overshoot, e.g. 1.0000000002
    return max(-1.0, min(1.0, result))


def normalize_similarity(cosine: float) -> float:
    """Map a cosine similarity from [-1, 1] onto a match score in [0, 1]."""
    return (cosine + 1) / 2
