from __future__ import annotations

from tierwise.domain.models import ExfiltrationVectors


def count_vectors(vectors: ExfiltrationVectors) -> int:
    # Count active exfiltration capabilities; always within [0, 7].
    return sum(1 for active in vectors.flags().values() if active)
