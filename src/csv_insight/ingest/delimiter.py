from __future__ import annotations

CANDIDATE_DELIMITERS: tuple[str, ...] = (",", ";", "\t", "|")
DEFAULT_DELIMITER = ","


def detect_delimiter(sample: str) -> str:
    """
    Pick the most frequent candidate delimiter in a text sample.

    Occurrences are counted literally, including inside quoted fields; this is
    a heuristic, not a parser. Ties go to the earlier candidate, and a sample
    with no candidate at all yields a comma.
    """
    best = DEFAULT_DELIMITER
    best_count = 0
    for d in CANDIDATE_DELIMITERS:
        n = sample.count(d)
        if n > best_count:
            best, best_count = d, n
    return best
