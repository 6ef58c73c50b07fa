"""Edit-distance similarity on place names."""

from koolihub_trips.search.phonetics import normalize_for_phonetics


def levenshtein_distance(source: str, target: str) -> int:
    """Classic edit distance over a full (len(source)+1) x (len(target)+1) matrix."""
    if not source:
        return len(target)
    if not target:
        return len(source)

    matrix = [[0] * (len(target) + 1) for _ in range(len(source) + 1)]
    for i in range(len(source) + 1):
        matrix[i][0] = i
    for j in range(len(target) + 1):
        matrix[0][j] = j

    for i in range(1, len(source) + 1):
        for j in range(1, len(target) + 1):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,  # deletion
                matrix[i][j - 1] + 1,  # insertion
                matrix[i - 1][j - 1] + cost,  # substitution
            )

    return matrix[len(source)][len(target)]


def string_similarity(first: str, second: str) -> float:
    """Case-insensitive similarity in [0, 1]; 1.0 means identical."""
    if len(first) > len(second):
        longer, shorter = first, second
    else:
        longer, shorter = second, first

    if not longer:
        return 1.0

    edit_distance = levenshtein_distance(longer.lower(), shorter.lower())
    return (len(longer) - edit_distance) / len(longer)


def allowed_edits(first: str, second: str) -> int:
    """Edits tolerated between two names: one per 3 characters, at least 2."""
    return max(2, max(len(first), len(second)) // 3)


def are_phonetically_similar(first: str, second: str) -> bool:
    norm_first = normalize_for_phonetics(first)
    norm_second = normalize_for_phonetics(second)

    if norm_first == norm_second:
        return True

    if norm_first in norm_second or norm_second in norm_first:
        return True

    return levenshtein_distance(norm_first, norm_second) <= allowed_edits(
        norm_first, norm_second
    )
