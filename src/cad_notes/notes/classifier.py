"""Heuristic for vague finish inputs."""

GENERIC_TREATMENT_KEYWORDS = ("treatment", "treat", "finish required", "surface")

# Finishes at or above this length are treated as fully specified.
GENERIC_FINISH_MAX_LENGTH = 20


def is_generic_treatment_request(finish: str) -> bool:
    """Return True when the finish asks for treatment options rather than naming one.

    A finish such as "treatment?" or "surface finish" is generic; a finish
    such as "Anodize Black, MIL-A-8625 Type II" is specific.
    """
    normalized = finish.strip().lower()
    if len(normalized) >= GENERIC_FINISH_MAX_LENGTH:
        return False
    return any(keyword in normalized for keyword in GENERIC_TREATMENT_KEYWORDS)
