from typing import Any, List


def normalize_keywords(value: Any) -> List[str]:
    """Keywords may be written as a YAML list or a comma-separated string."""
    if not value:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]
