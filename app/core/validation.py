from typing import Optional


def pick_name(name: Optional[str], alias: Optional[str]) -> Optional[str]:
    """Trimmed canonical name, else trimmed legacy alias, else None."""
    for value in (name, alias):
        if value and value.strip():
            return value.strip()
    return None


def length_between(value: str, min_len: int, max_len: int) -> bool:
    return min_len <= len(value) <= max_len
