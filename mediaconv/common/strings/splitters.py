from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def slash_to_list(v: str | None) -> List[str]:
    """Split a MediaInfo alternative list ("64000 / 128000") into trimmed parts."""
    if not v:
        return []
    return [s.strip() for s in str(v).split("/") if s.strip()]
