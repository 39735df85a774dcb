from .datetime_utils import ensure_utc, parse_iso, to_iso, to_local, utc_now

__all__ = ["ensure_utc", "parse_iso", "to_iso", "to_local", "utc_now"]
