import os


def _as_bool(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _as_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_float(value, default):
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


class Settings:
    """Runtime configuration read from the environment.

    A fresh instance re-reads the environment, so tests can monkeypatch
    variables and build their own ``Settings()``.
    """

    def __init__(self) -> None:
        self.CATALOG_CSV_PATH = (
            os.environ.get("CATALOG_CSV_PATH") or "wildwest_master_seo_matrix.csv"
        ).strip()

        self.SUPABASE_URL = (os.environ.get("SUPABASE_URL") or "").strip().rstrip("/")
        self.SUPABASE_KEY = (
            os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
            or os.environ.get("SUPABASE_KEY")
            or ""
        ).strip()
        self.PAGE_LOOKUP_ENABLED = _as_bool(os.environ.get("PAGE_LOOKUP_ENABLED"), True)
        self.PAGE_LOOKUP_TIMEOUT_SECONDS = max(
            0.1, _as_float(os.environ.get("PAGE_LOOKUP_TIMEOUT_SECONDS"), 3.0)
        )

        self.MATCH_THRESHOLD = _as_float(os.environ.get("MATCH_THRESHOLD"), 0.6)
        self.MATCH_MIN_SCORE = _as_float(os.environ.get("MATCH_MIN_SCORE"), 0.4)
        self.MAX_SUGGESTIONS = max(1, _as_int(os.environ.get("MAX_SUGGESTIONS"), 5))

        self.PLACEHOLDER_REGION = (os.environ.get("PLACEHOLDER_REGION") or "Utah").strip()
        self.REGION_ABBREV = (os.environ.get("REGION_ABBREV") or "UT").strip()

        self.SITE_URL = (os.environ.get("SITE_URL") or "").strip().rstrip("/")
        self.BUSINESS_NAME = (
            os.environ.get("BUSINESS_NAME") or "Wild West Construction"
        ).strip()

        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()

    @property
    def page_lookup_configured(self) -> bool:
        return self.PAGE_LOOKUP_ENABLED and bool(self.SUPABASE_URL and self.SUPABASE_KEY)
