"""
ISNCSCI Totals: Configuration

Settings are read from the environment (prefix ``ISNCSCI_``) and from a
``.env`` file in the working directory.
"""
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


def load_environment() -> bool:
    """Load the nearest ``.env`` searching upwards from the working directory."""
    return load_dotenv(find_dotenv(usecwd=True))


# ── Load .env ───────────────────────────────────────────────────────────
load_environment()


class Settings(BaseSettings):
    """Runtime settings for logging and totals rendering."""

    model_config = SettingsConfigDict(env_prefix="ISNCSCI_", extra="ignore")

    # ── Logging ─────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_color: bool = True                       # colour console output on a TTY

    # ── Rendering ───────────────────────────────────────────────────────
    not_determinable_marker: str = "UTD"         # total contains an NT value
    impairment_not_due_to_sci_marker: str = "!"  # suffix on impaired totals
    values_separator: str = ","


settings = Settings()
