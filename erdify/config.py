from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from erdify.rdbms.adapters import for_adapter, from_url
from erdify.rdbms.rdbms import Rdbms

# hair space followed by an asterisk operator
MANDATORY_MARKER = "\u200a\u2217"


class Settings(BaseSettings):
    """Configuration read from ``ERDIFY_*`` environment variables."""

    adapter: str = "sqlite"
    database_url: Optional[str] = None
    mandatory_marker: str = MANDATORY_MARKER
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    model_config = SettingsConfigDict(env_prefix="ERDIFY_", env_ignore_empty=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    def create_rdbms(self) -> Rdbms:
        if self.database_url:
            return from_url(self.database_url)
        return for_adapter(self.adapter)
