from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Optional

DEFAULT_ALLOWED_ORIGINS = [
    "https://covechildcare.co.uk",
    "http://localhost:5173",
    "http://localhost:3000",
    "http://localhost:8000",
    "http://localhost:8080",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    port: int = 5000
    log_level: str = "INFO"

    # MongoDB URI - optional, the store is skipped when it is missing
    mongodb_uri: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("MONGODB_URI", "MONGODB_URL"),
    )
    mongodb_db_name: str = "contactform"

    # SMTP transport
    email_host: str = "smtp.gmail.com"
    email_port: int = 587
    email_secure: bool = False
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    email_from: Optional[str] = None
    email_send_timeout: float = 8.0
    contact_email: str = "Contract@covechildcare.co.uk"
    site_name: str = "Cove Childcare"

    # CORS settings (comma separated)
    allowed_origins: str = ",".join(DEFAULT_ALLOWED_ORIGINS)

    @property
    def allowed_origin_list(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def sender_address(self) -> Optional[str]:
        """Authenticated system address used in the From header."""
        return self.email_from or self.email_user


@lru_cache
def get_settings():
    return Settings()
