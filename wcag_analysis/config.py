from pydantic_settings import BaseSettings
from typing import ClassVar, Optional


class Settings(BaseSettings):
    # axe-core injection: a local file wins over the CDN
    AXE_SCRIPT_PATH: Optional[str] = None
    AXE_SCRIPT_URL: str = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.9.1/axe.min.js"

    # Browser
    BROWSER_HEADLESS: bool = True
    NAVIGATION_TIMEOUT_MS: Optional[int] = None  # None keeps Playwright's default

    # App
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    model_config: ClassVar = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore"
    }


settings = Settings()
