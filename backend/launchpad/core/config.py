from pydantic_settings import BaseSettings
from typing import List
import json


class Settings(BaseSettings):
    # Application
    app_name: str = "Confidential Launchpad API"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Store
    # Populate a fresh store with demo tokens, presales and contributions
    seed_demo_data: bool = True

    # Mock token deployment (no real chain is touched)
    simulate_deployment: bool = True
    deployment_delay_seconds: float = 3.0

    # Default page size for GET /tokens/recent
    recent_tokens_limit: int = 5

    # CORS
    cors_origins: str = '["http://localhost:5173","http://localhost:3000"]'

    @property
    def cors_origins_list(self) -> List[str]:
        return json.loads(self.cors_origins)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
