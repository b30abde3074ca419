"""
Configuration management for the Star Wars GraphQL server
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings

GRAPHQL_ENDPOINT = "/graphql"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # GraphQL endpoint
    graphql_path: str = GRAPHQL_ENDPOINT
    graphiql_enabled: bool = True
    playground_enabled: bool = True
    subscriptions_enabled: bool = True

    # Auth
    auth_provider: str = "none"  # 'none', 'jwt'
    auth_config: dict = {}
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"

    # Test identity injected on every request (authorization debugging only)
    inject_test_identity: bool = False
    test_identity_authentication_type: str = "abc"
    test_identity_country: str = "us"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "STARWARS_"
        case_sensitive = False

    @field_validator("graphql_path")
    @classmethod
    def _normalize_graphql_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("graphql_path must start with '/'")
        stripped = value.rstrip("/")
        if not stripped:
            raise ValueError("graphql_path cannot be the site root")
        return stripped

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def playground_path(self) -> str:
        return f"{self.graphql_path}/playground"


# Global settings instance
settings = Settings()
