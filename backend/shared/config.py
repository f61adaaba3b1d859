"""
Centralized configuration for the Outreach backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Outreach Access API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (two credential tiers: anon for end users, service role for the gate)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""
    jwt_leeway_seconds: int = 0

    # Direct Postgres connection, used only by run_migrations.py
    supabase_db_url: str = ""

    # Operator that always resolves to admin, even with no profile row.
    # Empty disables the bypass.
    seeded_admin_email: str = ""

    # Frontend navigation targets used by the route guard
    login_path: str = "/login"
    student_landing_path: str = "/student/dashboard"
    admin_landing_path: str = "/admin/dashboard"
    public_routes: list[str] = ["/", "/login", "/signup", "/schools", "/weeks", "/team"]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
