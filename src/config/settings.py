"""Application settings loaded from environment variables via pydantic-settings.

Sources, highest priority first:

  1. Environment variables, e.g. ``STRICT_CORS=true``
  2. A ``.env`` file in the working directory (local development)
  3. The defaults below

Field names map to upper-cased environment variables.  List fields such as
``cors_allowed_origins`` are read from the environment as JSON arrays.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Link proxy settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Server ===
    app_host: str = "0.0.0.0"
    app_port: int = 3000
    app_env: str = "development"
    log_level: str = "INFO"

    # === CORS ===
    # False: any origin may call the proxy.  True: only the origins below.
    strict_cors: bool = False
    cors_allowed_origins: list[str] = [
        "https://monochrome.tf",
        "https://monochrome.prigoana.com",
    ]

    # === Routes ===
    redirect_url: str = "https://monochrome.tf"

    # === Upstream ===
    songlink_base_url: str = "https://api.song.link/v1-alpha.1/links"
    upstream_timeout: float = 30.0
    randomize_headers: bool = False

    # === Response cache ===
    cache_max_size: int = 1000
    cache_ttl_seconds: int = 2_592_000  # 30 days
    single_flight: bool = False
