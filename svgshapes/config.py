"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svgshapes.engine.config import ParseOptions


class Settings(BaseSettings):
    svgshapes_env: str = "development"
    svgshapes_log_level: str = "info"

    # Parse defaults for the HTTP service
    svgshapes_strict_mode: bool = False
    svgshapes_verbose_logging: bool = True
    svgshapes_max_depth: int = 256
    svgshapes_max_input_chars: int = 5_000_000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def parse_options(
        self,
        strict_mode: bool | None = None,
        verbose_logging: bool | None = None,
    ) -> ParseOptions:
        """ParseOptions from settings, with optional per-request overrides."""
        return ParseOptions(
            strict_mode=self.svgshapes_strict_mode if strict_mode is None else strict_mode,
            verbose_logging=self.svgshapes_verbose_logging if verbose_logging is None else verbose_logging,
            max_depth=self.svgshapes_max_depth,
            max_input_chars=self.svgshapes_max_input_chars,
        )


settings = Settings()
