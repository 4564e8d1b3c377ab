import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_browser_paths() -> str:
    local_app_data = os.environ.get("LOCALAPPDATA", "")
    program_files = os.environ.get("PROGRAMFILES", "")
    program_files_x86 = os.environ.get("PROGRAMFILES(X86)", "")
    candidates = [
        "/usr/bin/google-chrome",
        "/usr/bin/google-chrome-stable",
        "/usr/bin/chromium",
        "/usr/bin/chromium-browser",
        "/snap/bin/chromium",
        "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        "/Applications/Chromium.app/Contents/MacOS/Chromium",
        "C:\\Program Files\\Google\\Chrome\\Application\\chrome.exe",
        "C:\\Program Files (x86)\\Google\\Chrome\\Application\\chrome.exe",
    ]
    for root in (local_app_data, program_files, program_files_x86):
        if root:
            candidates.append(f"{root}\\Google\\Chrome\\Application\\chrome.exe")
    return ",".join(dict.fromkeys(candidates))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    llm_provider: Literal["auto", "openai", "openrouter"] = Field(default="auto", alias="LLM_PROVIDER")
    openai_base_url: str = Field(default="", alias="OPENAI_BASE_URL")
    openai_model: str = Field(default="", alias="OPENAI_MODEL")
    llm_max_tokens: int = Field(default=2000, alias="LLM_MAX_TOKENS")
    llm_temperature: float = Field(default=0.7, alias="LLM_TEMPERATURE")
    llm_timeout_seconds: float = Field(default=60.0, alias="LLM_TIMEOUT_SECONDS")

    pdf_page_format: str = Field(default="A4", alias="PDF_PAGE_FORMAT")
    browser_executable_paths: str = Field(
        default_factory=_default_browser_paths,
        alias="BROWSER_EXECUTABLE_PATHS",
    )

    app_env: str = Field(default="development", alias="APP_ENV")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def is_development(self) -> bool:
        return self.app_env.strip().lower() == "development"

    @property
    def browser_candidates(self) -> list[str]:
        return parse_csv(self.browser_executable_paths)

    @property
    def cors_origin_list(self) -> list[str]:
        return parse_csv(self.cors_origins) or ["*"]


def parse_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
