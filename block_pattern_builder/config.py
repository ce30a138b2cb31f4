from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


class Settings(BaseSettings):
    debug: bool = False

    # Plugin location
    plugin_path: str = "."
    plugin_uri: str = "http://localhost:8000"
    plugins_dir: Optional[str] = None

    # Localization
    text_domain: str = "block-pattern-builder"
    lang_dir: str = "public/lang"

    # Build output
    public_dir: str = "public"
    manifest_file: str = "mix-manifest.json"

    # Components registered on construction, in boot order
    default_components: list[str] = ["Editor"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="BPB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
