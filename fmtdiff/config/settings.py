from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True)

    formatter_name: str = "rustfmt"
    formatter_path: str = "rustfmt"  # PATH 에서 찾거나 절대경로
    formatter_timeout_sec: float | None = None  # None 이면 무제한 대기

    default_mode: str = "diff"  # | "display"
    resolve_symlinks: bool = True

    @property
    def not_found_message(self) -> str:
        return f'The "{self.formatter_name}" command is not available. Make sure it is installed.'


settings = Settings()
