from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloudcube.cube.schemas import DeleteStrategy, ProviderConfig


# =======================
# CloudCube Settings
# =======================
class CubeSettings(BaseModel):
    """CloudCube add-on credentials and bucket location."""
    public: Optional[str] = None
    private: Optional[str] = None
    url: Optional[str] = None
    base_path: Optional[str] = None
    # When true, public/private/url hold names of env variables, not values
    use_env: Optional[bool] = None
    delete_strategy: DeleteStrategy = DeleteStrategy.URL

    def to_provider_config(self) -> ProviderConfig:
        return ProviderConfig(
            public=self.public,
            private=self.private,
            cube_url=self.url,
            base_path=self.base_path,
            use_env=self.use_env,
            delete_strategy=self.delete_strategy,
        )


# =======================
# Logging Settings
# =======================
class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =======================
# Main Settings
# =======================
class Settings(BaseSettings):
    """Application settings."""
    # Application metadata
    title: str = "CloudCube Storage"
    version: str = "1.0.0"
    description: str = "Upload and delete media files in a CloudCube S3 bucket"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        env_file_encoding="utf-8",
        env_nested_delimiter="_",
        env_nested_max_split=1,
        case_sensitive=False,
        extra="ignore",
    )

    cube: CubeSettings = CubeSettings()
    logging: LoggingSettings = LoggingSettings()


settings = Settings()
