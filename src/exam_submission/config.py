from enum import Enum
from pathlib import Path
from functools import lru_cache
from typing import List
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent


#  Working modes
class AppEnvironment(str, Enum):
    """Working modes"""
    DEV = "development"
    PROD = "production"
    TEST = "testing"


#  Submission config
class SubmissionConfig(BaseModel):
    """Submission config"""
    config_path: Path = Field(
        default=Path(r"\\zeta\acad_cs\CS131_Exams\submission.conf"),
        description="Shared file whose contents is the destination directory"
    )
    file_type_label: str = Field(default="Python Files", description="Picker filter label")
    file_patterns: List[str] = Field(default_factory=lambda: ["*.py"], description="Picker filter patterns")
    artifact_suffix: str = Field(default=".txt", description="Suffix of every persisted submission")

    @property
    def name_filter(self) -> str:
        """Filter string in QFileDialog syntax, e.g. 'Python Files (*.py)'"""
        return f"{self.file_type_label} ({' '.join(self.file_patterns)})"


#  UI config
class UIConfig(BaseModel):
    """UI config"""
    window_title: str = Field(default="CS 131 Exam Submission")
    width: int = Field(default=800, gt=0)
    height: int = Field(default=600, gt=0)
    dark_theme: bool = Field(default=True)


#  Main Settings
class Settings(BaseSettings):
    """
    Main Settings class.
    Reads configuration from .env file or environment variables.
    """
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore"
    )

    env: AppEnvironment = Field(default=AppEnvironment.DEV, alias="APP_ENV")
    log_level: str = Field(default="INFO")

    # Compose configs
    submission: SubmissionConfig = Field(default_factory=SubmissionConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


@lru_cache
def get_settings() -> Settings:
    """
    Creates and returns a (cached) instance of settings.
    Used for Dependency Injection.
    """
    return Settings()
