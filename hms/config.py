from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hms.domain.models import NOT_APPLICABLE


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HMS_", env_file=".env", extra="ignore")

    patient_prefix: str = "P"
    doctor_prefix: str = "D"
    id_width: int = Field(default=3, ge=1)
    default_admit_date: str = NOT_APPLICABLE
    gender_options: tuple[str, ...] = ("Male", "Female", "Rather Not Say")
    log_level: str = "INFO"
