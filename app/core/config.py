from typing import Optional

from pydantic_settings import BaseSettings

METHODS = ("weight", "height", "bmi", "ofc")


class Settings(BaseSettings):
    API_V1_STR: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    RCPCH_API_URL: str = "https://api.rcpch.ac.uk/growth/v1/uk-who/calculation"
    RCPCH_API_KEY: Optional[str] = None
    RCPCH_TIMEOUT: int = 30

    # Default date hints, usually the validation type of the form field (e.g. "date_dmy")
    DOB_FORMAT: Optional[str] = None
    MEASUREMENT_DATE_FORMAT: Optional[str] = None

    # Input fields
    WEIGHT_FIELD: Optional[str] = None
    HEIGHT_FIELD: Optional[str] = None
    OFC_FIELD: Optional[str] = None
    DOB_FIELD: Optional[str] = None
    SEX_FIELD: Optional[str] = None
    MEASUREMENT_DATE_FIELD: Optional[str] = None
    GESTATION_WEEKS_FIELD: Optional[str] = None
    GESTATION_DAYS_FIELD: Optional[str] = None

    # Output fields
    WEIGHT_CENTILE_FIELD: Optional[str] = None
    WEIGHT_SDS_FIELD: Optional[str] = None
    HEIGHT_CENTILE_FIELD: Optional[str] = None
    HEIGHT_SDS_FIELD: Optional[str] = None
    BMI_CENTILE_FIELD: Optional[str] = None
    BMI_SDS_FIELD: Optional[str] = None
    OFC_CENTILE_FIELD: Optional[str] = None
    OFC_SDS_FIELD: Optional[str] = None

    class Config:
        env_file = ".env"

    def input_fields(self) -> dict:
        return {
            "weight": self.WEIGHT_FIELD,
            "height": self.HEIGHT_FIELD,
            "ofc": self.OFC_FIELD,
            "dob": self.DOB_FIELD,
            "sex": self.SEX_FIELD,
            "measurement_date": self.MEASUREMENT_DATE_FIELD,
            "gestation_weeks": self.GESTATION_WEEKS_FIELD,
            "gestation_days": self.GESTATION_DAYS_FIELD,
        }

    def output_fields(self) -> dict:
        """Configured output field names keyed by method, then by "centile"/"sds"."""
        return {
            method: {
                "centile": getattr(self, f"{method.upper()}_CENTILE_FIELD"),
                "sds": getattr(self, f"{method.upper()}_SDS_FIELD"),
            }
            for method in METHODS
        }


settings = Settings()
