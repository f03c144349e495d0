from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .generic_response import GenericResponse


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class MeasurementMethod(str, Enum):
    WEIGHT = "weight"
    HEIGHT = "height"
    BMI = "bmi"
    OFC = "ofc"


class CentileRequest(BaseModel):
    # Everything is optional here so that missing fields get the uniform error envelope
    birth_date: Optional[str] = None
    measurement_date: Optional[str] = None
    sex: Optional[str] = None
    weight: Optional[str] = None
    height: Optional[str] = None
    ofc: Optional[str] = None
    gestation_weeks: Optional[str] = None
    gestation_days: Optional[str] = None
    measurement_method: Optional[str] = None
    dob_format: Optional[str] = None
    measurement_date_format: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Optional[str]:
        # Form values arrive as text, JSON clients may send numbers
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class MeasurementRecord(BaseModel):
    birth_date: str
    observation_date: str
    observation_value: float
    measurement_method: str
    sex: Sex
    gestation_weeks: int = Field(40, ge=0)
    gestation_days: int = Field(0, ge=0)

    class Config:
        frozen = True
        use_enum_values = True


class CentileResult(BaseModel):
    centile: Optional[float] = None
    sds: Optional[float] = None
    centile_band: Optional[str] = None
    age_error: Optional[Any] = None
    corrected_age: Optional[Any] = None
    clinical_advice: Optional[str] = None


class CentileError(BaseModel):
    error: str


CentileOutcome = Union[CentileResult, CentileError]


class CentileResponse(GenericResponse[Dict[str, CentileOutcome]]):
    pass


class FieldValuesResponse(GenericResponse[Dict[str, str]]):
    pass


class FieldConfig(BaseModel):
    api_url: str
    inputs: Dict[str, Optional[str]]
    outputs: Dict[str, Dict[str, Optional[str]]]
    date_formats: Dict[str, Optional[str]]
