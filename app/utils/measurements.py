import logging
import math
from typing import List, Optional

from app.core.errors import InvalidMeasurement, MissingMeasurement
from app.schemas.centile import CentileRequest, MeasurementMethod, MeasurementRecord, Sex
from app.utils.dates import normalize_date

logger = logging.getLogger(__name__)

DEFAULT_GESTATION_WEEKS = 40
DEFAULT_GESTATION_DAYS = 0

# Method names a height hint may not take over
RESERVED_METHODS = {MeasurementMethod.WEIGHT.value, MeasurementMethod.BMI.value, MeasurementMethod.OFC.value}


def map_sex(value: Optional[str]) -> Sex:
    # The growth API only knows male and female; the form codes male as "1"
    return Sex.MALE if value == "1" else Sex.FEMALE


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return round(weight_kg / (height_m ** 2), 2)


def _parse_value(name: str, value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise InvalidMeasurement(f"Invalid {name} value: {value}") from None
    if not math.isfinite(number):
        raise InvalidMeasurement(f"Invalid {name} value: {value}")
    if not number > 0:
        raise InvalidMeasurement(f"{name.capitalize()} must be greater than 0")
    return number


def _parse_gestation(name: str, value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        raise InvalidMeasurement(f"Invalid {name} value: {value}") from None
    if number < 0:
        raise InvalidMeasurement(f"{name} must not be negative")
    return number


def _height_method(hint: Optional[str]) -> str:
    if not hint:
        return MeasurementMethod.HEIGHT.value
    if hint in RESERVED_METHODS:
        raise InvalidMeasurement(f"Invalid measurement method for height: {hint}")
    return hint


def build_measurements(
        data: CentileRequest,
        dob_format: Optional[str] = None,
        measurement_date_format: Optional[str] = None,
) -> List[MeasurementRecord]:
    """
    Build one growth API request per measurement present in the form data,
    plus a derived BMI request when both weight and height are given.

    Format arguments are the fallback date hints used when the request carries none.
    """
    common = {
        "birth_date": normalize_date(data.birth_date, data.dob_format or dob_format),
        "observation_date": normalize_date(
            data.measurement_date, data.measurement_date_format or measurement_date_format
        ),
        "sex": map_sex(data.sex),
        "gestation_weeks": _parse_gestation("gestation_weeks", data.gestation_weeks, DEFAULT_GESTATION_WEEKS),
        "gestation_days": _parse_gestation("gestation_days", data.gestation_days, DEFAULT_GESTATION_DAYS),
    }

    weight = _parse_value("weight", data.weight) if data.weight else None
    height = _parse_value("height", data.height) if data.height else None
    ofc = _parse_value("ofc", data.ofc) if data.ofc else None

    measurements = []
    if weight is not None:
        measurements.append(MeasurementRecord(
            observation_value=weight, measurement_method=MeasurementMethod.WEIGHT.value, **common
        ))
    if height is not None:
        measurements.append(MeasurementRecord(
            observation_value=height, measurement_method=_height_method(data.measurement_method), **common
        ))
    if weight is not None and height is not None:
        measurements.append(MeasurementRecord(
            observation_value=calculate_bmi(weight, height), measurement_method=MeasurementMethod.BMI.value, **common
        ))
    if ofc is not None:
        measurements.append(MeasurementRecord(
            observation_value=ofc, measurement_method=MeasurementMethod.OFC.value, **common
        ))

    if not measurements:
        raise MissingMeasurement()

    logger.debug(f"Built {len(measurements)} measurement(s): {[m.measurement_method for m in measurements]}")
    return measurements
