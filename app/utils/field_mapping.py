from typing import Dict, Optional

from app.core.config import Settings
from app.schemas.centile import CentileResponse, CentileResult, MeasurementMethod
from app.utils.measurements import RESERVED_METHODS

CENTILE_DECIMALS = 1
SDS_DECIMALS = 2


def _format(value: Optional[float], decimals: int) -> Optional[str]:
    if value is None:
        return None
    # "+ 0.0" turns -0.0 into 0.0; ":g" drops a trailing ".0"
    return f"{round(value, decimals) + 0.0:g}"


def clear_field_values(settings: Settings) -> Dict[str, str]:
    values = {}
    for fields in settings.output_fields().values():
        for field in fields.values():
            if field:
                values[field] = ""
    return values


def _height_key(results: dict) -> Optional[str]:
    # The height record may be keyed by a method hint such as "length"
    for method in results:
        if method not in RESERVED_METHODS:
            return method
    return None


def build_field_values(response: CentileResponse, settings: Settings) -> Dict[str, str]:
    """
    Map a centile response onto the configured output fields.

    A failed response clears every output field. A measurement that failed on
    its own, or has no value, leaves its fields untouched.
    """
    if not response.success:
        return clear_field_values(settings)

    results = response.results or {}
    values = {}
    for method, fields in settings.output_fields().items():
        if method == MeasurementMethod.HEIGHT.value:
            outcome = results.get(_height_key(results))
        else:
            outcome = results.get(method)
        if not isinstance(outcome, CentileResult):
            continue

        centile = _format(outcome.centile, CENTILE_DECIMALS)
        sds = _format(outcome.sds, SDS_DECIMALS)
        if fields["centile"] and centile is not None:
            values[fields["centile"]] = centile
        if fields["sds"] and sds is not None:
            values[fields["sds"]] = sds
    return values
