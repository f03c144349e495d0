from .generic_response import GenericResponse
from .centile import (
    Sex, MeasurementMethod, CentileRequest, MeasurementRecord, CentileResult, CentileError,
    CentileOutcome, CentileResponse, FieldValuesResponse, FieldConfig
)
