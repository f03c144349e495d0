"""
Client for the RCPCH Digital Growth Charts calculation API.

Each measurement is sent as its own one-shot request; the outcome is either
a CentileResult or a CentileError, never an exception.
"""
import json
import logging
from typing import Any, Optional, Protocol

import requests
from pydantic import ValidationError

from app.core.errors import RemoteCalculationError
from app.schemas.centile import CentileError, CentileOutcome, CentileResult, MeasurementRecord

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class CalculationClient(Protocol):
    def calculate(self, record: MeasurementRecord) -> CentileOutcome:
        ...


def parse_calculated_values(body: Any) -> CentileResult:
    """Pick the centile fields out of a successful response, tolerating missing keys."""
    values = body.get("measurement_calculated_values") if isinstance(body, dict) else None
    if not isinstance(values, dict):
        values = {}

    return CentileResult(
        centile=values.get("centile"),
        sds=values.get("sds"),
        centile_band=values.get("centile_band"),
        age_error=values.get("chronological_decimal_age_error"),
        corrected_age=values.get("corrected_decimal_age"),
        clinical_advice=values.get("clinician_comment"),
    )


def error_message(response: requests.Response) -> str:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        detail = None

    if not detail:
        return f"API error: HTTP {response.status_code}"
    if isinstance(detail, str):
        return detail
    # Request validation failures come back as a list of error objects
    return json.dumps(detail)


class RcpchClient:
    def __init__(self, api_url: str, api_key: Optional[str] = None, timeout: int = DEFAULT_TIMEOUT):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout

    def headers(self) -> dict:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _post(self, record: MeasurementRecord) -> requests.Response:
        try:
            return requests.post(
                self.api_url,
                json=record.model_dump(mode="json"),
                headers=self.headers(),
                timeout=self.timeout,
                verify=True,
            )
        except requests.RequestException as e:
            raise RemoteCalculationError(f"transport error: {e}") from e

    def calculate(self, record: MeasurementRecord) -> CentileOutcome:
        method = record.measurement_method
        try:
            response = self._post(record)
        except RemoteCalculationError as e:
            logger.warning(f"{method} calculation failed: {e}")
            return CentileError(error=str(e))

        if response.status_code != 200:
            message = error_message(response)
            logger.warning(f"{method} calculation rejected (HTTP {response.status_code}): {message}")
            return CentileError(error=message)

        try:
            body = response.json()
        except ValueError:
            logger.warning(f"{method} calculation returned a non-JSON body")
            body = None

        try:
            return parse_calculated_values(body)
        except ValidationError as e:
            logger.warning(f"{method} calculation returned unexpected values: {e}")
            return CentileError(error=f"unexpected response: {e.error_count()} invalid value(s)")
