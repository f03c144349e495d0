import logging
from typing import Dict, Iterable, Tuple

from app.core.config import Settings
from app.core.errors import CentileRequestError, MissingFieldError
from app.schemas.centile import CentileError, CentileOutcome, CentileRequest, CentileResponse, MeasurementRecord
from app.utils.measurements import build_measurements
from app.utils.rcpch_client import CalculationClient

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["birth_date", "measurement_date", "sex"]


def validate_required(data: CentileRequest) -> None:
    for field in REQUIRED_FIELDS:
        if not getattr(data, field):
            raise MissingFieldError(field)


def aggregate(records: Iterable[MeasurementRecord], client: CalculationClient) -> Dict[str, CentileOutcome]:
    results = {}
    for record in records:
        method = record.measurement_method
        assert method not in results, f"duplicate measurement method: {method}"
        results[method] = client.calculate(record)
    return results


def handle(data: CentileRequest, settings: Settings, client: CalculationClient) -> Tuple[int, CentileResponse]:
    """
    Run one centile request end to end.

    Returns the HTTP status together with the response envelope. Errors that
    stop the whole request (missing fields, unreadable dates, no measurements)
    give a failed envelope; a failure of a single measurement only shows up
    under that measurement in the results.
    """
    try:
        validate_required(data)
        records = build_measurements(
            data,
            dob_format=settings.DOB_FORMAT,
            measurement_date_format=settings.MEASUREMENT_DATE_FORMAT,
        )
    except CentileRequestError as e:
        logger.error(f"Centile request rejected: {e}")
        return e.status_code, CentileResponse.fail(str(e))

    results = aggregate(records, client)
    failed = [method for method, outcome in results.items() if isinstance(outcome, CentileError)]
    logger.info(f"Calculated {len(results)} measurement(s), failed: {failed}")
    return 200, CentileResponse.ok(results)
