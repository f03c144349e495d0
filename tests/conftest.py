import pytest

from app.core.config import Settings
from app.schemas.centile import CentileRequest, CentileResult


class FakeClient:
    """In-memory stand-in for the growth API client."""

    def __init__(self, outcomes=None):
        self.outcomes = outcomes or {}
        self.calls = []

    def calculate(self, record):
        self.calls.append(record)
        return self.outcomes.get(
            record.measurement_method,
            CentileResult(centile=50.0, sds=0.0, centile_band="This measurement is on or near the 50th centile."),
        )


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        RCPCH_API_URL="https://growth.example.test/calculation",
        RCPCH_API_KEY="secret-key",
        WEIGHT_CENTILE_FIELD="wt_centile",
        WEIGHT_SDS_FIELD="wt_sds",
        HEIGHT_CENTILE_FIELD="ht_centile",
        HEIGHT_SDS_FIELD="ht_sds",
        BMI_CENTILE_FIELD="bmi_centile",
        BMI_SDS_FIELD="bmi_sds",
    )


@pytest.fixture
def request_data():
    return CentileRequest(
        birth_date="15-01-2020",
        measurement_date="15-01-2022",
        sex="1",
        weight="12.5",
        height="90",
    )
