"""
Tests for mapping centile results onto form output fields.
"""

from app.schemas.centile import CentileError, CentileResponse, CentileResult
from app.utils.field_mapping import build_field_values, clear_field_values


class TestFieldValues:

    def test_rounding(self, settings):
        response = CentileResponse.ok({
            "weight": CentileResult(centile=72.345, sds=0.5876),
            "height": CentileResult(centile=50.0, sds=-0.004),
        })

        values = build_field_values(response, settings)

        assert values == {
            "wt_centile": "72.3",
            "wt_sds": "0.59",
            "ht_centile": "50",
            "ht_sds": "0",
        }

    def test_failed_measurement_left_alone(self, settings):
        response = CentileResponse.ok({
            "weight": CentileResult(centile=10.0, sds=-1.28),
            "bmi": CentileError(error="not found"),
        })

        values = build_field_values(response, settings)

        assert values == {"wt_centile": "10", "wt_sds": "-1.28"}

    def test_null_values_skipped(self, settings):
        response = CentileResponse.ok({"height": CentileResult(sds=1.5)})
        assert build_field_values(response, settings) == {"ht_sds": "1.5"}

    def test_unconfigured_fields_skipped(self, settings):
        response = CentileResponse.ok({"ofc": CentileResult(centile=25.0, sds=-0.67)})
        assert build_field_values(response, settings) == {}

    def test_failure_clears_everything(self, settings):
        values = build_field_values(CentileResponse.fail("Missing required field: sex"), settings)

        assert values == clear_field_values(settings)
        assert values == {
            "wt_centile": "", "wt_sds": "",
            "ht_centile": "", "ht_sds": "",
            "bmi_centile": "", "bmi_sds": "",
        }

    def test_length_fills_height_fields(self, settings):
        response = CentileResponse.ok({
            "weight": CentileResult(centile=10.0, sds=-1.28),
            "length": CentileResult(centile=91.2, sds=1.35),
            "bmi": CentileResult(centile=2.0, sds=-2.05),
        })

        values = build_field_values(response, settings)

        assert values["ht_centile"] == "91.2"
        assert values["ht_sds"] == "1.35"
        assert values["wt_centile"] == "10"
        assert values["bmi_sds"] == "-2.05"
