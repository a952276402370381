# tests/test_models.py

"""
Model Validation Tests - categories, wire aliases and settings.
"""

import pytest
from pydantic import ValidationError

from negocia.config import Settings
from negocia.core.exceptions import UnknownCategoryException
from negocia.models.analysis import AnalysisRequest, AnalysisResponse, AnalysisResult
from negocia.models.enumerations import CATEGORY_LABELS, Category


# ENUMERATION TESTS


class TestCategoryEnum:

    def test_all_categories_exist(self):
        expected = ["ventas", "compras", "inventarios", "cuentas_cobrar", "cuentas_pagar"]
        assert [c.value for c in Category] == expected

    def test_category_count(self):
        assert len(Category) == 5

    def test_every_category_has_a_label(self):
        assert set(CATEGORY_LABELS) == set(Category)
        assert Category.RECEIVABLES.label == "Cuentas por Cobrar"

    def test_parse_known_tag(self):
        assert Category.parse("compras") is Category.PURCHASES

    @pytest.mark.parametrize("tag", ["sales", "VENTAS", "", "cuentas"])
    def test_parse_unknown_tag(self, tag):
        with pytest.raises(UnknownCategoryException) as exc:
            Category.parse(tag)
        assert exc.value.tag == tag


# REQUEST / RESPONSE TESTS


class TestAnalysisRequest:

    def test_reads_wire_names(self):
        req = AnalysisRequest.model_validate(
            {"csvData": "a,b", "fileType": "ventas", "companyName": "Acme"}
        )
        assert req.raw_text == "a,b"
        assert req.category == "ventas"
        assert req.company_name == "Acme"

    def test_dumps_wire_names(self):
        req = AnalysisRequest(raw_text="a,b", category="compras", company_name="Acme")
        assert req.model_dump(by_alias=True) == {
            "csvData": "a,b",
            "fileType": "compras",
            "companyName": "Acme",
        }

    def test_csv_data_required(self):
        with pytest.raises(ValidationError):
            AnalysisRequest.model_validate({"fileType": "ventas"})


class TestAnalysisResult:

    def test_from_response(self):
        payload = {
            "success": True,
            "analysis": "Todo bien",
            "metrics": {"totalRecords": 3, "dateRange": "a a b", "columnsAnalyzed": 4},
            "area": "inventarios",
        }
        result = AnalysisResult.from_response(payload)
        assert result.category is Category.INVENTORY
        assert result.narrative == "Todo bien"
        assert result.metrics.total_records == 3

    def test_response_serializes_area_as_tag(self):
        response = AnalysisResponse.model_validate({
            "analysis": "x",
            "metrics": {"totalRecords": 0, "dateRange": "undefined a undefined", "columnsAnalyzed": 0},
            "area": "cuentas_pagar",
        })
        assert response.model_dump(mode="json", by_alias=True)["area"] == "cuentas_pagar"


# SETTINGS TESTS


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.AI_MODEL == "google/gemini-2.5-flash"
        assert s.SAMPLE_ROWS == 10
        assert s.max_upload_bytes == 10 * 1024 * 1024

    def test_gateway_key_accepts_legacy_env_name(self, monkeypatch):
        monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
        monkeypatch.setenv("LOVABLE_API_KEY", "legacy-key")
        s = Settings(_env_file=None)
        assert s.AI_GATEWAY_API_KEY.get_secret_value() == "legacy-key"

    def test_supabase_url_trailing_slash_removed(self):
        s = Settings(_env_file=None, SUPABASE_URL="https://demo.supabase.co/")
        assert s.SUPABASE_URL == "https://demo.supabase.co"

    def test_production_requires_collaborators(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, APP_ENV="production")
