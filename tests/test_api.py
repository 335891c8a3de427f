"""
FastAPI endpoint tests for the arXiv Stamp API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from api import app
from fastapi.testclient import TestClient

client = TestClient(app)


REFERENCES = (
    "arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007\n"
    "\n"
    "arXiv:9912.12345v2 [bogus.cat] 1 Jun 2007\n"
    "arXiv:0706.0001v1 [q-bio.CB] 30 Feb 2007\n"
)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["categories_loaded"] > 100


class TestIdentifierEndpoint:
    def test_parses_new_scheme(self) -> None:
        resp = client.post("/identifiers/parse", json={"text": "arXiv:9912.12345v2"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["year"] == 2099
        assert data["month"] == 12
        assert data["number"] == "12345"
        assert data["version"] == 2
        assert data["scheme"] == "new"
        assert data["canonical"] == "arXiv:9912.12345v2"

    def test_parses_old_scheme(self) -> None:
        data = client.post("/identifiers/parse", json={"text": "hep-th/9901001"}).json()
        assert data["archive"] == "hep-th"
        assert data["version"] is None

    def test_invalid_month_is_422(self) -> None:
        resp = client.post("/identifiers/parse", json={"text": "arXiv:9913.12345"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_MONTH"

    def test_empty_text_is_invalid_format(self) -> None:
        resp = client.post("/identifiers/parse", json={"text": ""})
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_FORMAT"


class TestStampEndpoint:
    def test_parses_stamp(self) -> None:
        resp = client.post(
            "/stamps/parse", json={"text": "arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007"}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["category"] == "q-bio.CB"
        assert data["submitted"] == "2007-06-01"
        assert data["group"] == "Quantitative Biology"
        assert data["identifier"]["number"] == "0001"
        assert data["canonical"] == "arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007"

    def test_unknown_category(self) -> None:
        resp = client.post(
            "/stamps/parse", json={"text": "arXiv:9912.12345v2 [bogus.cat] 1 Jun 2007"}
        )
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "UNKNOWN_CATEGORY"
        assert data["details"]["category"] == "bogus.cat"

    def test_invalid_day(self) -> None:
        resp = client.post(
            "/stamps/parse", json={"text": "arXiv:0706.0001v1 [q-bio.CB] 30 Feb 2007"}
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_DAY"


class TestScanEndpoint:
    def test_scan_report(self) -> None:
        resp = client.post("/stamps/scan", json={"text": REFERENCES})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_clean"] is False
        assert data["accepted"] == 1
        assert data["rejected"] == 2
        assert len(data["original_hash"]) == 64  # SHA-256 hex

    def test_entries(self) -> None:
        data = client.post("/stamps/scan", json={"text": REFERENCES}).json()
        entries = data["entries"]
        assert [e["line_number"] for e in entries] == [1, 3, 4]
        assert entries[0]["stamp"]["category"] == "q-bio.CB"
        assert entries[1]["finding"]["code"] == "UNKNOWN_CATEGORY"
        assert entries[2]["finding"]["code"] == "INVALID_DAY"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/stamps/parse", json={})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/identifiers/parse")
        assert resp.status_code == 422


class TestFileUploadEndpoint:
    def test_upload_text_file(self) -> None:
        resp = client.post(
            "/stamps/scan/file",
            files={"file": ("refs.txt", REFERENCES.encode("utf-8"), "text/plain")},
        )
        assert resp.status_code == 200
        assert resp.json()["accepted"] == 1

    def test_upload_non_utf8_file(self) -> None:
        resp = client.post(
            "/stamps/scan/file",
            files={"file": ("refs.txt", b"\xff\xfe\x00bad", "text/plain")},
        )
        assert resp.status_code == 400


class TestCategoryEndpoint:
    def test_valid_category(self) -> None:
        data = client.get("/categories/q-bio.CB").json()
        assert data["valid"] is True
        assert data["archive"] == "q-bio"
        assert data["subclass"] == "CB"
        assert data["group"] == "Quantitative Biology"

    def test_bare_archive(self) -> None:
        data = client.get("/categories/hep-th").json()
        assert data["valid"] is True
        assert data["subclass"] is None

    def test_unknown_category(self) -> None:
        data = client.get("/categories/bogus.cat").json()
        assert data == {
            "category": "bogus.cat",
            "valid": False,
            "archive": None,
            "subclass": None,
            "group": None,
        }
