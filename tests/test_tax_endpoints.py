import pytest

from maica.core.security import create_access_token


def test_calculate_requires_token(client):
    resp = client.post("/tax/calculate", json={"revenue": 1000})
    assert resp.status_code == 401
    body = resp.json()
    assert body["error"]["code"] == "USR100"
    assert body["error"]["message"] == "No token provided"


def test_calculate_rejects_bad_token(client):
    resp = client.post(
        "/tax/calculate",
        json={"revenue": 1000},
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "USR101"


def test_calculate_rejects_expired_token(client):
    token = create_access_token("user-1", expires_minutes=-5)
    resp = client.get("/tax/rates", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["error"]["details"]["reason"] == "expired"


def test_calculate_full_estimate(client, auth_headers):
    resp = client.post(
        "/tax/calculate",
        json={
            "revenue": 50_000_000,
            "expenses": 20_000_000,
            "salaries": 10_000_000,
            "companySize": "auto",
            "isVATRegistered": True,
            "calculatePAYE": True,
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["ok"] is True
    assert data["summary"] == {
        "revenue": 50_000_000,
        "expenses": 20_000_000,
        "salaries": 10_000_000,
        "profit": 20_000_000,
    }
    taxes = data["taxes"]
    assert taxes["companyIncomeTax"] == {"tax": 0, "rate": 0, "category": "small"}
    assert taxes["vat"]["applicable"] is True
    assert taxes["vat"]["vat"] == 3_750_000
    assert taxes["vat"]["rate"] == 7.5
    assert taxes["paye"]["estimatedPAYE"] == 2_192_000
    assert "estimate based on total salaries" in taxes["paye"]["note"]
    assert taxes["educationTax"]["amount"] == 400_000
    assert taxes["educationTax"]["rate"] == 2
    assert taxes["nitdaLevy"] == {
        "amount": 0,
        "applicable": False,
        "rate": 1,
        "note": "NITDA Levy (1% of profit before tax for companies with turnover >= ₦100M)",
    }
    assert data["totalEstimatedTax"] == 2_592_000
    assert data["vatCollectable"] == 3_750_000
    assert "qualified tax professional" in data["disclaimer"]


def test_calculate_defaults_with_empty_body(client, auth_headers):
    resp = client.post("/tax/calculate", json={}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["summary"]["profit"] == 0
    assert data["taxes"]["companyIncomeTax"]["category"] == "loss"
    assert data["taxes"]["paye"] is None
    assert data["taxes"]["vat"]["reason"] == "Below VAT threshold or not registered"
    assert data["totalEstimatedTax"] == 0


def test_calculate_without_body(client, auth_headers):
    resp = client.post("/tax/calculate", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["totalEstimatedTax"] == 0


def test_calculate_coerces_garbage_instead_of_422(client, auth_headers):
    resp = client.post(
        "/tax/calculate",
        json={
            "revenue": "not a number",
            "expenses": None,
            "salaries": {"nested": True},
            "companySize": 42,
            "isVATRegistered": "yes",
            "calculatePAYE": "maybe",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["summary"]["revenue"] == 0
    assert data["taxes"]["companyIncomeTax"]["category"] == "loss"
    assert data["taxes"]["vat"]["applicable"] is False
    assert data["totalEstimatedTax"] == 0


@pytest.mark.parametrize("body", [[1, 2], "revenue", 42])
def test_calculate_non_object_body_uses_defaults(client, auth_headers, body):
    resp = client.post("/tax/calculate", json=body, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["summary"]["revenue"] == 0
    assert data["totalEstimatedTax"] == 0


def test_pit_non_object_body_is_zero_income(client, auth_headers):
    resp = client.post("/tax/pit", json=[300_000], headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["totalTax"] == 0

def test_calculate_excludes_vat_from_total(client, auth_headers):
    resp = client.post(
        "/tax/calculate",
        json={"revenue": 90_000_000, "expenses": 90_000_000},
        headers=auth_headers,
    )
    data = resp.json()
    assert data["vatCollectable"] == 6_750_000
    assert data["totalEstimatedTax"] == 0


def test_pit_endpoint(client, auth_headers):
    resp = client.post("/tax/pit", json={"annualIncome": 600_000}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["annualIncome"] == 600_000
    assert data["totalTax"] == 54_000
    assert data["monthlyTax"] == 4_500
    assert data["effectiveRate"] == "9.00%"
    assert data["breakdown"] == [
        {"range": "₦0 - ₦300,000", "rate": "7%", "taxableAmount": 300_000, "tax": 21_000},
        {"range": "₦300,000 - ₦600,000", "rate": "11%", "taxableAmount": 300_000, "tax": 33_000},
    ]
    assert "PIT rates" in data["disclaimer"]


def test_pit_endpoint_zero_income(client, auth_headers):
    resp = client.post("/tax/pit", json={"annualIncome": "abc"}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["totalTax"] == 0
    assert data["effectiveRate"] == "0%"
    assert data["breakdown"] == []


def test_rates_endpoint(client, auth_headers):
    resp = client.get("/tax/rates", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["vat"]["rate"] == 7.5
    assert data["vat"]["threshold"] == 25_000_000
    assert data["cit"]["small"] == {"threshold": 25_000_000, "rate": 0}
    assert data["cit"]["medium"] == {"threshold": 100_000_000, "rate": 20}
    assert data["cit"]["large"] == {"threshold": None, "rate": 30}
    assert len(data["pit"]["brackets"]) == 6
    assert data["pit"]["brackets"][-1] == {"range": "Above ₦3,200,000", "rate": "24%"}
    assert data["other"]["educationTax"]["rate"] == 2
    assert data["other"]["nitdaLevy"]["threshold"] == 100_000_000
    assert data["lastUpdated"] == "2024"
    assert data["source"] == "FIRS Nigeria"


def test_vat_line_exclusive(client, auth_headers):
    resp = client.get(
        "/tax/vat/calculate",
        params={"amount": 10_000, "discount": 2_000},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data == {
        "ok": True,
        "subtotal": 8_000,
        "taxRate": 7.5,
        "taxAmount": 600,
        "total": 8_600,
        "inclusive": False,
    }


def test_vat_line_inclusive_from_quantity(client, auth_headers):
    resp = client.get(
        "/tax/vat/calculate",
        params={"quantity": 2, "unitPrice": 5_375, "inclusive": "true"},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["total"] == 10_750
    assert data["taxAmount"] == 750
    assert data["subtotal"] == 10_000


def test_vat_line_requires_amount_or_price(client, auth_headers):
    resp = client.get("/tax/vat/calculate", headers=auth_headers)
    assert resp.status_code == 400
