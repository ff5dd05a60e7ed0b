"""API tests — endpoint behaviour across the audit workspace.

Covers: login gate, organisation profile, asset inventory, risk worksheet,
compliance checklist, dashboard, report and export endpoints, and error
responses.
"""

from __future__ import annotations

from cyberaudit.catalog import OWASP_TOP_10
from cyberaudit.store import audit_store


# ─── Session gate ────────────────────────────────────────────────────────────

class TestSessionEndpoints:
    """Tests for /api/session."""

    def test_initially_logged_out(self, anon_client):
        resp = anon_client.get("/api/session")
        assert resp.status_code == 200
        assert resp.json() == {"logged_in": False, "user": None}

    def test_login_accepts_any_credentials(self, anon_client):
        resp = anon_client.post("/api/session/login", json={"username": "x", "password": "wrong"})
        assert resp.status_code == 200
        assert resp.json() == {"logged_in": True, "user": "x"}

    def test_login_without_body(self, anon_client):
        resp = anon_client.post("/api/session/login")
        assert resp.json()["user"] == "Admin User"

    def test_logout(self, client):
        resp = client.post("/api/session/logout")
        assert resp.json()["logged_in"] is False
        assert client.get("/api/assets").status_code == 401

    def test_workspace_requires_login(self, anon_client):
        for path in ("/api/organisation", "/api/assets", "/api/risks", "/api/audit",
                     "/api/dashboard", "/api/report", "/api/report/export"):
            assert anon_client.get(path).status_code == 401, path

    def test_gate_can_be_disabled(self, make_client):
        client = make_client(login=False, require_login=False)
        assert client.get("/api/dashboard").status_code == 200

    def test_reset_restores_defaults_and_keeps_user(self, client):
        client.post("/api/assets", json={"name": "Extra"})
        client.post("/api/risks")
        resp = client.post("/api/session/reset")
        assert resp.json() == {"logged_in": True, "user": "Admin User"}
        assert len(client.get("/api/assets").json()) == 3
        assert client.get("/api/risks").json() == []


# ─── Organisation ────────────────────────────────────────────────────────────

class TestOrganisationEndpoints:
    """Tests for /api/organisation."""

    def test_get_profile(self, client):
        data = client.get("/api/organisation").json()
        assert data == {
            "name": "University Cyber Lab",
            "industry": "Education",
            "size": "100-500",
            "contact_email": "security@university.edu",
        }

    def test_partial_update(self, client):
        resp = client.put("/api/organisation", json={"name": "Contoso"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Contoso"
        assert resp.json()["industry"] == "Education"

    def test_unknown_field_rejected(self, client):
        resp = client.put("/api/organisation", json={"ceo": "someone"})
        assert resp.status_code == 422


# ─── Assets ──────────────────────────────────────────────────────────────────

class TestAssetEndpoints:
    """Tests for /api/assets."""

    def test_list_seeded(self, client):
        data = client.get("/api/assets").json()
        assert [a["id"] for a in data] == ["1", "2", "3"]
        assert data[0] == {
            "id": "1",
            "name": "Main Database Server",
            "type": "Hardware",
            "criticality": "Critical",
        }

    def test_add_default(self, client):
        resp = client.post("/api/assets")
        assert resp.status_code == 201
        data = resp.json()
        assert data["name"] == "New Asset"
        assert data["type"] == "Hardware"
        assert data["criticality"] == "Medium"
        assert client.get("/api/assets").json()[-1]["id"] == data["id"]

    def test_add_with_values(self, client):
        resp = client.post("/api/assets", json={"name": "SOC team", "type": "Personnel", "criticality": "High"})
        assert resp.status_code == 201
        assert resp.json()["type"] == "Personnel"

    def test_add_invalid_type(self, client):
        resp = client.post("/api/assets", json={"type": "Cloud"})
        assert resp.status_code == 422

    def test_update(self, client):
        resp = client.put("/api/assets/3", json={"criticality": "Low"})
        assert resp.status_code == 200
        assert resp.json()["criticality"] == "Low"
        assert resp.json()["name"] == "Research Data"

    def test_update_unknown(self, client):
        resp = client.put("/api/assets/missing", json={"name": "x"})
        assert resp.status_code == 404

    def test_delete(self, client):
        resp = client.delete("/api/assets/1")
        assert resp.status_code == 204
        assert [a["id"] for a in client.get("/api/assets").json()] == ["2", "3"]

    def test_delete_unknown_is_noop(self, client):
        resp = client.delete("/api/assets/missing")
        assert resp.status_code == 204
        assert len(client.get("/api/assets").json()) == 3


# ─── Risk worksheet ──────────────────────────────────────────────────────────

class TestRiskEndpoints:
    """Tests for /api/risks."""

    def test_catalog(self, client):
        data = client.get("/api/risks/catalog").json()
        assert data["categories"] == list(OWASP_TOP_10)

    def test_add_default(self, client):
        resp = client.post("/api/risks")
        assert resp.status_code == 201
        data = resp.json()
        assert data["name"] == OWASP_TOP_10[0]
        assert data["likelihood"] == 3
        assert data["impact"] == 3
        assert data["risk_score"] == 9
        assert data["severity"] == "High"

    def test_add_with_ratings(self, client):
        resp = client.post("/api/risks", json={"name": OWASP_TOP_10[2], "likelihood": 4, "impact": 4})
        assert resp.json()["risk_score"] == 16
        assert resp.json()["severity"] == "Critical"

    def test_add_rejects_risk_score(self, client):
        resp = client.post("/api/risks", json={"likelihood": 1, "impact": 1, "risk_score": 25})
        assert resp.status_code == 422

    def test_add_rejects_out_of_range(self, client):
        assert client.post("/api/risks", json={"likelihood": 6}).status_code == 422
        assert client.post("/api/risks", json={"impact": 0}).status_code == 422
        assert audit_store.vulnerabilities == []

    def test_add_rejects_unknown_category(self, client):
        resp = client.post("/api/risks", json={"name": "A99:2021-Bad Luck"})
        assert resp.status_code == 422
        assert audit_store.vulnerabilities == []

    def test_update_recomputes_score(self, client):
        vuln_id = client.post("/api/risks").json()["id"]
        resp = client.put(f"/api/risks/{vuln_id}", json={"likelihood": 2})
        assert resp.json()["risk_score"] == 6
        resp = client.put(f"/api/risks/{vuln_id}", json={"impact": 5})
        assert resp.json()["risk_score"] == 10
        assert client.get("/api/risks").json()[0]["risk_score"] == 10

    def test_update_rejects_out_of_range(self, client):
        vuln_id = client.post("/api/risks").json()["id"]
        resp = client.put(f"/api/risks/{vuln_id}", json={"likelihood": 9})
        assert resp.status_code == 422
        assert client.get("/api/risks").json()[0]["risk_score"] == 9

    def test_update_rejects_unknown_category(self, client):
        vuln_id = client.post("/api/risks").json()["id"]
        resp = client.put(f"/api/risks/{vuln_id}", json={"name": "Not a category"})
        assert resp.status_code == 422

    def test_update_unknown(self, client):
        resp = client.put("/api/risks/missing", json={"likelihood": 2})
        assert resp.status_code == 404

    def test_add_then_delete_round_trip(self, client):
        client.post("/api/risks", json={"name": OWASP_TOP_10[1]})
        client.post("/api/risks", json={"name": OWASP_TOP_10[3]})
        before = client.get("/api/risks").json()

        vuln_id = client.post("/api/risks", json={"likelihood": 5, "impact": 5}).json()["id"]
        assert client.delete(f"/api/risks/{vuln_id}").status_code == 204
        assert client.get("/api/risks").json() == before


# ─── Compliance checklist ────────────────────────────────────────────────────

class TestAuditEndpoints:
    """Tests for /api/audit."""

    def test_checklist_grouped(self, client):
        data = client.get("/api/audit").json()
        assert data["compliance_score"] == 0
        assert [g["category"] for g in data["categories"]] == [
            "Identify", "Protect", "Detect", "Respond", "Recover",
        ]
        assert all(len(g["items"]) == 2 for g in data["categories"])
        assert data["categories"][0]["items"][0]["id"] == "ID.AM-1"
        assert data["categories"][0]["items"][0]["status"] == "Non-Compliant"

    def test_set_status(self, client):
        resp = client.put("/api/audit/ID.AM-1", json={"status": "Compliant", "evidence": "asset-register.pdf"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "Compliant"
        assert data["evidence"] == "asset-register.pdf"
        assert data["category"] == "Identify"

    def test_clear_evidence(self, client):
        client.put("/api/audit/ID.AM-1", json={"status": "Compliant", "evidence": "asset-register.pdf"})
        kept = client.put("/api/audit/ID.AM-1", json={"status": "Compliant", "evidence": None}).json()
        assert kept["evidence"] == "asset-register.pdf"
        cleared = client.put("/api/audit/ID.AM-1", json={"status": "Compliant", "evidence": ""}).json()
        assert cleared["evidence"] is None

    def test_group_score_updates(self, client):
        client.put("/api/audit/RS.RP-1", json={"status": "Compliant"})
        client.put("/api/audit/RS.CO-1", json={"status": "Partially Compliant"})
        groups = {g["category"]: g for g in client.get("/api/audit").json()["categories"]}
        assert groups["Respond"]["score"] == 75

    def test_invalid_status(self, client):
        resp = client.put("/api/audit/ID.AM-1", json={"status": "Done"})
        assert resp.status_code == 422

    def test_unknown_control(self, client):
        resp = client.put("/api/audit/GV.OC-1", json={"status": "Compliant"})
        assert resp.status_code == 404

    def test_exclude_not_applicable_setting(self, make_client):
        client = make_client(exclude_not_applicable=True)
        client.put("/api/audit/ID.AM-1", json={"status": "Compliant"})
        client.put("/api/audit/ID.RA-1", json={"status": "Not Applicable"})
        groups = {g["category"]: g for g in client.get("/api/audit").json()["categories"]}
        assert groups["Identify"]["score"] == 100


# ─── Dashboard ───────────────────────────────────────────────────────────────

class TestDashboardEndpoint:
    """Tests for /api/dashboard."""

    def test_seeded_dashboard(self, client):
        data = client.get("/api/dashboard").json()
        assert data["compliance_score"] == 0
        assert data["active_risks"] == 0
        assert data["total_assets"] == 3
        assert data["audit_status"] == "In Progress"
        assert [c["name"] for c in data["category_scores"]] == [
            "Identify", "Protect", "Detect", "Respond", "Recover",
        ]
        assert data["risk_chart"] == []

    def test_compliance_fifty_percent(self, client):
        for control_id in ("ID.AM-1", "ID.RA-1", "PR.AC-1", "PR.DS-1"):
            client.put(f"/api/audit/{control_id}", json={"status": "Compliant"})
        for control_id in ("DE.AE-1", "DE.CM-1"):
            client.put(f"/api/audit/{control_id}", json={"status": "Partially Compliant"})

        data = client.get("/api/dashboard").json()
        assert data["compliance_score"] == 50
        scores = {c["name"]: c["score"] for c in data["category_scores"]}
        assert scores == {"Identify": 100, "Protect": 100, "Detect": 50, "Respond": 0, "Recover": 0}

    def test_risk_chart(self, client):
        client.post("/api/risks", json={"likelihood": 5, "impact": 4})
        data = client.get("/api/dashboard").json()
        assert data["active_risks"] == 1
        assert data["risk_chart"] == [{"name": "A01:2021-B...", "score": 20}]


# ─── Report ──────────────────────────────────────────────────────────────────

class TestReportEndpoints:
    """Tests for /api/report and /api/report/export."""

    def test_seeded_report(self, client):
        data = client.get("/api/report").json()
        assert data["organisation_name"] == "University Cyber Lab"
        assert data["compliance_score"] == 0
        assert data["top_findings"] == []
        assert data["no_findings_text"] == "No significant findings reported."
        assert data["lead_auditor"] == "Admin User"

    def test_top_findings_in_worksheet_order(self, client):
        for likelihood, impact in ((1, 2), (2, 2), (3, 3), (5, 5)):
            client.post("/api/risks", json={"likelihood": likelihood, "impact": impact})
        findings = client.get("/api/report").json()["top_findings"]
        assert [f["risk_score"] for f in findings] == [2, 4, 9]

    def test_top_findings_count_setting(self, make_client):
        client = make_client(top_findings_count=1)
        client.post("/api/risks")
        client.post("/api/risks")
        assert len(client.get("/api/report").json()["top_findings"]) == 1

    def test_export_markdown(self, client):
        client.put("/api/organisation", json={"name": "Fabrikam"})
        resp = client.get("/api/report/export")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/markdown")
        assert "Fabrikam" in resp.text
        assert "# Security Audit Report" in resp.text
