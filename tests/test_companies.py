"""
Tests for the companies resource (repository SQL and HTTP routes).
"""

import asyncpg
import pytest

from companies import repository


class TestCompanyRepository:
    """Test the SQL the repository hands to the database."""

    async def test_list_without_filters(self, fake_db, sample_company):
        fake_db.queue([sample_company])

        rows = await repository.list_companies()

        assert rows == [sample_company]
        kind, statement, args = fake_db.last
        assert kind == "fetch_all"
        assert "WHERE" not in statement
        assert 'num_employees AS "numEmployees"' in statement
        assert args == ()

    async def test_list_with_filters(self, fake_db):
        await repository.list_companies({"name": "c", "minEmployees": 2})

        _, statement, args = fake_db.last
        assert "name ILIKE '%' || $1 || '%'" in statement
        assert "num_employees >= $2" in statement
        assert args == ("c", 2)

    async def test_update_translates_columns(self, fake_db, sample_company):
        fake_db.queue(sample_company)

        await repository.update_company("c1", {"numEmployees": 10, "logoUrl": None})

        _, statement, args = fake_db.last
        assert '"num_employees"=$1, "logo_url"=$2' in statement
        assert "WHERE handle = $3" in statement
        assert args == (10, None, "c1")


class TestCompanyRoutes:
    """Test /companies endpoints."""

    def test_create_ok_for_admin(self, client, fake_db, admin_headers, sample_company):
        fake_db.queue(None, sample_company)

        resp = client.post("/companies", json=sample_company, headers=admin_headers)

        assert resp.status_code == 201
        assert resp.json() == {"company": sample_company}
        _, _, args = fake_db.last
        assert args == ("c1", "C1", "Desc1", 1, "http://c1.img")

    def test_create_unauth_for_non_admin(self, client, fake_db, u1_headers, sample_company):
        resp = client.post("/companies", json=sample_company, headers=u1_headers)

        assert resp.status_code == 401
        assert fake_db.calls == []

    def test_create_unauth_for_anon(self, client, fake_db, sample_company):
        resp = client.post("/companies", json=sample_company)

        assert resp.status_code == 401

    def test_create_duplicate(self, client, fake_db, admin_headers, sample_company):
        fake_db.queue({"handle": "c1"})

        resp = client.post("/companies", json=sample_company, headers=admin_headers)

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Duplicate company: c1"

    def test_create_duplicate_name(self, client, fake_db, admin_headers, sample_company):
        fake_db.queue(None, asyncpg.UniqueViolationError("companies_name_key"))

        resp = client.post("/companies", json=sample_company, headers=admin_headers)

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Duplicate company name: C1"

    @pytest.mark.parametrize("handle", ["BadHandle", "c 1", "c1;drop"])
    def test_create_rejects_non_lowercase_handle(self, client, fake_db, admin_headers, sample_company, handle):
        resp = client.post("/companies", json={**sample_company, "handle": handle}, headers=admin_headers)

        assert resp.status_code == 422
        assert fake_db.calls == []

    def test_list_no_filter(self, client, fake_db, sample_company):
        fake_db.queue([sample_company])

        resp = client.get("/companies")

        assert resp.status_code == 200
        assert resp.json() == {"companies": [sample_company]}

    def test_list_coerces_filter_values(self, client, fake_db):
        resp = client.get("/companies", params={"name": "c", "minEmployees": "2", "maxEmployees": "3"})

        assert resp.status_code == 200
        _, _, args = fake_db.last
        assert args == ("c", 2, 3)

    def test_list_unrecognized_filter(self, client, fake_db):
        resp = client.get("/companies", params={"name": "c", "fakeQueryField": "x"})

        assert resp.status_code == 400
        assert "fakeQueryField" in resp.json()["detail"]
        assert fake_db.calls == []

    def test_list_non_integer_bound(self, client, fake_db):
        resp = client.get("/companies", params={"minEmployees": "lots"})

        assert resp.status_code == 400
        assert fake_db.calls == []

    def test_list_min_greater_than_max(self, client, fake_db):
        resp = client.get("/companies", params={"minEmployees": "5", "maxEmployees": "1"})

        assert resp.status_code == 400
        assert fake_db.calls == []

    def test_get_attaches_jobs(self, client, fake_db, sample_company):
        jobs = [{"id": 1, "title": "job 1", "salary": 50000, "equity": "0"}]
        fake_db.queue(dict(sample_company), jobs)

        resp = client.get("/companies/c1")

        assert resp.status_code == 200
        assert resp.json() == {"company": {**sample_company, "jobs": jobs}}

    def test_get_not_found(self, client, fake_db):
        resp = client.get("/companies/nope")

        assert resp.status_code == 404
        assert resp.json()["detail"] == "No company: nope"

    def test_update(self, client, fake_db, admin_headers, sample_company):
        fake_db.queue({**sample_company, "name": "C1-new"})

        resp = client.patch("/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

        assert resp.status_code == 200
        assert resp.json()["company"]["name"] == "C1-new"
        _, statement, args = fake_db.last
        assert '"name"=$1' in statement
        assert args == ("C1-new", "c1")

    def test_update_empty_body(self, client, fake_db, admin_headers):
        resp = client.patch("/companies/c1", json={}, headers=admin_headers)

        assert resp.status_code == 400
        assert resp.json()["detail"] == "No data"
        assert fake_db.calls == []

    def test_update_rejects_handle_change(self, client, fake_db, admin_headers):
        resp = client.patch("/companies/c1", json={"handle": "c9"}, headers=admin_headers)

        assert resp.status_code == 422

    def test_update_duplicate_name(self, client, fake_db, admin_headers):
        fake_db.queue(asyncpg.UniqueViolationError("companies_name_key"))

        resp = client.patch("/companies/c1", json={"name": "C2"}, headers=admin_headers)

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Duplicate company name: C2"

    def test_update_not_found(self, client, fake_db, admin_headers):
        resp = client.patch("/companies/nope", json={"name": "x"}, headers=admin_headers)

        assert resp.status_code == 404

    def test_delete(self, client, fake_db, admin_headers):
        fake_db.queue({"handle": "c1"})

        resp = client.delete("/companies/c1", headers=admin_headers)

        assert resp.json() == {"deleted": "c1"}

    @pytest.mark.parametrize("method", ["patch", "delete"])
    def test_mutations_require_admin(self, client, fake_db, u1_headers, method):
        kwargs = {"json": {"name": "x"}} if method == "patch" else {}

        resp = getattr(client, method)("/companies/c1", headers=u1_headers, **kwargs)

        assert resp.status_code == 401
