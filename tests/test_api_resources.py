"""
tests/test_api_resources.py -- Owned resources, profiles and public listings over HTTP.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from fakes import FakeDatabase, auth_headers


def _two_alumni(db: FakeDatabase) -> tuple[dict, dict]:
    r1 = db.add_user("r1@x.com", "pass1234", "R1", name="Hamza Ali")
    r2 = db.add_user("r2@x.com", "pass1234", "R2", name="Zainab Noor")
    return r1, r2


class TestProjects:
    def test_create_and_list_own(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        res = client.post(
            "/api/projects",
            json={"project_title": "Thesis", "months_taken": 6},
            headers=auth_headers(r1),
        )
        assert res.status_code == 201
        created = res.json()
        assert created["registration_number"] == "R1"

        listed = client.get("/api/projects", headers=auth_headers(r1)).json()
        assert [p["id"] for p in listed] == [created["id"]]

    def test_owner_field_in_body_is_ignored(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        res = client.post(
            "/api/projects",
            json={"project_title": "Sneaky", "registration_number": "R2"},
            headers=auth_headers(r1),
        )
        assert res.json()["registration_number"] == "R1"

    def test_foreign_delete_is_forbidden_and_row_survives(self, client: TestClient, db: FakeDatabase) -> None:
        r1, r2 = _two_alumni(db)
        project = client.post(
            "/api/projects", json={"project_title": "Theirs"}, headers=auth_headers(r2)
        ).json()

        res = client.delete(f"/api/projects/{project['id']}", headers=auth_headers(r1))
        assert res.status_code == 403
        assert res.json() == {"success": False, "message": "This project does not belong to the current user."}
        assert db.resources["projects"][project["id"]]["project_title"] == "Theirs"

    def test_foreign_update_is_forbidden(self, client: TestClient, db: FakeDatabase) -> None:
        r1, r2 = _two_alumni(db)
        project = client.post(
            "/api/projects", json={"project_title": "Theirs"}, headers=auth_headers(r2)
        ).json()

        res = client.put(
            f"/api/projects/{project['id']}", json={"project_title": "Mine"}, headers=auth_headers(r1)
        )
        assert res.status_code == 403
        assert db.resources["projects"][project["id"]]["project_title"] == "Theirs"

    def test_missing_row_is_not_found(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        res = client.delete("/api/projects/9999", headers=auth_headers(r1))
        assert res.status_code == 404
        assert res.json()["success"] is False

    def test_owner_updates_and_deletes(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        headers = auth_headers(r1)
        project = client.post("/api/projects", json={"project_title": "Draft"}, headers=headers).json()

        res = client.put(
            f"/api/projects/{project['id']}",
            json={"project_title": "Final", "months_taken": 2},
            headers=headers,
        )
        assert res.status_code == 200
        assert res.json()["project_title"] == "Final"

        res = client.delete(f"/api/projects/{project['id']}", headers=headers)
        assert res.status_code == 200
        assert res.json() == {"success": True, "message": "Project deleted successfully"}
        assert db.resources["projects"] == {}

    def test_unauthenticated_create_is_rejected(self, client: TestClient, db: FakeDatabase) -> None:
        res = client.post("/api/projects", json={"project_title": "Anon"})
        assert res.status_code == 401
        assert db.resources["projects"] == {}


class TestPublicListings:
    def test_verified_owner_is_listed(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        client.post("/api/jobs", json={"job_title": "Engineer"}, headers=auth_headers(r1))
        res = client.get("/api/jobs/R1")
        assert res.status_code == 200
        assert [j["job_title"] for j in res.json()] == ["Engineer"]

    def test_unverified_owner_is_hidden(self, client: TestClient, db: FakeDatabase) -> None:
        pending = db.add_user("p@x.com", "pass1234", "P1", verified=False)
        client.post("/api/internships", json={"title": "Summer"}, headers=auth_headers(pending))
        assert client.get("/api/internships/P1").json() == []

    def test_search_only_returns_verified(self, client: TestClient, db: FakeDatabase) -> None:
        _two_alumni(db)
        db.add_user("p@x.com", "pass1234", "P1", verified=False, name="Hamza Pending")
        res = client.get("/api/search", params={"q": "hamza"})
        assert res.status_code == 200
        assert [r["registration_number"] for r in res.json()] == ["R1"]

    def test_unverified_profile_is_not_found(self, client: TestClient, db: FakeDatabase) -> None:
        db.add_user("p@x.com", "pass1234", "P1", verified=False)
        assert client.get("/api/profile/P1").status_code == 404


class TestAchievements:
    def test_multipart_create_with_file(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        res = client.post(
            "/api/achievements",
            data={"title": "Dean's list", "details": "Fall 2019"},
            files={"file": ("award letter.pdf", b"%PDF-1.4", "application/pdf")},
            headers=auth_headers(r1),
        )
        assert res.status_code == 201
        body = res.json()
        assert body["title"] == "Dean's list"
        assert body["file_path"].endswith("-award_letter.pdf")

    def test_foreign_update_does_not_store_file(self, client: TestClient, db: FakeDatabase) -> None:
        r1, r2 = _two_alumni(db)
        achievement = client.post(
            "/api/achievements", data={"title": "Theirs"}, headers=auth_headers(r2)
        ).json()

        res = client.put(
            f"/api/achievements/{achievement['id']}",
            data={"title": "Mine"},
            files={"file": ("x.png", b"png", "image/png")},
            headers=auth_headers(r1),
        )
        assert res.status_code == 403
        stored = db.resources["achievements"][achievement["id"]]
        assert stored["title"] == "Theirs"
        assert stored["file_path"] is None


class TestProfile:
    def test_update_own_profile(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        res = client.post(
            "/api/profile",
            data={"bio": "Backend developer", "is_employed": "true", "whatsapp": "03001234567"},
            files={"profile_picture": ("me.jpg", b"jpeg", "image/jpeg")},
            headers=auth_headers(r1),
        )
        assert res.status_code == 200
        body = res.json()
        assert body["bio"] == "Backend developer"
        assert body["is_employed"] is True
        assert body["whatsapp_number"] == "03001234567"
        assert body["profile_picture"].startswith("/uploads/")

    def test_public_profile_hides_email(self, client: TestClient, db: FakeDatabase) -> None:
        _two_alumni(db)
        body = client.get("/api/profile/R2").json()
        assert body["name"] == "Zainab Noor"
        assert "email" not in body


class TestEducationAndSkills:
    def test_education_upsert_keeps_one_row(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        headers = auth_headers(r1)
        assert client.get("/api/education", headers=headers).json()["id"] is None

        client.post("/api/education", json={"matric_institute": "City School"}, headers=headers)
        res = client.post(
            "/api/education",
            json={"matric_institute": "City School", "fsc_institute": "Govt College"},
            headers=headers,
        )
        assert res.status_code == 200
        assert len(db.education) == 1
        assert client.get("/api/education/R1").json()["fsc_institute"] == "Govt College"

    def test_skills_upsert_and_public_view(self, client: TestClient, db: FakeDatabase) -> None:
        r1, _ = _two_alumni(db)
        headers = auth_headers(r1)
        client.post("/api/skills", json={"skills": ["Python"]}, headers=headers)
        res = client.post("/api/skills", json={"skills": ["Python", " SQL ", ""]}, headers=headers)
        assert res.json()["skills"] == ["Python", "SQL"]
        assert len(db.skills) == 1
        assert client.get("/api/skills/R1").json() == ["Python", "SQL"]

    def test_foreign_skills_delete_is_forbidden(self, client: TestClient, db: FakeDatabase) -> None:
        r1, r2 = _two_alumni(db)
        skills = client.post("/api/skills", json={"skills": ["Go"]}, headers=auth_headers(r2)).json()
        res = client.delete(f"/api/skills/{skills['id']}", headers=auth_headers(r1))
        assert res.status_code == 403
        assert skills["id"] in db.skills
