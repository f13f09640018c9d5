"""
tests/test_mail_service.py -- Contact/attestation email rendering and delivery.
"""

from __future__ import annotations

import aiosmtplib
import pytest
from fastapi.testclient import TestClient

from alumni.api.v1 import deps
from alumni.core.config import settings
from alumni.core.exceptions import MailDeliveryException
from alumni.main import app
from alumni.schemas.contact_schema import ALUMNI_CARD_APPLICATION, ContactRequest
from alumni.services.mail_service import MailService, render_contact_html
from fakes import FakeDatabase, auth_headers


@pytest.fixture
def smtp_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "SMTP_HOST", "smtp.example.com")
    monkeypatch.setattr(settings, "SMTP_PORT", 587)
    monkeypatch.setattr(settings, "SMTP_USER", "mailer@example.com")
    monkeypatch.setattr(settings, "SMTP_PASSWORD", "app-password")
    monkeypatch.setattr(settings, "CONTACT_RECIPIENT", "office@example.com")


class TestRendering:
    def test_request_values_are_escaped(self) -> None:
        html = render_contact_html(ContactRequest(
            attestation_type="Degree",
            student_name="<script>alert(1)</script>",
            email="x@example.com",
        ))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_attestation_template(self) -> None:
        html = render_contact_html(ContactRequest(attestation_type="Transcript", degree_level="BS"))
        assert "<h2>Transcript</h2>" in html
        assert "Degree Level:</strong> BS" in html

    def test_card_application_template(self) -> None:
        req = ContactRequest(
            attestation_type=ALUMNI_CARD_APPLICATION,
            student_name="Hira",
            phone="35202-1234567-1",
            additional_info="Collect in person",
        )
        html = render_contact_html(req)
        assert "CNIC:</strong> 35202-1234567-1" in html
        assert "Collect in person" in html
        assert "Degree Level" not in html

    def test_default_subject(self) -> None:
        assert ContactRequest().subject == "Degree Attestation Request"


class TestDelivery:
    def test_message_headers_and_attachment(self, smtp_settings) -> None:
        req = ContactRequest(attestation_type="Degree", email="student@example.com")
        message = MailService().build_message(req, ("transcript.pdf", b"%PDF"))
        assert message["Subject"] == "Degree"
        assert message["To"] == "office@example.com"
        assert message["Reply-To"] == "student@example.com"
        parts = message.get_payload()
        assert len(parts) == 2
        assert parts[1].get_filename() == "transcript.pdf"

    @pytest.mark.asyncio
    async def test_unconfigured_smtp_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "SMTP_USER", None)
        with pytest.raises(MailDeliveryException):
            await MailService().send_contact_request(ContactRequest(attestation_type="Degree"))

    @pytest.mark.asyncio
    async def test_sends_through_smtp(self, smtp_settings, monkeypatch: pytest.MonkeyPatch) -> None:
        sent = []

        async def fake_send(message, **kwargs):
            sent.append((message, kwargs))

        monkeypatch.setattr(aiosmtplib, "send", fake_send)
        await MailService().send_contact_request(ContactRequest(attestation_type="Degree"))

        (message, kwargs), = sent
        assert message["Subject"] == "Degree"
        assert kwargs["hostname"] == "smtp.example.com"
        assert kwargs["username"] == "mailer@example.com"

    @pytest.mark.asyncio
    async def test_smtp_failure_is_reported(self, smtp_settings, monkeypatch: pytest.MonkeyPatch) -> None:
        async def broken_send(message, **kwargs):
            raise aiosmtplib.SMTPConnectError("connection refused")

        monkeypatch.setattr(aiosmtplib, "send", broken_send)
        with pytest.raises(MailDeliveryException):
            await MailService().send_contact_request(ContactRequest(attestation_type="Degree"))


class RecordingMailService(MailService):
    def __init__(self):
        super().__init__()
        self.sent = []

    async def send_contact_request(self, req, attachment=None):
        self.sent.append((req, attachment))


def test_send_email_endpoint(client: TestClient, db: FakeDatabase) -> None:
    mailer = RecordingMailService()
    app.dependency_overrides[deps.get_mail_service] = lambda: mailer
    alumnus = db.add_user("r1@x.com", "pass1234", "R1")

    res = client.post(
        "/api/send-email",
        data={"attestationType": "Degree", "studentName": "Ali"},
        files={"attachment": ("cnic.jpg", b"jpeg", "image/jpeg")},
        headers=auth_headers(alumnus),
    )
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Email sent successfully"}

    (req, attachment), = mailer.sent
    assert req.registration_number == "R1"
    assert req.email == "r1@x.com"
    assert attachment == ("cnic.jpg", b"jpeg")


def test_send_email_requires_login(client: TestClient) -> None:
    res = client.post("/api/send-email", data={"attestationType": "Degree"})
    assert res.status_code == 401


def test_oversized_attachment_is_refused(
    client: TestClient, db: FakeDatabase, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "MAX_ATTACHMENT_BYTES", 1024)
    mailer = RecordingMailService()
    app.dependency_overrides[deps.get_mail_service] = lambda: mailer
    alumnus = db.add_user("r1@x.com", "pass1234", "R1")

    res = client.post(
        "/api/send-email",
        data={"attestationType": "Degree"},
        files={"attachment": ("scan.pdf", b"x" * 1025, "application/pdf")},
        headers=auth_headers(alumnus),
    )
    assert res.status_code == 413
    assert res.json()["success"] is False
    assert mailer.sent == []


def test_attachment_at_the_limit_is_sent(
    client: TestClient, db: FakeDatabase, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "MAX_ATTACHMENT_BYTES", 1024)
    mailer = RecordingMailService()
    app.dependency_overrides[deps.get_mail_service] = lambda: mailer
    alumnus = db.add_user("r1@x.com", "pass1234", "R1")

    res = client.post(
        "/api/send-email",
        data={"attestationType": "Degree"},
        files={"attachment": ("scan.pdf", b"x" * 1024, "application/pdf")},
        headers=auth_headers(alumnus),
    )
    assert res.status_code == 200
    (_, attachment), = mailer.sent
    assert len(attachment[1]) == 1024
