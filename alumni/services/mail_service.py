"""
Outbound mail for contact and attestation requests.

Messages are built with the stdlib email package and delivered over SMTP
with aiosmtplib. Every value that came from the request is HTML-escaped
before it goes into the body.
"""

import logging
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape
from typing import Optional

import aiosmtplib

from alumni.core.config import settings
from alumni.core.exceptions import MailDeliveryException
from alumni.schemas.contact_schema import ContactRequest

logger = logging.getLogger(__name__)


def _e(value) -> str:
    return escape(str(value)) if value is not None else ""


def render_contact_html(req: ContactRequest) -> str:
    if req.is_card_application:
        extra = (
            f"<p><strong>Additional Information:</strong><br>{_e(req.additional_info)}</p>"
            if req.additional_info else ""
        )
        body = (
            f"<p><strong>Student Name:</strong> {_e(req.student_name)}</p>"
            f"<p><strong>Registration Number:</strong> {_e(req.registration_number)}</p>"
            f"<p><strong>Graduation Year:</strong> {_e(req.graduation_year)}</p>"
            f"<p><strong>CNIC:</strong> {_e(req.phone)}</p>"
            f"<p><strong>Email:</strong> {_e(req.email)}</p>"
            f"{extra}"
        )
    else:
        body = (
            f"<p><strong>Attestation Type:</strong> {_e(req.attestation_type)}</p>"
            f"<p><strong>Degree Level:</strong> {_e(req.degree_level)}</p>"
            f"<p><strong>Registration Number:</strong> {_e(req.registration_number)}</p>"
            f"<p><strong>Student Name:</strong> {_e(req.student_name)}</p>"
            f"<p><strong>Year of Graduation:</strong> {_e(req.graduation_year)}</p>"
            f"<p><strong>Contact Information:</strong></p>"
            f"<ul><li>Email: {_e(req.email)}</li><li>Phone: {_e(req.phone)}</li></ul>"
        )
    return f"<h2>{_e(req.subject)}</h2>{body}"


class MailService:
    def __init__(self):
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_user = settings.SMTP_USER
        self.smtp_password = settings.SMTP_PASSWORD
        self.from_email = settings.EMAIL_FROM or settings.SMTP_USER
        self.recipient = settings.CONTACT_RECIPIENT

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_user and self.smtp_password and self.recipient)

    def build_message(
        self,
        req: ContactRequest,
        attachment: Optional[tuple[str, bytes]] = None,
    ) -> MIMEMultipart:
        message = MIMEMultipart()
        message["Subject"] = req.subject
        message["From"] = self.from_email or ""
        message["To"] = self.recipient or ""
        if req.email:
            message["Reply-To"] = req.email
        message.attach(MIMEText(render_contact_html(req), "html", "utf-8"))

        if attachment is not None:
            filename, content = attachment
            part = MIMEApplication(content)
            part.add_header("Content-Disposition", "attachment", filename=filename)
            message.attach(part)
        return message

    async def send_contact_request(
        self,
        req: ContactRequest,
        attachment: Optional[tuple[str, bytes]] = None,
    ) -> None:
        if not self.is_configured:
            logger.error("[Email] SMTP is not configured; cannot send '%s'", req.subject)
            raise MailDeliveryException()

        message = self.build_message(req, attachment)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.smtp_host,
                port=self.smtp_port,
                username=self.smtp_user,
                password=self.smtp_password,
                start_tls=True,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("[Email] Failed to send '%s': %s", req.subject, e)
            raise MailDeliveryException()
        logger.info("[Email] Sent '%s' to %s", req.subject, self.recipient)
