from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from alumni.api.v1.deps import get_current_principal, get_mail_service
from alumni.core.config import settings
from alumni.core.exceptions import AttachmentTooLargeException
from alumni.schemas.auth_schema import MessageOut, Principal
from alumni.schemas.contact_schema import ContactRequest
from alumni.services.mail_service import MailService

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/send-email", response_model=MessageOut)
async def send_contact_email(
    principal: Principal = Depends(get_current_principal),
    attestationType: Optional[str] = Form(None),
    degreeLevel: Optional[str] = Form(None),
    registrationNumber: Optional[str] = Form(None),
    studentName: Optional[str] = Form(None),
    graduationYear: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    additionalInfo: Optional[str] = Form(None),
    attachment: Optional[UploadFile] = File(None),
    mail_svc: MailService = Depends(get_mail_service),
):
    req = ContactRequest(
        attestation_type=attestationType,
        degree_level=degreeLevel,
        registration_number=registrationNumber or principal.registration_number,
        student_name=studentName,
        graduation_year=graduationYear,
        email=email or principal.email,
        phone=phone,
        additional_info=additionalInfo,
    )
    attached = None
    if attachment is not None and attachment.filename:
        limit = settings.MAX_ATTACHMENT_BYTES
        content = await attachment.read(limit + 1)
        if len(content) > limit:
            raise AttachmentTooLargeException(limit)
        attached = (attachment.filename, content)
    await mail_svc.send_contact_request(req, attached)
    return MessageOut(message="Email sent successfully")
