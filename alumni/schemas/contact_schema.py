from typing import Optional

from pydantic import BaseModel

ALUMNI_CARD_APPLICATION = "Alumni Card Application"
DEFAULT_SUBJECT = "Degree Attestation Request"


class ContactRequest(BaseModel):
    attestation_type: Optional[str] = None
    degree_level: Optional[str] = None
    registration_number: Optional[str] = None
    student_name: Optional[str] = None
    graduation_year: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    additional_info: Optional[str] = None

    @property
    def subject(self) -> str:
        return self.attestation_type or DEFAULT_SUBJECT

    @property
    def is_card_application(self) -> bool:
        return self.attestation_type == ALUMNI_CARD_APPLICATION
