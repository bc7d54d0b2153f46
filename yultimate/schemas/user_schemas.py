from typing import List

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

PHONE_PATTERN = r"^\d{10}$"

class PasswordConfirmation(BaseModel):
    # Validated on the form and then dropped: there is no credential store.
    password: str = Field(..., min_length=6, exclude=True)
    confirm_password: str = Field(..., exclude=True)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self

class ParticipantRegistration(BaseModel):
    full_name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN, description="Phone number must be 10 digits.")
    location: str = Field(..., min_length=2)

class OrganizerRegistration(PasswordConfirmation):
    personal_name: str = Field(..., min_length=2)
    org_name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN)

class CoachRegistration(PasswordConfirmation):
    full_name: str = Field(..., min_length=2)
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN)
    communities: List[str]
    experience_years: int = Field(default=0, ge=0)

    @field_validator("communities")
    @classmethod
    def at_least_one_community(cls, v):
        v = [c for c in v if c]
        if not v:
            raise ValueError("You have to select at least one community.")
        return v

class OrganizationCreate(BaseModel):
    name: str = Field(..., min_length=3)
