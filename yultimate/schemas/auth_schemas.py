from pydantic import BaseModel

from yultimate.models.user_model import Role

class RoleLoginRequest(BaseModel):
    # Role selection only; there is no credential
    role: Role
