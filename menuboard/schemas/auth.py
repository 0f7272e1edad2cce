from pydantic import BaseModel


class LoginRequest(BaseModel):
    password: str = ""


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
