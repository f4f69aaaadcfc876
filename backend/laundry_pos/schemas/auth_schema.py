from pydantic import BaseModel

class LoginRequest(BaseModel):
    username: str
    password: str

class TokenPayload(BaseModel):
    id: str
    username: str
    role: str
    exp: int
