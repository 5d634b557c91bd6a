from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class Credenciais(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class UsuarioRead(BaseModel):
    id: int
    email: EmailStr
    nome: Optional[str] = None
    role: str

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str
    user_info: UsuarioRead
