# app/domains/auth/schemas.py

from sqlmodel import SQLModel


class Token(SQLModel):
    access_token: str
    token_type: str = "bearer"


class AdminRead(SQLModel):
    username: str
