from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

from app.enums.user_role import UserRole, Gender, Occupation


class UserBase(BaseModel):
    name: str
    email: EmailStr


class UserCreate(UserBase):
    password: str
    role: Optional[UserRole] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    gender: Optional[Gender] = None
    occupation: Optional[Occupation] = None


class UserSummary(BaseModel):
    """Datos mínimos de un usuario para mostrar junto a otros registros"""

    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class UserInDB(UserBase):
    id: int
    contact: Optional[str] = ""
    gender: Optional[str] = ""
    occupation: Optional[str] = ""
    role: UserRole
    is_active: bool = True
    created_at: datetime

    class Config:
        from_attributes = True


class UserResponse(UserInDB):
    pass


class LoginResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


class RoleUpdate(BaseModel):
    role: Optional[UserRole] = None
