from datetime import date
from typing import Annotated, Optional
from pydantic import BaseModel, EmailStr, StringConstraints
from app.models.user_model import Role


class UserBase(BaseModel):
    name: Optional[str] = None
    email: EmailStr
    phone_number: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    role: Optional[Role] = None


# 사용자 생성
class UserCreate(UserBase):
    password: Annotated[str, StringConstraints(min_length=1)]
    company_id: int


# 사용자 수정 (빈 비밀번호 / company_id 미지정 시 기존 값 유지)
class UserUpdate(UserBase):
    password: Optional[str] = None
    company_id: Optional[int] = None


class UserResponse(BaseModel):
    id: int
    name: Optional[str] = None
    email: EmailStr
    phone_number: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    role: Optional[Role] = None
    company_id: int

    class Config:
        from_attributes = True
