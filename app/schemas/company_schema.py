from datetime import date, datetime
from typing import Annotated, List, Optional
from pydantic import BaseModel, BeforeValidator, EmailStr, PlainSerializer, StringConstraints
from app.schemas.user_schema import UserResponse

FOUNDED_DATE_FORMAT = "%Y/%m/%d"


def parse_founded_date(value):
    # "2004/02/04" 형식과 ISO 형식("2004-02-04") 모두 허용
    if isinstance(value, str) and "/" in value:
        return datetime.strptime(value, FOUNDED_DATE_FORMAT).date()
    return value


FoundedDate = Annotated[
    date,
    BeforeValidator(parse_founded_date),
    PlainSerializer(lambda d: d.strftime(FOUNDED_DATE_FORMAT), return_type=str, when_used="json"),
]


class CompanyRequest(BaseModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    email: EmailStr
    phone_number: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    founded_date: Optional[FoundedDate] = None


class CompanyResponse(BaseModel):
    id: int
    name: str
    email: EmailStr
    phone_number: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    founded_date: Optional[FoundedDate] = None
    users: List[UserResponse] = []

    class Config:
        from_attributes = True
