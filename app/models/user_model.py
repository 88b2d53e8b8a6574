import enum
from sqlalchemy import Column, Date, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.config.database import Base

class Role(str, enum.Enum):
    CEO = "CEO"
    CTO = "CTO"
    MANAGER = "MANAGER"
    HR = "HR"
    EMPLOYEE = "EMPLOYEE"
    INTERN = "INTERN"

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    phone_number = Column(String(30), nullable=True)
    address = Column(String(255), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    role = Column(Enum(Role, name="user_role"), nullable=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)

    company = relationship("Company", back_populates="users")
