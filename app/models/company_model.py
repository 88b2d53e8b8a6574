from sqlalchemy import Column, Date, Integer, String
from sqlalchemy.orm import relationship
from app.config.database import Base

class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone_number = Column(String(30), nullable=True)
    address = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)
    founded_date = Column(Date, nullable=True)

    # 회사 삭제 시 사용자를 함께 지우지 않음 (사용자가 있으면 삭제 거부)
    users = relationship("User", back_populates="company", order_by="User.id")
