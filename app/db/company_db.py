from typing import List, Optional
from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session, selectinload
from app.models.company_model import Company
from app.models.user_model import User

def get_company_by_id(db: Session, company_id: int) -> Optional[Company]:
    return db.get(Company, company_id)

def get_companies(db: Session) -> List[Company]:
    return (
        db.query(Company)
        .options(selectinload(Company.users))
        .order_by(Company.id)
        .all()
    )

def save_company(db: Session, company: Company) -> Company:
    # commit은 서비스 계층에서 (트랜잭션 단위 = 서비스 호출 1회)
    db.add(company)
    db.flush()
    return company

def delete_company(db: Session, company: Company) -> None:
    db.delete(company)
    db.flush()

# 중복 검사
def exists_by_name(db: Session, name: str) -> bool:
    return db.scalar(select(exists().where(Company.name == name)))

def exists_by_email(db: Session, email: str) -> bool:
    return db.scalar(select(exists().where(Company.email == email)))

def exists_by_name_excluding_id(db: Session, name: str, company_id: int) -> bool:
    return db.scalar(select(exists().where(Company.name == name, Company.id != company_id)))

def exists_by_email_excluding_id(db: Session, email: str, company_id: int) -> bool:
    return db.scalar(select(exists().where(Company.email == email, Company.id != company_id)))

def count_users_by_company(db: Session, company_id: int) -> int:
    return db.scalar(select(func.count(User.id)).where(User.company_id == company_id))
