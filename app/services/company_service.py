import logging
from typing import List
from sqlalchemy.orm import Session
from app.config.errors import ConflictError, ErrorMessages, NotFoundError
from app.db import company_db
from app.db.transaction import transaction
from app.models.company_model import Company
from app.schemas.company_schema import CompanyRequest, CompanyResponse
from app.utils.cache_util import record_cache

logger = logging.getLogger(__name__)

CACHE_ENTITY = "company"


def _get_company_or_404(db: Session, company_id: int) -> Company:
    company = company_db.get_company_by_id(db, company_id)
    if company is None:
        raise NotFoundError(ErrorMessages.COMPANY_NOT_FOUND.format(id=company_id))
    return company


# 회사 생성
def create_company(db: Session, data: CompanyRequest) -> CompanyResponse:
    with transaction(db):
        if company_db.exists_by_name(db, data.name):
            raise ConflictError(ErrorMessages.COMPANY_NAME_ALREADY_EXISTS)
        if company_db.exists_by_email(db, data.email):
            raise ConflictError(ErrorMessages.COMPANY_EMAIL_ALREADY_EXISTS)

        company = company_db.save_company(db, Company(**data.model_dump()))

    logger.info(f"Company created: id={company.id} name={company.name}")
    return CompanyResponse.model_validate(company)


# 회사 수정
def update_company(db: Session, company_id: int, data: CompanyRequest) -> CompanyResponse:
    with transaction(db):
        company = _get_company_or_404(db, company_id)

        # 자기 자신은 중복 검사에서 제외
        if company_db.exists_by_name_excluding_id(db, data.name, company_id):
            raise ConflictError(ErrorMessages.COMPANY_NAME_ALREADY_EXISTS)
        if company_db.exists_by_email_excluding_id(db, data.email, company_id):
            raise ConflictError(ErrorMessages.COMPANY_EMAIL_ALREADY_EXISTS)

        for field, value in data.model_dump().items():
            setattr(company, field, value)
        company_db.save_company(db, company)

    record_cache.invalidate(record_cache.key(CACHE_ENTITY, company_id))
    logger.info(f"Company updated: id={company_id}")
    return CompanyResponse.model_validate(company)


# 회사 삭제 (소속 사용자가 없을 때만)
def delete_company(db: Session, company_id: int) -> CompanyResponse:
    with transaction(db):
        company = _get_company_or_404(db, company_id)

        if company_db.count_users_by_company(db, company_id) > 0:
            raise ConflictError(ErrorMessages.COMPANY_HAS_USERS)

        deleted = CompanyResponse.model_validate(company)
        company_db.delete_company(db, company)

    record_cache.invalidate(record_cache.key(CACHE_ENTITY, company_id))
    logger.info(f"Company deleted: id={company_id}")
    return deleted


# 회사 조회
def get_company(db: Session, company_id: int) -> CompanyResponse:
    key = record_cache.key(CACHE_ENTITY, company_id)
    cached = record_cache.get(key)
    if cached is not None:
        return CompanyResponse.model_validate_json(cached)

    response = CompanyResponse.model_validate(_get_company_or_404(db, company_id))
    record_cache.set(key, response.model_dump_json())
    return response


def get_companies(db: Session) -> List[CompanyResponse]:
    return [CompanyResponse.model_validate(c) for c in company_db.get_companies(db)]
