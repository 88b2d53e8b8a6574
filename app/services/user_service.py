import logging
from typing import List
from sqlalchemy.orm import Session
from app.config.errors import ConflictError, ErrorMessages, NotFoundError
from app.db import company_db, user_db
from app.db.transaction import transaction
from app.models.company_model import Company
from app.models.user_model import User
from app.schemas.user_schema import UserCreate, UserResponse, UserUpdate
from app.services.company_service import CACHE_ENTITY as COMPANY_CACHE_ENTITY
from app.utils.cache_util import record_cache
from app.utils.security_util import hash_password

logger = logging.getLogger(__name__)

CACHE_ENTITY = "user"


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = user_db.get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError(ErrorMessages.USER_NOT_FOUND.format(id=user_id))
    return user

def _get_company_or_404(db: Session, company_id: int) -> Company:
    company = company_db.get_company_by_id(db, company_id)
    if company is None:
        raise NotFoundError(ErrorMessages.COMPANY_NOT_FOUND.format(id=company_id))
    return company

def _invalidate(user_id: int, *company_ids: int) -> None:
    # 회사 응답에 사용자 목록이 포함되므로 소속 회사 캐시도 같이 비운다
    keys = [record_cache.key(CACHE_ENTITY, user_id)]
    keys += [record_cache.key(COMPANY_CACHE_ENTITY, cid) for cid in set(company_ids)]
    record_cache.invalidate(*keys)


# 사용자 생성
def create_user(db: Session, data: UserCreate) -> UserResponse:
    with transaction(db):
        if user_db.exists_by_email(db, data.email):
            raise ConflictError(ErrorMessages.EMAIL_ALREADY_EXISTS)

        company = _get_company_or_404(db, data.company_id)

        user = User(**data.model_dump(exclude={"password", "company_id"}))
        user.hashed_password = hash_password(data.password)
        user.company = company
        user_db.save_user(db, user)

    _invalidate(user.id, company.id)
    logger.info(f"User created: id={user.id} company_id={company.id}")
    return UserResponse.model_validate(user)


# 사용자 수정
def update_user(db: Session, user_id: int, data: UserUpdate) -> UserResponse:
    with transaction(db):
        user = _get_user_or_404(db, user_id)
        previous_company_id = user.company_id

        if data.email != user.email and user_db.exists_by_email_excluding_id(db, data.email, user_id):
            raise ConflictError(ErrorMessages.EMAIL_ALREADY_EXISTS)

        if data.company_id is not None and data.company_id != user.company_id:
            user.company = _get_company_or_404(db, data.company_id)

        user.name = data.name
        user.email = data.email
        user.phone_number = data.phone_number
        user.address = data.address
        user.date_of_birth = data.date_of_birth
        user.role = data.role

        # 빈 비밀번호는 기존 해시 유지
        if data.password:
            user.hashed_password = hash_password(data.password)

        user_db.save_user(db, user)

    _invalidate(user_id, previous_company_id, user.company_id)
    logger.info(f"User updated: id={user_id}")
    return UserResponse.model_validate(user)


# 사용자 삭제
def delete_user(db: Session, user_id: int) -> UserResponse:
    with transaction(db):
        user = _get_user_or_404(db, user_id)
        deleted = UserResponse.model_validate(user)
        user_db.delete_user(db, user)

    _invalidate(user_id, deleted.company_id)
    logger.info(f"User deleted: id={user_id}")
    return deleted


# 사용자 조회
def get_user(db: Session, user_id: int) -> UserResponse:
    key = record_cache.key(CACHE_ENTITY, user_id)
    cached = record_cache.get(key)
    if cached is not None:
        return UserResponse.model_validate_json(cached)

    response = UserResponse.model_validate(_get_user_or_404(db, user_id))
    record_cache.set(key, response.model_dump_json())
    return response


def get_users(db: Session) -> List[UserResponse]:
    return [UserResponse.model_validate(u) for u in user_db.get_users(db)]
