from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.schemas.user_schema import UserCreate, UserResponse, UserUpdate
from app.services.user_service import create_user, update_user, delete_user, get_user, get_users

router = APIRouter(prefix="/users", tags=["user"])

@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="사용자 등록 API",
    description="""
    신규 사용자를 등록합니다. 비밀번호는 해시로만 저장되며 응답에 포함되지 않습니다.
    존재하지 않는 회사 ID면 404, 이미 사용 중인 이메일이면 409를 반환합니다.
    """
)
def create(data: UserCreate, db: Session = Depends(get_db)):
    return create_user(db, data)

@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="사용자 정보 수정 API",
    description="""
    사용자 정보를 덮어씁니다. 비밀번호를 비워 두면 기존 비밀번호가 유지됩니다.
    """
)
def update(user_id: int, data: UserUpdate, db: Session = Depends(get_db)):
    return update_user(db, user_id, data)

@router.get("/{user_id}", response_model=UserResponse, summary="사용자 조회 API")
def read(user_id: int, db: Session = Depends(get_db)):
    return get_user(db, user_id)

@router.get("", response_model=List[UserResponse], summary="사용자 목록 조회 API")
def read_all(db: Session = Depends(get_db)):
    return get_users(db)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="사용자 삭제 API")
def delete(user_id: int, db: Session = Depends(get_db)):
    delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
