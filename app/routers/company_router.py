from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.schemas.company_schema import CompanyRequest, CompanyResponse
from app.services.company_service import (
    create_company,
    update_company,
    delete_company,
    get_company,
    get_companies,
)

router = APIRouter(prefix="/companies", tags=["company"])

@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회사 등록 API",
    description="""
    신규 회사를 등록합니다.
    이름 또는 이메일이 이미 등록된 회사와 겹치면 409를 반환합니다.
    """
)
def create(data: CompanyRequest, db: Session = Depends(get_db)):
    return create_company(db, data)

@router.put(
    "/{company_id}",
    response_model=CompanyResponse,
    summary="회사 정보 수정 API",
    description="""
    회사 정보를 전부 덮어씁니다.
    다른 회사와 이름/이메일이 겹치면 409, 존재하지 않는 회사면 404를 반환합니다.
    """
)
def update(company_id: int, data: CompanyRequest, db: Session = Depends(get_db)):
    return update_company(db, company_id, data)

@router.get(
    "/{company_id}",
    response_model=CompanyResponse,
    summary="회사 조회 API",
)
def read(company_id: int, db: Session = Depends(get_db)):
    return get_company(db, company_id)

@router.get(
    "",
    response_model=List[CompanyResponse],
    summary="회사 목록 조회 API",
)
def read_all(db: Session = Depends(get_db)):
    return get_companies(db)

@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="회사 삭제 API",
    description="""
    소속 사용자가 없는 회사만 삭제할 수 있습니다. 사용자가 남아 있으면 409를 반환합니다.
    """
)
def delete(company_id: int, db: Session = Depends(get_db)):
    delete_company(db, company_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
