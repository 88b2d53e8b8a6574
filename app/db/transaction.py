import logging
from contextlib import contextmanager
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.config.errors import ConflictError, ErrorMessages

logger = logging.getLogger(__name__)

@contextmanager
def transaction(db: Session):
    """
    서비스 호출 1회 = 트랜잭션 1개.
    블록이 끝나면 commit, 예외 시 rollback.
    중복 검사를 동시에 통과한 쓰기는 DB unique 제약에서 걸리므로 ConflictError로 변환한다.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity violation, transaction rolled back: {e.orig}")
        raise ConflictError(ErrorMessages.INTEGRITY_VIOLATION) from e
    except Exception:
        db.rollback()
        raise
