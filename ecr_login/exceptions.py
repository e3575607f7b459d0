"""
ecr_login/exceptions.py - 통합 예외 계층 구조

레지스트리 인증 캐시에서 사용되는 예외 클래스들을 정의합니다.

예외 계층 구조:
    ECRLoginError (베이스)
    └── CacheError (캐시 관련)
        └── CacheStoreError (캐시 파일 저장/삭제 실패)

읽기 경로(파일 없음, 파싱 실패, 버전 불일치, 만료)는 예외를 발생시키지 않고
"항목 없음"으로 정규화됩니다. 예외는 쓰기 경로에서만 발생합니다.

Usage:
    from ecr_login.exceptions import CacheStoreError

    try:
        cache.set("123456789012.dkr.ecr.us-east-1.amazonaws.com", entry)
    except CacheStoreError as e:
        logger.warning("캐시 저장 실패: %s", e)
"""

from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError

# =============================================================================
# 베이스 예외
# =============================================================================


class ECRLoginError(Exception):
    """레지스트리 인증 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 캐시 관련 예외
# =============================================================================


class CacheError(ECRLoginError):
    """캐시 서브시스템 예외"""


class CacheStoreError(CacheError):
    """캐시 파일 영속화 실패 예외

    디렉토리 생성, 임시 파일 쓰기, rename, 삭제 실패 시 발생합니다.
    호출자는 "캐시하지 못함"으로 취급하고 새로 발급받은 토큰으로 계속 진행해야 합니다.
    """

    def __init__(
        self,
        path: str,
        operation: str,
        cause: Exception | None = None,
    ):
        message = f"캐시 파일 {operation} 실패 [{path}]"
        super().__init__(message, cause)
        self.path = path
        self.operation = operation
        self.details.update({"path": path, "operation": operation})


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    캐시 예외는 원인까지 포함한 메시지를, botocore 예외(예: ProfileNotFound)는
    예외 타입 이름을 붙인 메시지를 반환합니다.

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, ECRLoginError):
        return str(error)

    if isinstance(error, BotoCoreError):
        return f"{type(error).__name__}: {error}"

    return str(error)
