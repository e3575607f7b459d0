# ecr_login/cache/types.py
"""
ecr_login/cache/types.py - 레지스트리 인증 캐시의 핵심 타입 정의

포함 항목:
    - Service: 레지스트리 서비스 열거형 (ECR, ECR_PUBLIC)
    - AuthEntry: 캐시된 인증 토큰 레코드

캐시 파일에는 다음 JSON 형식으로 저장됩니다 (기존 캐시 파일과 호환).
    {
        "AuthorizationToken": "...",
        "RequestedAt": "2024-01-01T00:00:00Z",
        "ExpiresAt": "2024-01-01T12:00:00Z",
        "ProxyEndpoint": "https://123456789012.dkr.ecr.us-east-1.amazonaws.com",
        "Service": "ecr"
    }
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

# RFC 3339 소수 초 (파일에는 나노초까지 있을 수 있으나 datetime은 마이크로초까지만 지원)
_FRACTION_RE = re.compile(r"\.(\d+)")


# =============================================================================
# Service Enum
# =============================================================================


class Service(str, Enum):
    """토큰이 발급된 레지스트리 서비스

    - ECR: 프라이빗 레지스트리 (레지스트리별 캐시 키)
    - ECR_PUBLIC: 퍼블릭 레지스트리 (자격증명당 하나의 캐시 키)
    """

    ECR = "ecr"
    ECR_PUBLIC = "ecr-public"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Timestamp helpers
# =============================================================================


def parse_timestamp(value: str) -> datetime:
    """RFC 3339 문자열을 timezone-aware datetime으로 변환

    Args:
        value: ``2024-01-01T00:00:00Z`` 또는 ``2024-01-01T09:00:00.123456789+09:00`` 형식

    Returns:
        datetime (UTC 오프셋 포함)

    Raises:
        ValueError: 형식이 잘못된 경우
    """
    if not isinstance(value, str):
        raise ValueError(f"타임스탬프는 문자열이어야 함: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    # UTC로 표현할 수 없는 값 (예: 9999-12-31T23:59:59-01:00)은 저장 시 직렬화 불가
    try:
        parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"UTC 범위를 벗어난 타임스탬프: {value!r}") from e
    return parsed


def format_timestamp(value: datetime) -> str:
    """datetime을 RFC 3339 UTC 문자열로 변환 (naive datetime은 UTC로 간주)"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# =============================================================================
# AuthEntry
# =============================================================================


@dataclass(frozen=True)
class AuthEntry:
    """캐시된 레지스트리 인증 레코드

    인증 클라이언트가 생성하며, 캐시에는 통째로 덮어써질 뿐 부분 수정되지 않습니다.

    Attributes:
        authorization_token: 인증 토큰 (불투명 문자열)
        requested_at: 토큰 요청 시각
        expires_at: 토큰 만료 시각
        proxy_endpoint: 토큰이 유효한 레지스트리 엔드포인트
        service: 레지스트리 서비스
    """

    authorization_token: str
    requested_at: datetime
    expires_at: datetime
    proxy_endpoint: str
    service: Service = Service.ECR

    def __post_init__(self):
        # frozen dataclass이므로 object.__setattr__ 사용
        object.__setattr__(self, "requested_at", _ensure_aware(self.requested_at))
        object.__setattr__(self, "expires_at", _ensure_aware(self.expires_at))
        object.__setattr__(self, "service", Service(self.service))

    def is_valid(self, now: datetime | None = None) -> bool:
        """토큰이 유효한지 확인

        유예 시간 없이 ``now < expires_at``일 때만 유효합니다.

        Args:
            now: 기준 시각 (None이면 현재 UTC 시각)

        Returns:
            True if 유효함
        """
        if now is None:
            now = datetime.now(timezone.utc)
        return _ensure_aware(now) < self.expires_at

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (JSON 저장용)"""
        return {
            "AuthorizationToken": self.authorization_token,
            "RequestedAt": format_timestamp(self.requested_at),
            "ExpiresAt": format_timestamp(self.expires_at),
            "ProxyEndpoint": self.proxy_endpoint,
            "Service": self.service.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuthEntry:
        """딕셔너리에서 생성 (JSON 로드용)

        Raises:
            ValueError: 필드 누락, 타입 불일치, 알 수 없는 Service 값
        """
        if not isinstance(data, dict):
            raise ValueError(f"인증 항목은 객체여야 함: {type(data).__name__}")

        try:
            token = data["AuthorizationToken"]
            endpoint = data["ProxyEndpoint"]
            requested_at = parse_timestamp(data["RequestedAt"])
            expires_at = parse_timestamp(data["ExpiresAt"])
            service = Service(data["Service"])
        except KeyError as e:
            raise ValueError(f"인증 항목 필드 누락: {e}") from e

        if not isinstance(token, str) or not isinstance(endpoint, str):
            raise ValueError("AuthorizationToken, ProxyEndpoint는 문자열이어야 함")

        return cls(
            authorization_token=token,
            requested_at=requested_at,
            expires_at=expires_at,
            proxy_endpoint=endpoint,
            service=service,
        )
