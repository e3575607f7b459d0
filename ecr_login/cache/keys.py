# ecr_login/cache/keys.py
"""
캐시 키 파생

자격증명의 access key ID와 리전으로 캐시 키를 만듭니다.
secret key와 session token은 캐시 파일에 노출되지 않도록 키 파생에 사용하지 않습니다.

키 형식:
    - 프라이빗 레지스트리: ``{region}-{hash}-{registry}``  (prefix = ``{region}-{hash}-``)
    - 퍼블릭 레지스트리:   ``ecr-public-{hash}``

두 세대의 해시가 존재합니다:
    - 현재: base64(SHA-256(access_key_id)) - FIPS 호환
    - 레거시: MD5 기반 - 마이그레이션 이전에 기록된 항목을 읽기 위해서만 사용

FIPS 모드에서는 레거시 키를 아예 계산하지 않습니다.
"""

from __future__ import annotations

import base64
import hashlib

from .types import Service


def credential_hash(access_key_id: str) -> str:
    """현재 세대 자격증명 해시 (base64 SHA-256)"""
    digest = hashlib.sha256(access_key_id.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def legacy_credential_hash(access_key_id: str) -> str:
    """레거시 자격증명 해시

    기존 캐시 파일에 기록된 레거시 키 형식을 그대로 재현합니다.
    이 값은 access key 원문 바이트 뒤에 빈 입력의 MD5 digest를 이어 붙인 것입니다.
    """
    empty_digest = hashlib.md5(b"", usedforsecurity=False).digest()
    return base64.b64encode(access_key_id.encode("utf-8") + empty_digest).decode("ascii")


def credentials_cache_prefix(region: str, access_key_id: str) -> str:
    """프라이빗 레지스트리 캐시 키 prefix (``{region}-{hash}-``)"""
    return f"{region}-{credential_hash(access_key_id)}-"


def public_cache_key(access_key_id: str) -> str:
    """퍼블릭 레지스트리 캐시 키 (``ecr-public-{hash}``)"""
    return f"{Service.ECR_PUBLIC}-{credential_hash(access_key_id)}"


def legacy_credentials_cache_prefix(region: str, access_key_id: str) -> str:
    """레거시 프라이빗 레지스트리 캐시 키 prefix"""
    return f"{region}-{legacy_credential_hash(access_key_id)}-"


def legacy_public_cache_key(access_key_id: str) -> str:
    """레거시 퍼블릭 레지스트리 캐시 키"""
    return f"{Service.ECR_PUBLIC}-{legacy_credential_hash(access_key_id)}"
