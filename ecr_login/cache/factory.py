# ecr_login/cache/factory.py
"""
캐시 팩토리

환경 설정과 자격증명에 따라 파일 기반 캐시 또는 no-op 캐시를 생성합니다.
선택은 생성 시점에 한 번만 이루어지며 이후 바뀌지 않습니다.

no-op 캐시를 반환하는 경우:
- AWS_ECR_DISABLE_CACHE 설정됨
- 세션이 없거나 자격증명을 확인할 수 없음 (익명)
- 캐시 디렉토리를 확인할 수 없음
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError

from ..config import CacheSettings
from .credentials import CredentialsCache, FileCredentialsCache, NullCredentialsCache
from .keys import (
    credentials_cache_prefix,
    legacy_credentials_cache_prefix,
    legacy_public_cache_key,
    public_cache_key,
)
from .path import expand_cache_dir

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


def build_credentials_cache(
    session: boto3.Session | None,
    cache_dir: str | None = None,
    settings: CacheSettings | None = None,
) -> CredentialsCache:
    """레지스트리 인증 캐시 생성

    Args:
        session: 자격증명과 리전을 제공하는 boto3 Session
        cache_dir: 캐시 디렉토리 재정의 (None이면 설정값 사용)
        settings: 캐시 설정 (None이면 환경 변수에서 읽음)

    Returns:
        FileCredentialsCache 또는 NullCredentialsCache
    """
    if settings is None:
        settings = CacheSettings.from_env()

    if settings.disabled:
        logger.debug("AWS_ECR_DISABLE_CACHE 설정으로 캐시 비활성화")
        return NullCredentialsCache()

    if session is None:
        logger.debug("세션 없음, 캐시 비활성화")
        return NullCredentialsCache()

    try:
        credentials = session.get_credentials()
        frozen = credentials.get_frozen_credentials() if credentials is not None else None
    except BotoCoreError as e:
        logger.debug("자격증명 확인 실패, 캐시 비활성화: %s", e)
        return NullCredentialsCache()

    if frozen is None or not frozen.access_key:
        logger.debug("익명 자격증명, 캐시 비활성화")
        return NullCredentialsCache()

    try:
        resolved_dir = expand_cache_dir(cache_dir or settings.cache_dir)
    except ValueError as e:
        logger.debug("캐시 디렉토리 확인 실패, 캐시 비활성화: %s", e)
        return NullCredentialsCache()

    region = session.region_name or ""
    access_key_id = frozen.access_key

    legacy_prefix = None
    legacy_public_key = None
    if not settings.fips_mode:
        legacy_prefix = legacy_credentials_cache_prefix(region, access_key_id)
        legacy_public_key = legacy_public_cache_key(access_key_id)

    return FileCredentialsCache(
        cache_dir=resolved_dir,
        filename=settings.filename,
        cache_prefix_key=credentials_cache_prefix(region, access_key_id),
        public_cache_key=public_cache_key(access_key_id),
        legacy_cache_prefix_key=legacy_prefix,
        legacy_public_cache_key=legacy_public_key,
        fips_mode=settings.fips_mode,
    )
