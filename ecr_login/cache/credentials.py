# ecr_login/cache/credentials.py
"""
레지스트리 인증 캐시 구현

- CredentialsCache: 캐시 인터페이스 (ABC)
- FileCredentialsCache: 파일 기반 캐시 (~/.ecr/cache.json)
- NullCredentialsCache: 캐시 비활성화 시 사용하는 no-op 캐시

조회 순서:
1. 현재(SHA-256) 키로 조회 - 유효하면 반환
2. FIPS 모드가 아니면 레거시(MD5) 키로 조회 - 유효하면 반환 (읽기 전용, 마이그레이션 없음)
3. 둘 다 없거나 만료되었으면 None

쓰기는 항상 현재 키로만 수행합니다.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from .store import CacheStore, RegistryCache
from .types import AuthEntry, Service

logger = logging.getLogger(__name__)


# =============================================================================
# Interface
# =============================================================================


class CredentialsCache(ABC):
    """레지스트리 인증 캐시 인터페이스

    팩토리가 생성 시점에 파일 기반 또는 no-op 구현 중 하나를 선택합니다.
    """

    @abstractmethod
    def get(self, registry: str) -> AuthEntry | None:
        """레지스트리의 유효한 인증 항목 조회

        Args:
            registry: 레지스트리 이름 (예: "123456789012.dkr.ecr.us-east-1.amazonaws.com")

        Returns:
            AuthEntry 또는 None (없거나 만료됨)
        """
        pass

    @abstractmethod
    def get_public(self) -> AuthEntry | None:
        """퍼블릭 레지스트리의 유효한 인증 항목 조회"""
        pass

    @abstractmethod
    def set(self, registry: str, entry: AuthEntry) -> None:
        """인증 항목 저장

        Args:
            registry: 레지스트리 이름 (빈 문자열이면 퍼블릭 레지스트리)
            entry: 저장할 AuthEntry

        Raises:
            CacheStoreError: 파일 저장 실패 시
        """
        pass

    @abstractmethod
    def list_entries(self) -> list[AuthEntry]:
        """저장된 모든 인증 항목 (만료 여부, 키 세대와 무관)"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """캐시 전체 삭제"""
        pass


# =============================================================================
# File-based Cache
# =============================================================================


class FileCredentialsCache(CredentialsCache):
    """파일 기반 레지스트리 인증 캐시

    매 작업마다 파일을 다시 읽고, 쓰기는 문서 전체를 원자적으로 덮어씁니다.
    여러 프로세스가 동시에 set을 호출하면 마지막 쓰기가 이깁니다.
    """

    def __init__(
        self,
        cache_dir: str | os.PathLike,
        filename: str,
        cache_prefix_key: str,
        public_cache_key: str,
        legacy_cache_prefix_key: str | None = None,
        legacy_public_cache_key: str | None = None,
        fips_mode: bool = False,
    ):
        """FileCredentialsCache 초기화

        Args:
            cache_dir: 캐시 디렉토리
            filename: 캐시 파일명
            cache_prefix_key: 프라이빗 레지스트리 키 prefix (SHA-256 기반)
            public_cache_key: 퍼블릭 레지스트리 키 (SHA-256 기반)
            legacy_cache_prefix_key: 레거시 프라이빗 레지스트리 키 prefix (MD5 기반, 옵션)
            legacy_public_cache_key: 레거시 퍼블릭 레지스트리 키 (MD5 기반, 옵션)
            fips_mode: True면 레거시 키 조회 생략
        """
        self._store = CacheStore(cache_dir, filename)
        self._cache_prefix_key = cache_prefix_key
        self._public_cache_key = public_cache_key
        self._legacy_cache_prefix_key = legacy_cache_prefix_key
        self._legacy_public_cache_key = legacy_public_cache_key
        self._fips_mode = fips_mode

    @property
    def cache_dir(self) -> str:
        return str(self._store.cache_dir)

    @property
    def filename(self) -> str:
        return self._store.filename

    @property
    def cache_path(self) -> str:
        return str(self._store.cache_path)

    @property
    def cache_prefix_key(self) -> str:
        return self._cache_prefix_key

    @property
    def public_cache_key(self) -> str:
        return self._public_cache_key

    @property
    def legacy_cache_prefix_key(self) -> str | None:
        return self._legacy_cache_prefix_key

    @property
    def legacy_public_cache_key(self) -> str | None:
        return self._legacy_public_cache_key

    @property
    def fips_mode(self) -> bool:
        return self._fips_mode

    @property
    def store(self) -> CacheStore:
        """하위 파일 저장소"""
        return self._store

    def get(self, registry: str) -> AuthEntry | None:
        legacy_key = None
        if self._legacy_cache_prefix_key is not None:
            legacy_key = self._legacy_cache_prefix_key + registry

        return self._lookup(self._cache_prefix_key + registry, legacy_key)

    def get_public(self) -> AuthEntry | None:
        return self._lookup(self._public_cache_key, self._legacy_public_cache_key)

    def set(self, registry: str, entry: AuthEntry) -> None:
        key = self._registry_cache_key(registry, entry)

        registry_cache = self._store.load()
        registry_cache.registries[key] = entry
        self._store.save(registry_cache)
        logger.debug("캐시 저장: %s", entry.proxy_endpoint)

    def list_entries(self) -> list[AuthEntry]:
        registry_cache = self._store.load()
        return list(registry_cache.registries.values())

    def clear(self) -> None:
        self._store.clear()

    def _registry_cache_key(self, registry: str, entry: AuthEntry) -> str:
        """저장용 캐시 키 (항상 현재 세대)"""
        if not registry or entry.service == Service.ECR_PUBLIC:
            return self._public_cache_key
        return self._cache_prefix_key + registry

    def _lookup(self, key: str, legacy_key: str | None) -> AuthEntry | None:
        """현재 키 우선, 레거시 키 fallback 조회"""
        registry_cache = self._store.load()
        now = datetime.now(timezone.utc)

        entry = self._valid_entry(registry_cache, key, now)
        if entry is not None:
            return entry

        if self._fips_mode or legacy_key is None:
            logger.debug("캐시 없음: %s", key)
            return None

        entry = self._valid_entry(registry_cache, legacy_key, now)
        if entry is not None:
            logger.debug("레거시 키로 캐시 조회됨: %s", entry.proxy_endpoint)
            return entry

        logger.debug("캐시 없음: %s", key)
        return None

    @staticmethod
    def _valid_entry(registry_cache: RegistryCache, key: str, now: datetime) -> AuthEntry | None:
        entry = registry_cache.registries.get(key)
        if entry is None or not entry.is_valid(now):
            return None
        return entry


# =============================================================================
# No-op Cache
# =============================================================================


class NullCredentialsCache(CredentialsCache):
    """캐시 비활성화 시 사용하는 no-op 캐시

    모든 조회는 None, 저장/삭제는 아무것도 하지 않습니다.
    """

    def get(self, registry: str) -> AuthEntry | None:
        return None

    def get_public(self) -> AuthEntry | None:
        return None

    def set(self, registry: str, entry: AuthEntry) -> None:
        pass

    def list_entries(self) -> list[AuthEntry]:
        return []

    def clear(self) -> None:
        pass
