# ecr_login/cache/store.py
"""
캐시 파일 저장소

버전이 있는 ``{키: AuthEntry}`` 문서를 단일 JSON 파일로 로드/저장합니다.

설계 원칙:
- 로드 실패(파일 없음, 파싱 실패, 버전 불일치)는 빈 문서로 정규화 - 예외 없음
- 버전이 다른 문서는 마이그레이션하지 않고 버림
- 저장은 임시 파일에 쓴 후 rename (write-to-temp-then-rename)
- 저장 실패는 CacheStoreError로 호출자에게 전달
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..exceptions import CacheStoreError
from .types import AuthEntry

logger = logging.getLogger(__name__)

CACHE_VERSION = "1.0"


# =============================================================================
# RegistryCache Document
# =============================================================================


@dataclass
class RegistryCache:
    """캐시 파일 문서

    Attributes:
        version: 스키마 버전
        registries: 캐시 키 -> AuthEntry
    """

    version: str = CACHE_VERSION
    registries: dict[str, AuthEntry] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (JSON 저장용)"""
        return {
            "Registries": {key: entry.to_dict() for key, entry in self.registries.items()},
            "Version": self.version,
        }

    @classmethod
    def from_dict(cls, data: Any) -> RegistryCache:
        """딕셔너리에서 생성 (JSON 로드용)

        Raises:
            ValueError: 문서 스키마가 맞지 않는 경우
        """
        if not isinstance(data, dict):
            raise ValueError(f"캐시 문서는 객체여야 함: {type(data).__name__}")

        version = data.get("Version")
        if not isinstance(version, str):
            raise ValueError("Version 필드가 없거나 문자열이 아님")

        raw_registries = data.get("Registries") or {}
        if not isinstance(raw_registries, dict):
            raise ValueError("Registries 필드는 객체여야 함")

        registries = {key: AuthEntry.from_dict(raw) for key, raw in raw_registries.items()}
        return cls(version=version, registries=registries)


# =============================================================================
# Cache Store
# =============================================================================


class CacheStore:
    """캐시 파일 관리자

    캐시 파일 위치: ``{cache_dir}/{filename}`` (기본: ~/.ecr/cache.json)
    """

    def __init__(self, cache_dir: str | os.PathLike, filename: str):
        """CacheStore 초기화

        Args:
            cache_dir: 캐시 디렉토리
            filename: 캐시 파일명
        """
        self.cache_dir = Path(cache_dir)
        self.filename = filename

    @property
    def cache_path(self) -> Path:
        """캐시 파일 전체 경로"""
        return self.cache_dir / self.filename

    def load(self) -> RegistryCache:
        """캐시 문서를 파일에서 로드

        Returns:
            RegistryCache (파일이 없거나 읽을 수 없으면 빈 문서)
        """
        try:
            with open(self.cache_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("캐시 파일 없음: %s", self.cache_path)
            return RegistryCache()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            logger.warning("캐시 파일을 읽을 수 없음, 무시: %s (%s)", self.cache_path, e)
            return RegistryCache()

        # 항목 스키마는 버전마다 다를 수 있으므로 버전을 먼저 확인
        version = data.get("Version") if isinstance(data, dict) else None
        if isinstance(version, str) and version != CACHE_VERSION:
            logger.warning(
                "캐시 버전 불일치 (파일: %s, 현재: %s), 캐시 무시: %s",
                version,
                CACHE_VERSION,
                self.cache_path,
            )
            return RegistryCache()

        try:
            return RegistryCache.from_dict(data)
        except ValueError as e:
            logger.warning("캐시 파일 형식 오류, 무시: %s (%s)", self.cache_path, e)
            return RegistryCache()

    def save(self, registry_cache: RegistryCache) -> None:
        """캐시 문서를 파일에 원자적으로 저장 (write-to-temp-then-rename)

        Args:
            registry_cache: 저장할 문서

        Raises:
            CacheStoreError: 직렬화, 디렉토리 생성, 쓰기, rename 실패 시
        """
        try:
            content = json.dumps(registry_cache.to_dict(), indent=2)
        except (OverflowError, ValueError) as e:
            raise CacheStoreError(str(self.cache_path), "save", cause=e) from e

        try:
            self.cache_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.cache_dir, suffix=".tmp", prefix=".cache_")
            try:
                with open(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                Path(tmp_path).replace(self.cache_path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise CacheStoreError(str(self.cache_path), "save", cause=e) from e

    def clear(self) -> None:
        """캐시 파일 삭제 (파일이 없으면 무시)

        Raises:
            CacheStoreError: 삭제 실패 시
        """
        try:
            self.cache_path.unlink(missing_ok=True)
        except OSError as e:
            raise CacheStoreError(str(self.cache_path), "clear", cause=e) from e
