"""캐시 설정 모듈

프로세스 환경 변수에서 캐시 동작 설정을 읽어옵니다.
설정은 팩토리 생성 시점에 한 번만 읽히며, 생성된 캐시는 이후 환경 변수 변경에 영향받지 않습니다.

환경 변수:
    AWS_ECR_DISABLE_CACHE: 비어있지 않으면 캐시 비활성화 (no-op 캐시 사용)
    AWS_ECR_CACHE_DIR: 캐시 디렉토리 (기본: ~/.ecr)
    GODEBUG: ``fips140=on`` 또는 ``fips140=only`` 포함 시 FIPS 모드 (레거시 MD5 키 사용 안 함)

Usage:
    from ecr_login.config import CacheSettings

    settings = CacheSettings.from_env()
    if settings.disabled:
        ...
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

VERSION = "1.0.0"

ENV_DISABLE_CACHE = "AWS_ECR_DISABLE_CACHE"
ENV_CACHE_DIR = "AWS_ECR_CACHE_DIR"
ENV_GODEBUG = "GODEBUG"

DEFAULT_CACHE_DIR = "~/.ecr"
CACHE_FILENAME = "cache.json"

# GODEBUG에서 FIPS 모드로 간주하는 설정값
FIPS_SETTINGS = frozenset({"fips140=on", "fips140=only"})


def get_version() -> str:
    """버전 문자열 반환"""
    return VERSION


def is_fips_mode(godebug: str | None = None) -> bool:
    """FIPS 모드 여부 확인

    Args:
        godebug: GODEBUG 값 (None이면 환경 변수에서 읽음)

    Returns:
        ``fips140=on`` 또는 ``fips140=only``가 설정되어 있으면 True
    """
    if godebug is None:
        godebug = os.environ.get(ENV_GODEBUG, "")

    settings = {item.strip() for item in godebug.split(",")}
    return not settings.isdisjoint(FIPS_SETTINGS)


@dataclass(frozen=True)
class CacheSettings:
    """캐시 동작 설정

    Attributes:
        disabled: 캐시 비활성화 여부 (True면 no-op 캐시)
        cache_dir: 캐시 디렉토리 (``~`` 확장 전)
        fips_mode: FIPS 모드 여부 (True면 레거시 키 파생/조회 생략)
        filename: 캐시 파일명
    """

    disabled: bool = False
    cache_dir: str = DEFAULT_CACHE_DIR
    fips_mode: bool = False
    filename: str = CACHE_FILENAME

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CacheSettings:
        """환경 변수에서 설정 생성

        Args:
            environ: 환경 변수 매핑 (None이면 os.environ)

        Returns:
            CacheSettings 인스턴스
        """
        if environ is None:
            environ = os.environ

        return cls(
            disabled=bool(environ.get(ENV_DISABLE_CACHE)),
            cache_dir=environ.get(ENV_CACHE_DIR) or DEFAULT_CACHE_DIR,
            fips_mode=is_fips_mode(environ.get(ENV_GODEBUG, "")),
        )
