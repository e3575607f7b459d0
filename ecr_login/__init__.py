# ecr_login/__init__.py
"""
ecr_login - 레지스트리 인증 토큰 로컬 캐시

컨테이너 레지스트리 인증 흐름에서 발급받은 단기 토큰을 로컬 파일에 캐시합니다.

아키텍처:
    ecr_login/
    ├── cache/          # 인증 캐시 (항목, 키 파생, 파일 저장소, 팩토리)
    ├── config.py       # 환경 변수 기반 설정
    └── exceptions.py   # 통합 예외 계층

Usage:
    import boto3
    from ecr_login.cache import AuthEntry, build_credentials_cache

    cache = build_credentials_cache(boto3.Session(region_name="us-east-1"))
    entry = cache.get(registry)
    if entry is None:
        entry = fetch_token(registry)  # 원격 인증
        cache.set(registry, entry)
"""

from .config import VERSION as __version__

__all__ = ["__version__"]
