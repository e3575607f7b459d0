# ecr_login/cache/__init__.py
"""
레지스트리 인증 토큰 캐시 모듈

레지스트리 인증 토큰을 로컬 파일에 캐시하여 매 실행마다 토큰을 다시 발급받지 않도록 합니다.

캐시 전략:
- FileCredentialsCache: 파일 기반 (~/.ecr/cache.json) - 기존 캐시 파일 형식 호환
- NullCredentialsCache: AWS_ECR_DISABLE_CACHE 또는 익명 자격증명일 때 사용

Usage:
    import boto3
    from ecr_login.cache import build_credentials_cache

    cache = build_credentials_cache(boto3.Session(region_name="us-east-1"))
    entry = cache.get("123456789012.dkr.ecr.us-east-1.amazonaws.com")

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    "AuthEntry",
    "Service",
    "RegistryCache",
    "CacheStore",
    "CACHE_VERSION",
    "CredentialsCache",
    "FileCredentialsCache",
    "NullCredentialsCache",
    "build_credentials_cache",
]

_IMPORT_MAPPING = {
    "AuthEntry": (".types", "AuthEntry"),
    "Service": (".types", "Service"),
    "RegistryCache": (".store", "RegistryCache"),
    "CacheStore": (".store", "CacheStore"),
    "CACHE_VERSION": (".store", "CACHE_VERSION"),
    "CredentialsCache": (".credentials", "CredentialsCache"),
    "FileCredentialsCache": (".credentials", "FileCredentialsCache"),
    "NullCredentialsCache": (".credentials", "NullCredentialsCache"),
    "build_credentials_cache": (".factory", "build_credentials_cache"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
