"""캐시 경로 유틸리티.

기본 캐시 위치는 사용자 홈의 ``~/.ecr/cache.json`` 입니다.
``AWS_ECR_CACHE_DIR`` 또는 호출자가 넘긴 디렉토리로 재정의할 수 있습니다.
"""

from __future__ import annotations

import os

from ..config import CACHE_FILENAME, DEFAULT_CACHE_DIR


def expand_cache_dir(cache_dir: str | None = None) -> str:
    """캐시 디렉토리 경로 반환

    Args:
        cache_dir: 캐시 디렉토리 (None 또는 빈 문자열이면 ``~/.ecr``)

    Returns:
        ``~``가 확장된 절대 경로 (디렉토리는 생성하지 않음)

    Raises:
        ValueError: 홈 디렉토리를 확인할 수 없어 ``~``가 확장되지 않은 경우

    Example:
        >>> expand_cache_dir("~/.ecr")
        '/home/user/.ecr'
    """
    path = os.path.expanduser(cache_dir or DEFAULT_CACHE_DIR)
    if path.startswith("~"):
        raise ValueError(f"홈 디렉토리를 확인할 수 없음: {path}")
    return os.path.abspath(path)


def get_cache_path(cache_dir: str | None = None, filename: str = CACHE_FILENAME) -> str:
    """캐시 파일 경로 반환

    Example:
        >>> get_cache_path()
        '/home/user/.ecr/cache.json'
    """
    return os.path.join(expand_cache_dir(cache_dir), filename)
