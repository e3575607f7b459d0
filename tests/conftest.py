"""
tests/conftest.py - pytest 공통 픽스처

캐시 테스트용 환경 격리, 인증 항목, boto3 Session 헬퍼를 제공합니다.

Usage:
    def test_something(file_cache, make_entry):
        file_cache.set("registry", make_entry())
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ecr_login.cache.credentials import FileCredentialsCache  # noqa: E402
from ecr_login.cache.types import AuthEntry, Service  # noqa: E402

# =============================================================================
# 테스트 상수
# =============================================================================

TEST_REGION = "test-region"
TEST_ACCESS_KEY = "accessKey"
TEST_SECRET_KEY = "secretKey"
TEST_TOKEN = "token"

TEST_REGISTRY_NAME = "testRegistry"
TEST_CACHE_PREFIX_KEY = "prefix-"
TEST_PUBLIC_CACHE_KEY = "public-"
TEST_LEGACY_CACHE_PREFIX_KEY = "legacy-prefix-"
TEST_LEGACY_PUBLIC_CACHE_KEY = "legacy-public-"
TEST_FILENAME = "test.json"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """테스트 환경 설정

    캐시 관련 환경 변수를 제거하고, 실제 ~/.aws 설정을 읽지 않도록 격리합니다.
    """
    for name in (
        "AWS_ECR_DISABLE_CACHE",
        "AWS_ECR_CACHE_DIR",
        "GODEBUG",
        "AWS_PROFILE",
        "AWS_DEFAULT_PROFILE",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
    ):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws_credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_SESSION_TOKEN", raising=False)

    yield


# =============================================================================
# 인증 항목 픽스처
# =============================================================================


@pytest.fixture
def make_entry():
    """AuthEntry 생성 헬퍼

    기본값: 5시간 전 요청, 7시간 후 만료, ECR 서비스
    """

    def _make(
        token: str = "testToken",
        service: Service = Service.ECR,
        expires_in: timedelta = timedelta(hours=7),
        endpoint: str = "testEndpoint",
    ) -> AuthEntry:
        now = datetime.now(timezone.utc)
        return AuthEntry(
            authorization_token=token,
            requested_at=now - timedelta(hours=5),
            expires_at=now + expires_in,
            proxy_endpoint=endpoint,
            service=service,
        )

    return _make


@pytest.fixture
def cache_dir(tmp_path) -> Path:
    """테스트용 캐시 디렉토리 (아직 생성되지 않음)"""
    return tmp_path / "ecr"


@pytest.fixture
def file_cache(cache_dir) -> FileCredentialsCache:
    """고정 키를 사용하는 파일 캐시 (FIPS 모드 아님)"""
    return FileCredentialsCache(
        cache_dir,
        TEST_FILENAME,
        TEST_CACHE_PREFIX_KEY,
        TEST_PUBLIC_CACHE_KEY,
        TEST_LEGACY_CACHE_PREFIX_KEY,
        TEST_LEGACY_PUBLIC_CACHE_KEY,
    )


@pytest.fixture
def fips_file_cache(cache_dir) -> FileCredentialsCache:
    """고정 키를 사용하는 파일 캐시 (FIPS 모드)"""
    return FileCredentialsCache(
        cache_dir,
        TEST_FILENAME,
        TEST_CACHE_PREFIX_KEY,
        TEST_PUBLIC_CACHE_KEY,
        TEST_LEGACY_CACHE_PREFIX_KEY,
        TEST_LEGACY_PUBLIC_CACHE_KEY,
        fips_mode=True,
    )


# =============================================================================
# AWS 세션 픽스처
# =============================================================================


@pytest.fixture
def static_session():
    """정적 자격증명 boto3 Session"""
    import boto3

    return boto3.Session(
        aws_access_key_id=TEST_ACCESS_KEY,
        aws_secret_access_key=TEST_SECRET_KEY,
        aws_session_token=TEST_TOKEN,
        region_name=TEST_REGION,
    )


@pytest.fixture
def anonymous_session():
    """자격증명이 없는 Session 모킹"""
    session = MagicMock()
    session.get_credentials.return_value = None
    session.region_name = TEST_REGION
    return session

