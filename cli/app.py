"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 캐시 점검용 CLI 애플리케이션 진입점입니다.

명령어 구조:
    ecr-cache --version                 # 버전 표시
    ecr-cache list [-p P] [-r R]        # 캐시된 인증 항목 목록
    ecr-cache clear [-p P] [-r R]       # 캐시 파일 삭제
    ecr-cache path [--cache-dir D]      # 캐시 파일 경로 표시

Usage:
    $ ecr-cache list --profile dev --region us-east-1
    $ AWS_ECR_DISABLE_CACHE=1 ecr-cache list   # no-op 캐시 (항목 없음)
"""

import logging
from datetime import datetime, timezone

import boto3
import click
from botocore.exceptions import BotoCoreError
from rich.table import Table

from cli.ui import console, get_log_handler, print_error, print_info, print_success
from ecr_login.cache.factory import build_credentials_cache
from ecr_login.cache.path import get_cache_path
from ecr_login.cache.types import format_timestamp
from ecr_login.config import CacheSettings, get_version
from ecr_login.exceptions import CacheStoreError, format_error_for_user

# WARNING 레벨로 설정하여 DEBUG 로그가 명령 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
    handlers=[get_log_handler()],
)

VERSION = get_version()


def _cache_options(func):
    """캐시 생성에 필요한 공통 옵션"""
    func = click.option("-p", "--profile", "profile", default=None, help="AWS 프로파일")(func)
    func = click.option("-r", "--region", "region", default=None, help="AWS 리전")(func)
    func = click.option("--cache-dir", "cache_dir", default=None, help="캐시 디렉토리 (기본: ~/.ecr)")(func)
    return func


def _build_cache(profile: str | None, region: str | None, cache_dir: str | None):
    """boto3 Session으로 캐시 생성 (프로파일 오류 시 종료)"""
    try:
        session = boto3.Session(profile_name=profile, region_name=region)
    except BotoCoreError as e:
        print_error(format_error_for_user(e))
        raise SystemExit(1)

    return build_credentials_cache(session, cache_dir)


@click.group()
@click.version_option(version=VERSION, prog_name="ecr-cache")
@click.option("-v", "--verbose", is_flag=True, help="디버그 로그 출력")
def cli(verbose: bool) -> None:
    """레지스트리 인증 토큰 캐시 관리"""
    if verbose:
        logging.getLogger("ecr_login").setLevel(logging.DEBUG)


@cli.command(name="list")
@_cache_options
def list_cmd(profile: str | None, region: str | None, cache_dir: str | None) -> None:
    """캐시된 인증 항목 목록 (만료 항목 포함)"""
    cache = _build_cache(profile, region, cache_dir)
    entries = cache.list_entries()

    if not entries:
        print_info("캐시된 항목 없음")
        return

    now = datetime.now(timezone.utc)
    table = Table(title="Registry Auth Cache")
    table.add_column("Service")
    table.add_column("Endpoint")
    table.add_column("Requested At")
    table.add_column("Expires At")
    table.add_column("Valid")

    for entry in sorted(entries, key=lambda e: e.expires_at):
        valid = entry.is_valid(now)
        table.add_row(
            str(entry.service),
            entry.proxy_endpoint,
            format_timestamp(entry.requested_at),
            format_timestamp(entry.expires_at),
            "[green]yes[/green]" if valid else "[red]no[/red]",
        )

    console.print(table)


@cli.command(name="clear")
@_cache_options
def clear_cmd(profile: str | None, region: str | None, cache_dir: str | None) -> None:
    """캐시 파일 삭제"""
    cache = _build_cache(profile, region, cache_dir)
    try:
        cache.clear()
    except CacheStoreError as e:
        print_error(format_error_for_user(e))
        raise SystemExit(1)

    print_success("캐시 삭제 완료")


@cli.command(name="path")
@click.option("--cache-dir", "cache_dir", default=None, help="캐시 디렉토리 (기본: ~/.ecr)")
def path_cmd(cache_dir: str | None) -> None:
    """캐시 파일 경로 표시"""
    settings = CacheSettings.from_env()
    try:
        path = get_cache_path(cache_dir or settings.cache_dir, settings.filename)
    except ValueError as e:
        print_error(str(e))
        raise SystemExit(1)

    click.echo(path)


if __name__ == "__main__":
    cli()
