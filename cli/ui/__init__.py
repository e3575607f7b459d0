# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 출력 유틸리티
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    console,
    err_console,
    get_log_handler,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "console",
    "err_console",
    "get_log_handler",
    "print_error",
    "print_info",
    "print_success",
]
