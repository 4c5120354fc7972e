"""
목적:
- 라이터 설정이 참조하는 열거형을 정의한다.

설명:
- 문자열 값을 갖는 Enum으로 정의해 설정 입력 시 문자열도 허용한다.

참조:
- bsonio/settings.py
"""

from __future__ import annotations

from enum import Enum


class GuidRepresentation(str, Enum):
    """16바이트 GUID 값의 표현 방식."""

    UNSPECIFIED = "unspecified"
    STANDARD = "standard"
    CSHARP_LEGACY = "csharp_legacy"
    JAVA_LEGACY = "java_legacy"
    PYTHON_LEGACY = "python_legacy"


class JsonOutputMode(str, Enum):
    """JSON 출력 방언."""

    STRICT = "strict"
    JAVASCRIPT = "javascript"
    TEN_GEN = "ten_gen"
    SHELL = "shell"
