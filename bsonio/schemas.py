"""
목적:
- 셸 방언 버전을 표현하는 값 객체를 정의한다.

설명:
- (major, minor, patch) 3요소 버전이며 생성 후 변경할 수 없다.
- "2.6.0", (2, 6), (2, 6, 0) 형태의 입력을 정규화한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- bsonio/settings.py
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@total_ordering
class ShellVersion(BaseModel):
    """셸 방언 버전 모델."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)

    @classmethod
    def parse(cls, value: Any) -> ShellVersion:
        """문자열/튜플/ShellVersion 입력을 ShellVersion으로 변환한다."""
        if isinstance(value, ShellVersion):
            return value
        if isinstance(value, str):
            parts = value.strip().split(".")
            if not 1 <= len(parts) <= 3 or not all(part.isdecimal() for part in parts):
                raise ValueError(f"invalid shell version: {value!r}")
            return cls(**dict(zip(("major", "minor", "patch"), map(int, parts))))
        if isinstance(value, (tuple, list)):
            if not 1 <= len(value) <= 3:
                raise ValueError(f"invalid shell version: {value!r}")
            return cls(**dict(zip(("major", "minor", "patch"), value)))
        raise TypeError(f"cannot build ShellVersion from {type(value).__name__}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ShellVersion):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
