"""
목적:
- 프로세스 전역 BSON 기본값을 제공한다.

설명:
- 설정 객체는 생성 시점에 이 값을 읽으므로, 값을 바꾼 뒤 생성된 설정부터 반영된다.

참조:
- bsonio/settings.py
"""

from __future__ import annotations

from .enums import GuidRepresentation


class BsonDefaults:
    """전역 기본값 홀더."""

    guid_representation: GuidRepresentation = GuidRepresentation.STANDARD

    @classmethod
    def reset(cls) -> None:
        """기본값을 초기 상태로 되돌린다."""
        cls.guid_representation = GuidRepresentation.STANDARD
