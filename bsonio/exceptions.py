"""
목적:
- bsonio 패키지의 예외 타입을 표준화한다.

설명:
- 동결된 설정 변경 시도와 잘못된 설정값을 명시적으로 구분해
  라이브러리 소비자가 처리 전략을 선택할 수 있게 한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- bsonio/settings.py
"""


class BsonIOError(Exception):
    """bsonio 공통 베이스 예외."""


class FrozenSettingsError(BsonIOError):
    """동결된 설정 객체의 필드를 변경하려 할 때 발생한다."""


class ConfigurationError(BsonIOError):
    """설정값을 해석할 수 없을 때 발생한다."""
