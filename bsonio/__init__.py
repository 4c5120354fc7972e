"""
목적:
- bsonio 패키지의 공개 진입점을 제공한다.

설명:
- JSON 라이터 설정 객체와 관련 열거형/값 객체/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- bsonio/settings.py
"""

from .defaults import BsonDefaults
from .enums import GuidRepresentation, JsonOutputMode
from .exceptions import BsonIOError, ConfigurationError, FrozenSettingsError
from .schemas import ShellVersion
from .settings import BsonWriterSettings, JsonWriterSettings
from .version import __version__

__all__ = [
    "__version__",
    "BsonWriterSettings",
    "JsonWriterSettings",
    "BsonDefaults",
    "ShellVersion",
    "GuidRepresentation",
    "JsonOutputMode",
    "BsonIOError",
    "FrozenSettingsError",
    "ConfigurationError",
]
