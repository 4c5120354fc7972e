"""
목적:
- JSON 라이터가 사용할 출력 설정 객체를 정의한다.

설명:
- 설정은 동결(freeze) 전까지 자유롭게 변경할 수 있고, 동결 후에는 모든 필드 변경이 거부된다.
- 동결된 설정에서 변경 가능한 설정을 얻는 유일한 방법은 clone()이다.
- 프로세스 전역 기본 설정은 첫 조회 시 지연 생성되며 통째로 교체할 수 있다.

디자인 패턴:
- 값 객체(Value Object).
- 동결 후 불변(Freeze-then-Immutable).

참조:
- bsonio/schemas.py
- bsonio/defaults.py
"""

from __future__ import annotations

import codecs
import logging
import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .defaults import BsonDefaults
from .enums import GuidRepresentation, JsonOutputMode
from .exceptions import ConfigurationError, FrozenSettingsError
from .schemas import ShellVersion

logger = logging.getLogger(__name__)

_defaults_lock = threading.Lock()
_json_defaults: JsonWriterSettings | None = None


class BsonWriterSettings(BaseModel):
    """라이터 설정 공통 베이스 모델."""

    model_config = ConfigDict(validate_assignment=True)

    guid_representation: GuidRepresentation = Field(
        default_factory=lambda: BsonDefaults.guid_representation
    )

    _is_frozen: bool = PrivateAttr(default=False)

    @property
    def is_frozen(self) -> bool:
        """동결 여부를 반환한다."""
        return self._is_frozen

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self).model_fields and self._is_frozen:
            raise FrozenSettingsError(f"{type(self).__name__} is frozen.")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in type(self).model_fields and self._is_frozen:
            raise FrozenSettingsError(f"{type(self).__name__} is frozen.")
        super().__delattr__(name)

    def model_copy(
        self, *, update: dict[str, Any] | None = None, deep: bool = False
    ) -> BsonWriterSettings:
        """pydantic 복사본을 생성한다. clone()과 같이 결과는 항상 동결되지 않은 상태다."""
        copied = super().model_copy(update=update, deep=deep)
        copied._is_frozen = False
        return copied

    def freeze(self) -> BsonWriterSettings:
        """설정을 동결한다. 이미 동결된 경우 아무 일도 하지 않는다."""
        if not self._is_frozen:
            self._is_frozen = True
            logger.debug("%s frozen", type(self).__name__)
        return self

    def frozen_copy(self) -> BsonWriterSettings:
        """동결된 설정을 반환한다. 이미 동결된 경우 자기 자신을 반환한다."""
        if self._is_frozen:
            return self
        return self.clone().freeze()

    def clone(self) -> BsonWriterSettings:
        """동결되지 않은 복제본을 생성한다."""
        return self._clone_implementation()

    def _clone_implementation(self) -> BsonWriterSettings:
        return type(self)(guid_representation=self.guid_representation)


class JsonWriterSettings(BsonWriterSettings):
    """JSON 라이터 출력 설정 모델."""

    close_output: bool = Field(default=False)
    encoding: str = Field(default="utf-8")
    indent: bool = Field(default=False)
    indent_chars: str = Field(default="  ")
    new_line_chars: str = Field(default="\r\n")
    output_mode: JsonOutputMode = Field(default=JsonOutputMode.SHELL)
    shell_version: ShellVersion = Field(default_factory=lambda: ShellVersion(major=2))
    use_iso8601_date_format: bool = Field(default=False)

    @field_validator("shell_version", mode="before")
    @classmethod
    def normalize_shell_version(cls, value: Any) -> Any:
        if isinstance(value, (str, tuple, list)):
            return ShellVersion.parse(value)
        return value

    @staticmethod
    def get_defaults() -> JsonWriterSettings:
        """프로세스 전역 기본 설정을 반환한다. 없으면 생성한다."""
        global _json_defaults
        current = _json_defaults
        if current is not None:
            return current
        with _defaults_lock:
            if _json_defaults is None:
                _json_defaults = JsonWriterSettings()
                logger.debug("created default JsonWriterSettings")
            return _json_defaults

    @staticmethod
    def set_defaults(settings: JsonWriterSettings | None) -> None:
        """프로세스 전역 기본 설정을 교체한다. None이면 다음 조회 시 새로 생성한다."""
        global _json_defaults
        if settings is not None and not isinstance(settings, JsonWriterSettings):
            raise TypeError(f"expected JsonWriterSettings or None, got {type(settings).__name__}")
        with _defaults_lock:
            _json_defaults = settings
        logger.debug("replaced default JsonWriterSettings (cleared=%s)", settings is None)

    def codec_info(self) -> codecs.CodecInfo:
        """encoding에 해당하는 코덱 정보를 조회한다."""
        try:
            return codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"unknown encoding: {self.encoding!r}") from exc

    def clone(self) -> JsonWriterSettings:
        return self._clone_implementation()

    def _clone_implementation(self) -> JsonWriterSettings:
        return type(self)(
            close_output=self.close_output,
            encoding=self.encoding,
            guid_representation=self.guid_representation,
            indent=self.indent,
            indent_chars=self.indent_chars,
            new_line_chars=self.new_line_chars,
            output_mode=self.output_mode,
            shell_version=self.shell_version.model_copy(),
            use_iso8601_date_format=self.use_iso8601_date_format,
        )
