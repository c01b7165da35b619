"""
생성 요청 검증 에러
직렬화 시점에 발생하는 구조화된 예외 클래스
"""

from typing import Any, Optional


class GenerationRequestError(ValueError):
    """생성 요청 검증 에러 (기본 클래스)"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        constraint: Optional[str] = None,
    ):
        """
        Args:
            message: 에러 메시지
            field: 문제가 된 필드의 와이어 이름
            constraint: 위반한 제약조건 설명
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.constraint = constraint


class MissingRequiredFieldError(GenerationRequestError):
    """필수 필드가 비어 있거나 없음"""

    def __init__(self, field: str):
        super().__init__(
            f"필수 필드가 비어 있습니다: {field}",
            field=field,
            constraint="non-empty",
        )


class OutOfRangeValueError(GenerationRequestError):
    """필드 값이 허용 범위를 벗어남"""

    def __init__(self, field: str, value: Any, constraint: str):
        super().__init__(
            f"허용 범위를 벗어난 값: {field}={value!r} (제약조건: {constraint})",
            field=field,
            constraint=constraint,
        )
        self.value = value


class ConflictingFieldsError(GenerationRequestError):
    """상호 배타적인 필드가 동시에 설정됨"""

    def __init__(self, fields: tuple[str, str]):
        super().__init__(
            f"함께 사용할 수 없는 필드입니다: {fields[0]}, {fields[1]}",
            field=fields[0],
            constraint=f"exclusive with {fields[1]}",
        )
        self.fields = fields


class UnknownWireFieldError(GenerationRequestError):
    """와이어 이름 테이블에 없는 키"""

    def __init__(self, field: str):
        super().__init__(
            f"알 수 없는 와이어 필드: {field}",
            field=field,
            constraint="known wire key",
        )
