"""에러 타입 정의 (OR Type)"""
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ValidationError:
    """설정 검증 에러"""
    field: str
    message: str
    code: str = "VALIDATION_ERROR"


@dataclass(frozen=True)
class LawViolation:
    """대수 법칙 위반"""
    law: str
    expected: Any
    actual: Any
    code: str = "LAW_VIOLATION"


# OR Type: 값으로 다루는 모든 에러
FnkitError = Union[
    ValidationError,
    LawViolation,
]


def error_to_dict(error: FnkitError) -> dict:
    """에러를 딕셔너리로 변환 (CLI 출력용)"""
    match error:
        case ValidationError(field, message, code):
            return {"code": code, "field": field, "message": message}
        case LawViolation(law, expected, actual, code):
            return {
                "code": code,
                "law": law,
                "expected": repr(expected),
                "actual": repr(actual),
                "message": f"{law} violated: {actual!r} != {expected!r}",
            }
