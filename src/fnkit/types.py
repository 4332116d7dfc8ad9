"""공용 타입 정의"""
from typing import Any, Callable, NewType, TypeVar

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')

# ============================================================
# Constrained Types (값 제약)
# ============================================================

# 기본값이 없는 위치 인자 수
Arity = NewType('Arity', int)

# compose_with가 호출할 체이닝 메서드 이름 ("chain", "then" 등)
MethodName = NewType('MethodName', str)

# ============================================================
# 함수 형태
# ============================================================

Unary = Callable[[Any], Any]

# a -> M(b) 형태의 함수 (Kleisli arrow)
Kleisli = Callable[[Any], Any]
