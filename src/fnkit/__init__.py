"""fnkit - 커링/합성/모나드 합성 툴킷"""
from fnkit.types import Arity, MethodName, Unary, Kleisli
from fnkit.errors import ValidationError, LawViolation, FnkitError, error_to_dict
from fnkit.result import Result, Success, Failure, bind, validate_all
from fnkit.curry import (
    arity, required_parameters, CurryState, Curried,
    curry, curry2, uncurry2,
)
from fnkit.pipeline import (
    identity, const,
    pipe, compose, flip, flip_args,
    pipe_with, compose_with, pipe_m, compose_m,
    tracer, trace, tap,
)
from fnkit.functor import Functor, Chainable, is_functor, fmap, chain
from fnkit.monads import Identity, Maybe, Just, Nothing, NothingType, ListM
from fnkit.deferred import Deferred
from fnkit.lists import fold, keep, reject, map_all
from fnkit.laws import (
    check_functor_identity, check_functor_composition,
    check_left_identity, check_right_identity, check_associativity,
    check_compose_associativity, check_pipe_compose_duality,
    check_flip_involution,
    verify_functor, verify_monad,
)
from fnkit.config import (
    LoggingConfig, TraceConfig, AppConfig,
    load_yaml, parse_config, load_config, merge_config,
)
from fnkit.logger import setup_logger, configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Types
    "Arity", "MethodName", "Unary", "Kleisli",
    # Errors
    "ValidationError", "LawViolation", "FnkitError", "error_to_dict",
    # Result
    "Result", "Success", "Failure", "bind", "validate_all",
    # Curry
    "arity", "required_parameters", "CurryState", "Curried",
    "curry", "curry2", "uncurry2",
    # Pipeline
    "identity", "const", "pipe", "compose", "flip", "flip_args",
    "pipe_with", "compose_with", "pipe_m", "compose_m",
    "tracer", "trace", "tap",
    # Functor / Monad
    "Functor", "Chainable", "is_functor", "fmap", "chain",
    "Identity", "Maybe", "Just", "Nothing", "NothingType", "ListM",
    "Deferred",
    # Lists
    "fold", "keep", "reject", "map_all",
    # Laws
    "check_functor_identity", "check_functor_composition",
    "check_left_identity", "check_right_identity", "check_associativity",
    "check_compose_associativity", "check_pipe_compose_duality",
    "check_flip_involution",
    "verify_functor", "verify_monad",
    # Config / Logging
    "LoggingConfig", "TraceConfig", "AppConfig",
    "load_yaml", "parse_config", "load_config", "merge_config",
    "setup_logger", "configure_logging", "get_logger",
]
