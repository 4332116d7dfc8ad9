"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from fnkit.errors import ValidationError
from fnkit.logger import DEFAULT_DATEFMT, DEFAULT_FORMAT, get_logger
from fnkit.result import Failure, Result, Success, bind

_logger = get_logger("config")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_PATHS = (
    Path("fnkit.yaml"),
    Path("fnkit.yml"),
    Path.home() / ".config" / "fnkit" / "config.yaml",
)


# ============================================================
# 로깅 / trace 설정
# ============================================================

class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: LogLevel = "INFO"
    format: str = DEFAULT_FORMAT
    datefmt: str = DEFAULT_DATEFMT

    model_config = {"frozen": True}


class TraceConfig(BaseModel):
    """trace 출력 설정"""
    enabled: bool = True
    template: str = Field(default="{label}: {value}", min_length=1)

    model_config = {"frozen": True}


# ============================================================
# 전체 앱 설정
# ============================================================

class AppConfig(BaseModel):
    """전체 설정"""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    trace: TraceConfig = Field(default_factory=TraceConfig)

    model_config = {"frozen": True}


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

def load_yaml(path: Path) -> Result[dict, ValidationError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Failure(ValidationError(
            field="config_path",
            message=f"Config file not found: {path}",
        ))
    except yaml.YAMLError as e:
        return Failure(ValidationError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))
    if data is not None and not isinstance(data, dict):
        return Failure(ValidationError(
            field="config_yaml",
            message=f"Top-level YAML must be a mapping, got {type(data).__name__}",
        ))
    return Success(data or {})


def parse_config(data: dict) -> Result[AppConfig, ValidationError]:
    """딕셔너리를 AppConfig로 파싱"""
    try:
        return Success(AppConfig(**data))
    except Exception as e:
        return Failure(ValidationError(
            field="config",
            message=str(e),
        ))


def find_config() -> Path | None:
    """기본 경로 중 처음 존재하는 설정 파일"""
    for p in DEFAULT_PATHS:
        if p.exists():
            return p
    return None


def load_config(path: Path | str | None = None) -> Result[AppConfig, ValidationError]:
    """
    설정 로드 (YAML + 기본값)

    path가 없으면 DEFAULT_PATHS를 탐색하고, 아무것도 없으면 기본값.
    """
    if path is None:
        path = find_config()

    if path is None:
        return Success(AppConfig())

    path = Path(path)
    _logger.debug("Loading config from %s", path)

    return bind(load_yaml(path), parse_config)


def merge_config(base: AppConfig, overrides: dict) -> AppConfig:
    """설정 병합 (CLI 인자 등)"""
    data = base.model_dump()

    # 중첩 딕셔너리 병합
    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    return AppConfig(**deep_merge(data, overrides))
