"""
프로젝트 가져오기/내보내기 모듈
==============================

ProjectInput을 YAML 또는 JSON으로 주고받습니다.

- 가져오기는 항상 병합(merge_project)을 거치므로 누락된 키는 기존 값을 유지합니다.
- 파싱할 수 없는 문서는 ImportParseError로 실패하며, 기존 데이터는 그대로입니다.
- 내보내기는 do_dont 필드를 원문 그대로 기록합니다.

버전: 1.0.0
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from .defaults import default_project
from .exceptions import ImportParseError
from .merge import merge_project
from .models import ProjectInput
from ..utils.helpers import read_text_file, write_text_file

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

MSG_PARSE_FAILED = "파일 파싱에 실패했습니다. YAML/JSON 형식을 확인하세요."


def _is_json(filename: Optional[str]) -> bool:
    return bool(filename) and str(filename).lower().endswith(JSON_SUFFIXES)


def parse_project_document(text: str, filename: Optional[str] = None) -> Dict[str, Any]:
    """
    YAML/JSON 텍스트를 매핑으로 파싱합니다.

    Args:
        text (str): 문서 내용
        filename (Optional[str]): 파일 이름 (.json이면 JSON, 그 외에는 YAML로 파싱)

    Returns:
        Dict[str, Any]: 파싱된 문서 (빈 문서는 {})

    Raises:
        ImportParseError: 파싱 실패 또는 최상위가 매핑이 아닐 때
    """
    try:
        if _is_json(filename):
            parsed = json.loads(text) if text.strip() else None
        else:
            parsed = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ImportParseError(f"{MSG_PARSE_FAILED} ({e})") from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ImportParseError(f"{MSG_PARSE_FAILED} (최상위 구조가 매핑이 아닙니다: {type(parsed).__name__})")
    return parsed


def import_project(base: ProjectInput, text: str, filename: Optional[str] = None) -> ProjectInput:
    """
    문서를 파싱하여 base에 병합한 새 ProjectInput을 반환합니다.

    Raises:
        ImportParseError: 파싱 실패 또는 병합 결과가 ProjectInput 구조가 아닐 때
    """
    override = parse_project_document(text, filename)
    try:
        return merge_project(base, override)
    except ValidationError as e:
        raise ImportParseError(f"{MSG_PARSE_FAILED} ({e.error_count()}개 필드 오류)") from e


def load_project_file(path: Union[str, Path], base: Optional[ProjectInput] = None) -> ProjectInput:
    """
    YAML/JSON 파일을 읽어 base(기본값: DEFAULTS)에 병합합니다.

    Raises:
        ImportParseError: 파일을 읽을 수 없거나 파싱에 실패했을 때
    """
    try:
        text = read_text_file(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ImportParseError(f"파일을 읽을 수 없습니다: {path} ({e})") from e
    return import_project(base if base is not None else default_project(), text, str(path))


def export_yaml(data: ProjectInput) -> str:
    """ProjectInput을 YAML 문자열로 내보냅니다 (키 순서 유지, 줄바꿈 없음)."""
    return yaml.safe_dump(
        data.model_dump(),
        allow_unicode=True,
        sort_keys=False,
        width=float("inf"),
    )


def export_json(data: ProjectInput) -> str:
    """ProjectInput을 JSON 문자열로 내보냅니다."""
    return json.dumps(data.model_dump(), ensure_ascii=False, indent=2)


def save_project_file(data: ProjectInput, path: Union[str, Path]) -> Path:
    """확장자에 따라 YAML 또는 JSON으로 저장하고 저장 경로를 반환합니다."""
    text = export_json(data) + "\n" if _is_json(str(path)) else export_yaml(data)
    return write_text_file(path, text)
