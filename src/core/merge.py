"""
병합 유틸리티 모듈

외부에서 작성된 YAML/JSON 프로필·프로젝트 문서를 현재 입력에 깊은 병합합니다.

규칙:
- override 값이 None / 공백 문자열 / 빈 항목만 있는 리스트이면 건너뜀
  (빈 값으로 기존 값을 지우지 않음)
- 양쪽 값이 모두 매핑이면 재귀 병합
- 그 외에는 override 값으로 통째로 교체 (리스트는 원소 단위로 병합하지 않음)
- base에 없는 키도 결과에 복사 (하위 호환 가져오기)
"""

import copy
from collections.abc import Mapping
from typing import Any

from .models import ProjectInput


def _is_blank(value: Any) -> bool:
    """None, 공백뿐인 문자열, 빈 항목만 있는 리스트([], [""], [None])를 빈 값으로 판단합니다."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return all(_is_blank(item) for item in value)
    return False


def deep_merge(base: Any, override: Any) -> Any:
    """
    base에 override를 깊은 병합한 새 구조를 반환합니다 (입력은 변경하지 않음).

    Args:
        base (Any): 기준 문서 (보통 dict)
        override (Any): 덮어쓸 부분 문서

    Returns:
        Any: 병합 결과
    """
    if override is None:
        return copy.deepcopy(base)
    if not isinstance(override, Mapping):
        return copy.deepcopy(override)

    result = copy.deepcopy(dict(base)) if isinstance(base, Mapping) else {}
    for key, value in override.items():
        if _is_blank(value):
            continue
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def merge_project(base: ProjectInput, override: Any) -> ProjectInput:
    """
    ProjectInput에 부분 문서를 병합하여 새 ProjectInput을 반환합니다.

    Raises:
        pydantic.ValidationError: 병합 결과가 ProjectInput 구조가 아닐 때
    """
    merged = deep_merge(base.model_dump(), override)
    return ProjectInput.model_validate(merged)
