"""
입력 검증 모듈
==============

ProjectInput을 고정된 필수 필드 규칙표로 검증합니다.

- errors: 필수 규칙 위반 (생성은 계속되며 해당 위치에 결정 필요 마커가 들어감)
- warnings: 선택 필드 미입력 ("결정 필요"로 표시될 항목 안내)

모든 규칙을 표 순서대로 평가하며, 첫 위반에서 멈추지 않고 전부 보고합니다.

버전: 1.0.0
"""

from typing import Any, List, Literal, Optional
from pydantic import BaseModel

from .models import ProjectInput, ValidationMessage, ValidationReport


class RequiredRule(BaseModel):
    """필수 필드 규칙"""
    path: str
    kind: Literal["str", "list", "str_or_list"]
    min_len: Optional[int] = None
    must_contain: Optional[str] = None


REQUIRED_RULES: List[RequiredRule] = [
    RequiredRule(path="context.product_one_liner", kind="str"),
    RequiredRule(path="context.core_scenarios", kind="list", min_len=2),
    RequiredRule(path="context.top_risks", kind="list", min_len=2),
    RequiredRule(path="tech.tech_stack", kind="str_or_list"),
    RequiredRule(path="tech.deployment", kind="str"),
    RequiredRule(path="tech.envs", kind="list", min_len=1, must_contain="dev"),
]

REQUIRED_PATHS = frozenset(rule.path for rule in REQUIRED_RULES)

MSG_MISSING = "필수 입력이 누락되었습니다."
MSG_NOT_LIST = "리스트 형식이어야 합니다."
MSG_UNFILLED = "미입력 — 결정 필요로 표시됩니다."


def is_empty_value(value: Any) -> bool:
    """None, 공백뿐인 문자열, 빈 리스트를 빈 값으로 판단합니다."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _check_rule(rule: RequiredRule, value: Any) -> Optional[str]:
    """규칙 하나를 평가하여 위반 메시지(없으면 None)를 반환합니다."""
    if is_empty_value(value):
        return MSG_MISSING

    if rule.kind != "list":
        return None

    if not isinstance(value, (list, tuple)):
        return MSG_NOT_LIST

    if rule.min_len and len(value) < rule.min_len:
        return f"최소 {rule.min_len}개 항목이 필요합니다. (현재 {len(value)}개)"

    if rule.must_contain and rule.must_contain not in value:
        return f"'{rule.must_contain}' 항목이 포함되어야 합니다."

    return None


def validate(data: ProjectInput) -> ValidationReport:
    """
    ProjectInput을 검증하는 함수 (부작용 없음)

    Args:
        data (ProjectInput): 검증할 프로젝트 입력

    Returns:
        ValidationReport: errors(필수 규칙 위반)와 warnings(선택 필드 미입력)
    """
    errors: List[ValidationMessage] = []
    warnings: List[ValidationMessage] = []

    for rule in REQUIRED_RULES:
        message = _check_rule(rule, data.get_field(rule.path))
        if message:
            errors.append(ValidationMessage(level="error", field=rule.path, message=message))

    for path in ProjectInput.leaf_paths():
        if path in REQUIRED_PATHS:
            continue
        if is_empty_value(data.get_field(path)):
            warnings.append(ValidationMessage(level="warn", field=path, message=MSG_UNFILLED))

    return ValidationReport(errors=errors, warnings=warnings)
