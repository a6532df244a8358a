"""
템플릿 엔진 모듈
================

마스터 Markdown 템플릿의 플레이스홀더({FIELD_NAME})를 ProjectInput 값으로
치환하여 프롬프트 문서를 생성합니다.

처리 순서:
1. validate()로 errors / warnings 계산
2. 각 필드를 포매터로 렌더링 (리스트 → 불릿 목록, 문자열 → 그대로,
   do_dont → MUST / MUST NOT 목록)
3. 플레이스홀더 1회 치환. 값이 비었거나 검증 오류가 있는 필드는
   "[결정 필요: NAME]" 마커로 치환하고 decision_needed에 기록
4. 부록 A(결정 필요 체크리스트)와 부록 B(검증 메시지)를 덧붙임

같은 입력에 대해 항상 같은 결과를 반환합니다 (입력은 변경하지 않음).

버전: 1.0.0
"""

import re
from typing import Any, Callable, Dict, List, Optional, Set

from .defaults import DEFAULT_TEMPLATE, PLACEHOLDER_FIELDS
from .models import GenerateResult, ProjectInput, ValidationReport
from .rule_codec import split_do_dont
from .validator import validate

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Z][A-Z0-9_]*)\}")

DECISION_MARKER = "[결정 필요: {name}]"


def decision_marker(name: str) -> str:
    """플레이스홀더 이름에 대한 결정 필요 마커 문자열"""
    return DECISION_MARKER.format(name=name)


def bullet_list(items: List[str]) -> str:
    """항목 리스트를 Markdown 불릿 목록으로 변환합니다."""
    return "\n".join(f"- {item}" for item in items if item)


def format_value(value: Any) -> str:
    """
    필드 값을 Markdown 텍스트로 변환하는 기본 포매터

    Args:
        value (Any): 문자열 또는 문자열 리스트

    Returns:
        str: 리스트는 불릿 목록, 문자열은 그대로
    """
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return bullet_list([str(item) for item in value])
    return str(value)


def format_do_dont(value: Any) -> str:
    """do_dont 문자열을 MUST / MUST NOT 하위 섹션으로 렌더링합니다."""
    buckets = split_do_dont(value or "")
    blocks = []
    if buckets.must:
        blocks.append("#### MUST\n" + bullet_list(buckets.must))
    if buckets.must_not:
        blocks.append("#### MUST NOT\n" + bullet_list(buckets.must_not))
    return "\n\n".join(blocks)


# 기본 포매터 대신 사용할 필드별 포매터
FIELD_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "claude_rules.do_dont": format_do_dont,
}


def render_field(data: ProjectInput, path: str) -> str:
    """필드 하나를 렌더링합니다."""
    formatter = FIELD_FORMATTERS.get(path, format_value)
    return formatter(data.get_field(path))


def render_appendix(decision_needed: List[str], report: ValidationReport) -> str:
    """결정 필요 체크리스트(부록 A)와 검증 메시지 목록(부록 B)을 만듭니다."""
    lines = ["---", "", "## 부록 A. 결정 필요 항목", ""]
    if decision_needed:
        for name in decision_needed:
            lines.append(f"- [ ] {name} (`{PLACEHOLDER_FIELDS[name]}`)")
    else:
        lines.append("- 없음")

    lines += ["", "## 부록 B. 검증 경고", ""]
    messages = report.messages
    if messages:
        for msg in messages:
            lines.append(f"- **[{msg.level}]** `{msg.field}`: {msg.message}")
    else:
        lines.append("- 없음")

    return "\n".join(lines) + "\n"


def generate(data: ProjectInput, template: Optional[str] = None) -> GenerateResult:
    """
    프롬프트 문서를 생성하는 함수 (부작용 없음, 결정적)

    Args:
        data (ProjectInput): 프로젝트 입력
        template (Optional[str]): 사용할 마스터 템플릿 (기본값: DEFAULT_TEMPLATE)

    Returns:
        GenerateResult: prompt_text, decision_needed, errors, warnings
    """
    report = validate(data)
    error_fields: Set[str] = {msg.field for msg in report.errors}
    decision_needed: List[str] = []

    def _substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        path = PLACEHOLDER_FIELDS.get(name)
        if path is None:
            # 매핑에 없는 플레이스홀더는 그대로 둔다
            return match.group(0)

        rendered = "" if path in error_fields else render_field(data, path)
        if not rendered.strip():
            if name not in decision_needed:
                decision_needed.append(name)
            return decision_marker(name)
        return rendered

    body = PLACEHOLDER_PATTERN.sub(_substitute, DEFAULT_TEMPLATE if template is None else template)
    prompt_text = body.rstrip("\n") + "\n\n" + render_appendix(decision_needed, report)

    return GenerateResult(
        prompt_text=prompt_text,
        decision_needed=decision_needed,
        errors=report.errors,
        warnings=report.warnings,
    )
