"""
데이터 모델 모듈
================

프로젝트 입력 전체를 담는 ProjectInput과 검증/생성 결과 모델을 정의합니다.

ProjectInput은 6개 섹션(doc_meta, context, tech, claude_rules, policies,
template_styles)으로 구성되며, 각 섹션의 값은 문자열 또는 비어있지 않은
문자열 리스트입니다. None은 허용되지 않고 빈 문자열/빈 리스트로 정규화됩니다.

버전: 1.0.0
"""

from typing import Any, List, Literal, Union, get_origin
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def _leaf_kind(annotation: Any) -> str:
    """필드 타입 어노테이션을 'str' / 'list' / 'str_or_list'로 분류합니다."""
    if annotation is str:
        return "str"
    if get_origin(annotation) is list:
        return "list"
    return "str_or_list"


def _clean_items(value: Any) -> List[str]:
    """리스트 값을 공백 제거된 비어있지 않은 문자열 리스트로 변환합니다."""
    if not isinstance(value, (list, tuple, set)):
        value = [value]
    items = []
    for item in value:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return items


class ProjectSection(BaseModel):
    """
    ProjectInput 섹션의 공통 기반 클래스

    모든 리프 값을 정규화합니다:
    - None → "" 또는 []
    - 리스트 필드: 빈 항목 제거, 단일 값은 1개짜리 리스트로 변환
    - 문자열 필드에 리스트가 들어오면 ", "로 결합
    - 숫자/불리언(YAML 파싱 결과)은 문자열로 변환
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    @field_validator("*", mode="before")
    @classmethod
    def normalize_leaf(cls, value: Any, info: ValidationInfo) -> Any:
        kind = _leaf_kind(cls.model_fields[info.field_name].annotation)

        if value is None:
            return [] if kind == "list" else ""

        if kind == "list":
            return _clean_items(value)

        if isinstance(value, (list, tuple)):
            items = _clean_items(value)
            return items if kind == "str_or_list" else ", ".join(items)

        if isinstance(value, str):
            return value
        return str(value)


class DocMeta(ProjectSection):
    """문서 메타정보"""
    idea: str = ""
    doc_title: str = ""
    scope: str = ""
    audience: str = ""
    work_mode: str = ""


class Context(ProjectSection):
    """제품/프로젝트 컨텍스트"""
    product_one_liner: str = ""
    core_scenarios: List[str] = Field(default_factory=list)
    quality_bars: str = ""
    top_risks: List[str] = Field(default_factory=list)


class Tech(ProjectSection):
    """기술 스택 및 환경"""
    tech_stack: Union[str, List[str]] = ""
    git_strategy: str = ""
    deployment: str = ""
    envs: List[str] = Field(default_factory=list)
    cicd_tools: str = ""


class ClaudeRules(ProjectSection):
    """Claude Code 작업 규칙 (do_dont는 'DO:' / "DON'T:" 접두사 라인으로 인코딩)"""
    do_dont: str = ""
    task_slicing_rule: str = ""
    quality_gates: str = ""
    experiment_vs_product: str = ""
    observability_rules: str = ""


class Policies(ProjectSection):
    """정책"""
    decision_policy: str = ""
    review_policy: str = ""
    security_policy: str = ""


class TemplateStyles(ProjectSection):
    """템플릿/스타일 가이드"""
    issue_template_style: str = ""
    adr_template_style: str = ""
    pr_template_style: str = ""
    test_plan_style: str = ""
    release_template_style: str = ""


class ProjectInput(BaseModel):
    """
    프로젝트 입력 전체 (엔진에 전달되는 단일 집합체)

    알 수 없는 최상위 키는 그대로 보존됩니다 (하위 호환 가져오기 지원).
    """

    model_config = ConfigDict(extra="allow")

    doc_meta: DocMeta = Field(default_factory=DocMeta)
    context: Context = Field(default_factory=Context)
    tech: Tech = Field(default_factory=Tech)
    claude_rules: ClaudeRules = Field(default_factory=ClaudeRules)
    policies: Policies = Field(default_factory=Policies)
    template_styles: TemplateStyles = Field(default_factory=TemplateStyles)

    @field_validator("*", mode="before")
    @classmethod
    def normalize_section(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def leaf_paths(cls) -> List[str]:
        """모든 리프 필드의 점 표기 경로를 모델 정의 순서대로 반환합니다."""
        paths = []
        for section_name, section_field in cls.model_fields.items():
            for field_name in section_field.annotation.model_fields:
                paths.append(f"{section_name}.{field_name}")
        return paths

    def get_field(self, path: str) -> Any:
        """점 표기 경로('tech.envs')로 필드 값을 조회합니다. 없으면 None."""
        section_name, _, field_name = path.partition(".")
        section = getattr(self, section_name, None)
        if section is None:
            return None
        return getattr(section, field_name, None)

    def with_field(self, path: str, value: Any) -> "ProjectInput":
        """지정한 필드만 바꾼 새 ProjectInput을 반환합니다 (원본은 변경하지 않음)."""
        section_name, _, field_name = path.partition(".")
        data = self.model_dump()
        data.setdefault(section_name, {})[field_name] = value
        return ProjectInput.model_validate(data)


class ValidationMessage(BaseModel):
    """검증 메시지 (error: 필수 규칙 위반, warn: 선택 필드 미입력)"""
    level: Literal["error", "warn"]
    field: str
    message: str


class ValidationReport(BaseModel):
    """validate() 결과"""
    errors: List[ValidationMessage] = Field(default_factory=list)
    warnings: List[ValidationMessage] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def messages(self) -> List[ValidationMessage]:
        return [*self.errors, *self.warnings]


class GenerateResult(BaseModel):
    """generate() 결과"""
    prompt_text: str
    decision_needed: List[str] = Field(default_factory=list)
    errors: List[ValidationMessage] = Field(default_factory=list)
    warnings: List[ValidationMessage] = Field(default_factory=list)


class TechItem(BaseModel):
    """추천 코퍼스 항목 (description은 임베딩 전용, 사용자에게 노출되지 않음)"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class RuleBuckets(BaseModel):
    """do_dont 필드를 MUST / MUST NOT 두 목록으로 분리한 결과"""
    must: List[str] = Field(default_factory=list)
    must_not: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.must and not self.must_not
