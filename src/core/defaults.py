"""
기본값 및 마스터 템플릿 모듈
===========================

- DEFAULTS: 새 프로젝트의 기본 입력값
- SAMPLE_DATA: 예시 프로젝트 (실시간 협업 편집기)
- DEFAULT_TEMPLATE: 플레이스홀더({FIELD_NAME})가 포함된 마스터 Markdown 템플릿
- PLACEHOLDER_MAP: ProjectInput 리프 경로 → 플레이스홀더 이름 (1:1 정적 매핑)

버전: 1.0.0
"""

from .models import ProjectInput

DEFAULTS = ProjectInput.model_validate({
    "doc_meta": {
        "idea": "",
        "doc_title": "",
        "scope": "",
        "audience": "",
        "work_mode": "바이브코딩 (Claude Code 활용)",
    },
    "tech": {
        "git_strategy": "GitHub Flow (main + feature branches)",
    },
})

SAMPLE_DATA = ProjectInput.model_validate({
    "doc_meta": {
        "idea": "여러 사용자가 동시에 문서를 편집하고 팀원과 공유하는 실시간 협업 웹 에디터",
        "doc_title": "실시간 협업 편집기 개발 프로세스 정의서",
        "scope": "MVP v1.0 개발 범위",
        "audience": "개발팀 (백엔드 + 프론트엔드)",
        "work_mode": "바이브코딩 (Claude Code 활용)",
    },
    "context": {
        "product_one_liner": "실시간 협업 문서 편집기 — 여러 사용자가 동시에 편집 가능",
        "core_scenarios": [
            "사용자가 새 문서를 생성한다",
            "사용자가 문서를 실시간으로 공동 편집한다",
            "사용자가 문서를 팀원에게 공유한다",
        ],
        "quality_bars": "응답시간 < 200ms, 가용성 99.9%, 동시 편집 지연 < 100ms",
        "top_risks": [
            "동시 편집 충돌 (CRDT/OT 복잡성)",
            "데이터 유실 (네트워크 단절 시)",
            "대규모 문서 성능 저하",
        ],
    },
    "tech": {
        "tech_stack": "TypeScript, Next.js 15, Hono, PostgreSQL, Redis, Y.js",
        "git_strategy": "GitHub Flow (main + feature branches)",
        "deployment": "Docker + Vercel (프론트) + AWS ECS (백엔드)",
        "envs": ["dev", "staging", "prod"],
        "cicd_tools": "GitHub Actions + Vercel Auto Deploy",
    },
    "claude_rules": {
        "do_dont": (
            "DO: 단일 책임 함수, 테스트 먼저, 커밋 메시지에 이슈 번호\n"
            "DON'T: 500줄 이상 파일, any 타입, console.log 방치"
        ),
        "task_slicing_rule": "하나의 PR은 하나의 기능/버그만 포함, 300줄 이내 권장",
        "quality_gates": "lint + unit test + type check 통과 필수",
        "experiment_vs_product": "실험은 experiment/ 브랜치, 프로덕션은 main 기준",
        "observability_rules": "구조화 로깅 필수, 에러는 Sentry 연동",
    },
    "policies": {
        "decision_policy": "ADR로 기록, 72시간 내 리뷰",
        "review_policy": "최소 1인 승인, 셀프머지 금지",
        "security_policy": "시크릿은 환경변수, 의존성 주간 스캔",
    },
    "template_styles": {
        "issue_template_style": "문제/원인/해결 3단 구조",
        "adr_template_style": "상태/컨텍스트/결정/결과 4단 구조",
        "pr_template_style": "변경사항/테스트/체크리스트",
        "test_plan_style": "시나리오/기대결과/실행조건",
        "release_template_style": "버전/변경로그/롤백 계획",
    },
})


def default_project() -> ProjectInput:
    """DEFAULTS의 독립된 복사본을 반환합니다."""
    return DEFAULTS.model_copy(deep=True)


def sample_project() -> ProjectInput:
    """SAMPLE_DATA의 독립된 복사본을 반환합니다."""
    return SAMPLE_DATA.model_copy(deep=True)


# =============================================================================
# 플레이스홀더 매핑
# =============================================================================

PLACEHOLDER_MAP = {
    "doc_meta.idea": "IDEA",
    "doc_meta.doc_title": "DOC_TITLE",
    "doc_meta.scope": "SCOPE",
    "doc_meta.audience": "AUDIENCE",
    "doc_meta.work_mode": "WORK_MODE",
    "context.product_one_liner": "PRODUCT_ONE_LINER",
    "context.core_scenarios": "CORE_SCENARIOS",
    "context.quality_bars": "QUALITY_BARS",
    "context.top_risks": "TOP_RISKS",
    "tech.tech_stack": "TECH_STACK",
    "tech.git_strategy": "GIT_STRATEGY",
    "tech.deployment": "DEPLOYMENT",
    "tech.envs": "ENVS",
    "tech.cicd_tools": "CICD_TOOLS",
    "claude_rules.do_dont": "DO_DONT",
    "claude_rules.task_slicing_rule": "TASK_SLICING_RULE",
    "claude_rules.quality_gates": "QUALITY_GATES",
    "claude_rules.experiment_vs_product": "EXPERIMENT_VS_PRODUCT",
    "claude_rules.observability_rules": "OBSERVABILITY_RULES",
    "policies.decision_policy": "DECISION_POLICY",
    "policies.review_policy": "REVIEW_POLICY",
    "policies.security_policy": "SECURITY_POLICY",
    "template_styles.issue_template_style": "ISSUE_TEMPLATE_STYLE",
    "template_styles.adr_template_style": "ADR_TEMPLATE_STYLE",
    "template_styles.pr_template_style": "PR_TEMPLATE_STYLE",
    "template_styles.test_plan_style": "TEST_PLAN_STYLE",
    "template_styles.release_template_style": "RELEASE_TEMPLATE_STYLE",
}

# 플레이스홀더 이름 → 필드 경로 (역방향 조회)
PLACEHOLDER_FIELDS = {name: path for path, name in PLACEHOLDER_MAP.items()}


# =============================================================================
# 마스터 템플릿
# =============================================================================

# 여러 줄 값이 들어갈 수 있는 플레이스홀더는 표가 아닌 제목 아래에 둔다
DEFAULT_TEMPLATE = """# 개발 프로세스 정의서 작성 프롬프트

> 아래 정보를 바탕으로 **개발 프로세스 정의서**를 작성해 주세요.
> 누락된 항목은 임의로 가정하지 말고 **"[결정 필요]"** 로 표기해 주세요.
> 출력은 Markdown이며, **실행 가능한 체크리스트** 중심으로 작성합니다.

---

## 1. 문서 메타정보

- **문서 제목**: {DOC_TITLE}
- **범위**: {SCOPE}
- **대상 독자**: {AUDIENCE}
- **작업 방식**: {WORK_MODE}

### 프로젝트 아이디어
{IDEA}

---

## 2. 제품/프로젝트 컨텍스트

### 제품 한줄 설명
{PRODUCT_ONE_LINER}

### 핵심 시나리오
{CORE_SCENARIOS}

### 품질 기준
{QUALITY_BARS}

### 주요 리스크
{TOP_RISKS}

---

## 3. 기술 스택 및 환경

### 기술 스택
{TECH_STACK}

### Git 전략
{GIT_STRATEGY}

### 배포 방식
{DEPLOYMENT}

### 환경 구성
{ENVS}

### CI/CD 도구
{CICD_TOOLS}

---

## 4. Claude Code 작업 규칙

### Do / Don't
{DO_DONT}

### 태스크 분할 규칙
{TASK_SLICING_RULE}

### 품질 게이트
{QUALITY_GATES}

### 실험 vs 프로덕션 구분
{EXPERIMENT_VS_PRODUCT}

### 관측성(Observability) 규칙
{OBSERVABILITY_RULES}

---

## 5. 정책

### 의사결정 정책
{DECISION_POLICY}

### 리뷰 정책
{REVIEW_POLICY}

### 보안 정책
{SECURITY_POLICY}

---

## 6. 템플릿/스타일 가이드

### 이슈 템플릿
{ISSUE_TEMPLATE_STYLE}

### ADR 템플릿
{ADR_TEMPLATE_STYLE}

### PR 템플릿
{PR_TEMPLATE_STYLE}

### 테스트 계획
{TEST_PLAN_STYLE}

### 릴리스 템플릿
{RELEASE_TEMPLATE_STYLE}
"""
