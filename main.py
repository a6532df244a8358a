#!/usr/bin/env python3
"""
개발 프로세스 정의서 프롬프트 생성기 메인 실행 파일
================================================

프로젝트 입력(YAML/JSON)으로 프롬프트 문서를 생성하고, 검증하고,
아이디어 텍스트로 기술 스택을 추천받거나 LLM으로 초안을 만듭니다.

사용법:
    python main.py init project.yaml --sample
    python main.py validate project.yaml
    python main.py generate project.yaml --output prompt.md
    python main.py recommend --input project.yaml --write
    python main.py draft project.yaml --provider openai --dry-run

버전: 1.0.0
"""

import json
from pathlib import Path
from typing import List, Optional

import typer

from src.core.config import DEFAULT_DRAFT_PROVIDER, DEFAULT_DRAFT_MAX_TOKENS, DEFAULT_DRAFT_TEMPERATURE, get_api_key, get_config_summary
from src.core.defaults import default_project, sample_project
from src.core.exceptions import ImportParseError, InferenceError, ModelLoadError
from src.core.models import ProjectInput, ValidationMessage
from src.core.project_io import export_json, export_yaml, load_project_file, save_project_file
from src.core.template_engine import generate
from src.core.validator import validate
from src.utils.helpers import format_percentage, read_text_file, truncate_text, write_text_file

app = typer.Typer(
    name="process-doc-bot",
    help="개발 프로세스 정의서 프롬프트 생성기",
    no_args_is_help=True,
)


def _fail(message: str):
    """오류 메시지를 출력하고 종료 코드 1로 끝냅니다."""
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load(input_path: Optional[Path]) -> ProjectInput:
    """입력 파일을 DEFAULTS에 병합하여 로드합니다 (파일이 없으면 DEFAULTS)."""
    if input_path is None:
        return default_project()
    try:
        return load_project_file(input_path)
    except ImportParseError as e:
        _fail(f"❌ {e}")


def _print_messages(messages: List[ValidationMessage]):
    for msg in messages:
        color = typer.colors.RED if msg.level == "error" else typer.colors.YELLOW
        typer.secho(f"[{msg.level}] {msg.field}: {msg.message}", fg=color, err=True)


@app.command()
def init(
    output: Path = typer.Argument(Path("project.yaml"), help="생성할 YAML/JSON 파일"),
    sample: bool = typer.Option(False, "--sample", help="예시 프로젝트로 채워서 생성"),
    force: bool = typer.Option(False, "--force", help="기존 파일 덮어쓰기"),
):
    """기본값 또는 예시 데이터로 프로젝트 입력 파일을 만듭니다."""
    if output.exists() and not force:
        _fail(f"❌ 파일이 이미 존재합니다: {output} (--force로 덮어쓰기)")
    data = sample_project() if sample else default_project()
    save_project_file(data, output)
    typer.echo(f"✅ 프로젝트 입력 파일을 생성했습니다: {output}")


@app.command("validate")
def validate_command(
    input_path: Optional[Path] = typer.Argument(None, help="프로젝트 입력 파일 (YAML/JSON)"),
):
    """필수 필드 규칙으로 입력을 검증합니다. 오류가 있으면 종료 코드 1."""
    report = validate(_load(input_path))
    _print_messages(report.messages)
    typer.echo(f"오류 {len(report.errors)}개, 경고 {len(report.warnings)}개")
    if report.has_errors:
        raise typer.Exit(code=1)


@app.command("generate")
def generate_command(
    input_path: Optional[Path] = typer.Argument(None, help="프로젝트 입력 파일 (YAML/JSON)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="결과 Markdown 저장 경로"),
    template: Optional[Path] = typer.Option(None, "--template", "-t", help="사용할 마스터 템플릿 파일"),
):
    """프롬프트 문서를 생성합니다. 검증 오류가 있어도 결정 필요 마커를 넣어 생성합니다."""
    data = _load(input_path)
    template_text = None
    if template:
        try:
            template_text = read_text_file(template)
        except (OSError, UnicodeDecodeError) as e:
            _fail(f"❌ 템플릿 파일을 읽을 수 없습니다: {template} ({e})")
    result = generate(data, template_text)

    if output:
        write_text_file(output, result.prompt_text)
        typer.echo(f"✅ 프롬프트를 저장했습니다: {output}")
    else:
        typer.echo(result.prompt_text)

    _print_messages(result.errors)
    if result.decision_needed:
        typer.secho(f"⚠️ 결정 필요 {len(result.decision_needed)}개: {', '.join(result.decision_needed)}",
                    fg=typer.colors.YELLOW, err=True)


@app.command()
def recommend(
    idea: Optional[str] = typer.Argument(None, help="프로젝트 아이디어 (생략하면 입력 파일의 doc_meta.idea)"),
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="프로젝트 입력 파일"),
    write: bool = typer.Option(False, "--write", help="추천 결과를 입력 파일의 tech.tech_stack에 기록"),
):
    """아이디어 텍스트로 기술 스택 8개를 추천합니다."""
    from src.core.tech_recommender import apply_recommendation, recommend_techs

    data = _load(input_path) if input_path else None
    idea_text = idea if idea is not None else (data.doc_meta.idea if data else "")
    if not idea_text or not idea_text.strip():
        _fail("❌ 프로젝트 아이디어를 먼저 입력해주세요. (인자 또는 doc_meta.idea)")

    def _on_progress(percent: float):
        typer.echo(f"🔄 모델 다운로드 {format_percentage(percent, 100)}", err=True)

    typer.echo("🔍 아이디어 분석 중...", err=True)
    try:
        names = recommend_techs(idea_text, on_progress=_on_progress)
    except (ModelLoadError, InferenceError) as e:
        _fail(f"❌ 기술 스택 추천 실패: {e}")

    for rank, name in enumerate(names, 1):
        typer.echo(f"{rank}. {name}")

    if write:
        if input_path is None:
            _fail("❌ --write에는 --input 파일이 필요합니다.")
        save_project_file(apply_recommendation(data, names), input_path)
        typer.echo(f"✅ tech.tech_stack을 갱신했습니다: {input_path}")


@app.command()
def draft(
    input_path: Optional[Path] = typer.Argument(None, help="프로젝트 입력 파일 (YAML/JSON)"),
    provider: str = typer.Option(DEFAULT_DRAFT_PROVIDER, "--provider", "-p", help="openai 또는 anthropic"),
    model: str = typer.Option("", "--model", "-m", help="모델 이름 (생략하면 provider 기본 모델)"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="API 키 (생략하면 환경 변수)"),
    temperature: float = typer.Option(DEFAULT_DRAFT_TEMPERATURE, "--temperature"),
    max_tokens: int = typer.Option(DEFAULT_DRAFT_MAX_TOKENS, "--max-tokens"),
    dry_run: bool = typer.Option(False, "--dry-run", help="호출하지 않고 요청 요약만 출력"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="초안 Markdown 저장 경로"),
):
    """생성된 프롬프트로 외부 LLM에 개발 프로세스 정의서 초안을 요청합니다."""
    from src.agents.draft_agent import DraftAgent, DraftRequest

    result = generate(_load(input_path))
    request = DraftRequest(
        prompt_text=result.prompt_text,
        provider=provider,
        model=model,
        api_key=api_key or get_api_key(provider),
        temperature=temperature,
        max_tokens=max_tokens,
        dry_run=dry_run,
    )
    response = DraftAgent().create_draft(request)
    if not response.ok:
        _fail(f"❌ {response.error} (status {response.status_code})")

    if output:
        write_text_file(output, response.content)
        typer.echo(f"✅ 초안을 저장했습니다: {output} ({truncate_text(response.model, 40)})")
    else:
        typer.echo(response.content)


@app.command("export")
def export_command(
    input_path: Optional[Path] = typer.Argument(None, help="프로젝트 입력 파일 (YAML/JSON)"),
    fmt: str = typer.Option("yaml", "--format", "-f", help="yaml 또는 json"),
):
    """병합된 프로젝트 입력을 YAML 또는 JSON으로 출력합니다."""
    data = _load(input_path)
    if fmt == "yaml":
        typer.echo(export_yaml(data), nl=False)
    elif fmt == "json":
        typer.echo(export_json(data))
    else:
        _fail(f"❌ 지원하지 않는 형식입니다: {fmt}")


@app.command()
def config():
    """현재 설정 요약을 출력합니다 (API 키 값은 출력하지 않음)."""
    typer.echo(json.dumps(get_config_summary(), ensure_ascii=False, indent=2))


def main():
    """
    메인 실행 함수
    """
    app()


if __name__ == "__main__":
    main()
