"""
문서 초안 생성 에이전트
======================

생성된 프롬프트를 외부 LLM(OpenAI / Anthropic)에 보내
개발 프로세스 정의서 초안을 받아옵니다.

워크플로우 (LangGraph):
1. check_request - API 키 / provider 확인, 기본 모델 결정
2. dry_run - 실제 호출 없이 요청 요약만 반환
3. call_provider - provider 호출 (자동 재시도 없음)

API 키는 SecretStr로만 다루며 출력하거나 보관하지 않습니다.

버전: 1.0.0
"""

import json
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Any, Optional, TypedDict

import anthropic
import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from langgraph.graph import END, StateGraph
from pydantic import BaseModel, Field, SecretStr

from ..core.config import (
    DEFAULT_DRAFT_MAX_TOKENS,
    DEFAULT_DRAFT_MODELS,
    DEFAULT_DRAFT_PROVIDER,
    DEFAULT_DRAFT_TEMPERATURE,
    DRAFT_PROVIDERS,
    DRAFT_TIMEOUT_SEC,
)
from ..core.exceptions import DraftTimeoutError, RemoteServiceError

SYSTEM_PROMPT = """당신은 소프트웨어 개발 프로세스 전문가입니다.
사용자가 제공하는 프롬프트를 바탕으로 **개발 프로세스 정의서** 문서 초안을 작성합니다.

## 출력 규칙
- 출력 형식: Markdown
- 구조: 1페이지 요약 → 본문 프로세스 → 부록/템플릿 → 결정 필요 목록
- 누락된 입력은 가정하지 말고 **"[결정 필요]"** 로 표기
- 장황한 설명 금지, **실행 가능한 체크리스트** 중심
- 각 섹션은 명확한 담당자/기한/완료 조건을 포함"""


class DraftRequest(BaseModel):
    """초안 생성 요청"""
    prompt_text: str
    provider: str = DEFAULT_DRAFT_PROVIDER
    model: str = ""
    api_key: Optional[SecretStr] = None
    temperature: float = Field(default=DEFAULT_DRAFT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(default=DEFAULT_DRAFT_MAX_TOKENS, gt=0)
    dry_run: bool = False


class DraftResponse(BaseModel):
    """초안 생성 응답 (실패 시 error / status_code 설정)"""
    content: str = ""
    model: str = ""
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DraftState(TypedDict, total=False):
    """초안 워크플로우 상태"""
    request: DraftRequest
    model: str
    response: DraftResponse


def _message_text(content: Any) -> str:
    """LangChain 메시지 content(문자열 또는 블록 리스트)에서 텍스트만 추출합니다."""
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class DraftAgent:
    """
    LangGraph 기반 문서 초안 생성 에이전트

    create_draft()는 예외 대신 error가 채워진 DraftResponse를 반환하므로
    호출 측은 응답의 error / status_code만 확인하면 됩니다.
    """

    def __init__(self, timeout_sec: int = DRAFT_TIMEOUT_SEC):
        self.timeout_sec = timeout_sec
        self.graph = self._build_graph()

    def _build_graph(self):
        """LangGraph 워크플로우를 구성합니다."""
        workflow = StateGraph(DraftState)

        workflow.add_node("check_request", self._check_request)
        workflow.add_node("dry_run", self._dry_run)
        workflow.add_node("call_provider", self._call_provider)

        workflow.set_entry_point("check_request")
        workflow.add_conditional_edges(
            "check_request",
            self._route_request,
            {"reject": END, "dry_run": "dry_run", "call_provider": "call_provider"},
        )
        workflow.add_edge("dry_run", END)
        workflow.add_edge("call_provider", END)

        return workflow.compile()

    # ---------------------------------------------------------------------
    # 워크플로우 노드
    # ---------------------------------------------------------------------
    def _check_request(self, state: DraftState) -> DraftState:
        request = state["request"]

        if request.api_key is None or not request.api_key.get_secret_value().strip():
            return {"response": DraftResponse(error="API key가 필요합니다.", status_code=400)}

        if request.provider not in DRAFT_PROVIDERS:
            return {"response": DraftResponse(
                error=f"지원하지 않는 provider: {request.provider}", status_code=400
            )}

        return {"model": request.model or DEFAULT_DRAFT_MODELS[request.provider]}

    def _route_request(self, state: DraftState) -> str:
        if state.get("response") is not None:
            return "reject"
        if state["request"].dry_run:
            return "dry_run"
        return "call_provider"

    def _dry_run(self, state: DraftState) -> DraftState:
        request = state["request"]
        summary = {
            "provider": request.provider,
            "model": state["model"],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
            "system_prompt_length": len(SYSTEM_PROMPT),
            "user_prompt_length": len(request.prompt_text),
        }
        return {"response": DraftResponse(
            content=json.dumps(summary, ensure_ascii=False, indent=2),
            model=state["model"],
        )}

    def _call_provider(self, state: DraftState) -> DraftState:
        request = state["request"]
        model = state["model"]
        print(f"🔄 {request.provider} ({model})에 초안 생성을 요청합니다...")
        try:
            if request.provider == "openai":
                response = self._call_openai(request, model)
            else:
                response = self._call_anthropic(request, model)
        except RemoteServiceError as e:
            print(f"❌ 초안 생성 실패: {e.message}")
            return {"response": DraftResponse(error=e.message, status_code=e.status_code, model=model)}

        print(f"✅ 초안 생성 완료 (입력 {response.input_tokens} / 출력 {response.output_tokens} 토큰)")
        return {"response": response}

    # ---------------------------------------------------------------------
    # provider 호출
    # ---------------------------------------------------------------------
    def _call_openai(self, request: DraftRequest, model: str) -> DraftResponse:
        llm = ChatOpenAI(
            model=model,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            api_key=request.api_key,
            max_retries=0,
        )
        try:
            message = llm.invoke([
                SystemMessage(content=SYSTEM_PROMPT),
                HumanMessage(content=request.prompt_text),
            ])
        except openai.APIStatusError as e:
            raise RemoteServiceError(f"OpenAI 오류 ({e.status_code}): {e.message}", e.status_code) from e
        except openai.APIError as e:
            raise RemoteServiceError(f"OpenAI 연결 실패: {e}", 502) from e

        usage = getattr(message, "usage_metadata", None) or {}
        metadata = getattr(message, "response_metadata", None) or {}
        return DraftResponse(
            content=_message_text(message.content),
            model=metadata.get("model_name", model),
            input_tokens=usage.get("input_tokens"),
            output_tokens=usage.get("output_tokens"),
        )

    def _call_anthropic(self, request: DraftRequest, model: str) -> DraftResponse:
        client = anthropic.Anthropic(api_key=request.api_key.get_secret_value(), max_retries=0)
        try:
            result = client.messages.create(
                model=model,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": request.prompt_text}],
            )
        except anthropic.APIStatusError as e:
            raise RemoteServiceError(f"Anthropic 오류 ({e.status_code}): {e.message}", e.status_code) from e
        except anthropic.APIError as e:
            raise RemoteServiceError(f"Anthropic 연결 실패: {e}", 502) from e

        text = "".join(block.text for block in result.content if getattr(block, "type", None) == "text")
        return DraftResponse(
            content=text,
            model=result.model,
            input_tokens=result.usage.input_tokens,
            output_tokens=result.usage.output_tokens,
        )

    # ---------------------------------------------------------------------
    # 진입점
    # ---------------------------------------------------------------------
    def create_draft(self, request: DraftRequest) -> DraftResponse:
        """
        초안 생성 워크플로우를 실행합니다 (타임아웃 보호).

        Args:
            request (DraftRequest): 초안 생성 요청

        Returns:
            DraftResponse: 생성 결과 또는 error / status_code가 설정된 응답
        """
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self.graph.invoke, {"request": request})
        try:
            result = future.result(timeout=self.timeout_sec)
        except FuturesTimeoutError:
            error = DraftTimeoutError(self.timeout_sec)
            return DraftResponse(error=error.message, status_code=error.status_code)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return result["response"]
