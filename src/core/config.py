"""
설정 관리 모듈
==============

이 모듈은 애플리케이션의 모든 설정을 중앙에서 관리합니다.
환경 변수, API 키, 추천기/초안 생성 기본값 등을 정의합니다.

주요 기능:
- 환경 변수 로드 및 관리
- 임베딩 모델 설정
- 문서 초안(LLM) 호출 기본값
- 설정값 검증

버전: 1.0.0
"""

import os
from dotenv import load_dotenv

# 환경 변수 로드 (.env 파일에서 설정값 읽기)
load_dotenv()

# =============================================================================
# API 설정
# =============================================================================

# 문서 초안 생성에 사용할 API 키 (CLI 옵션으로도 전달 가능)
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")

# =============================================================================
# 기술 스택 추천기 설정
# =============================================================================

# 문장 임베딩 모델 (mean pooling + 정규화)
EMBEDDING_MODEL_NAME = os.getenv("EMBEDDING_MODEL_NAME", "sentence-transformers/all-MiniLM-L6-v2")

# 임베딩 계산 장치 (비워두면 sentence-transformers가 자동 선택)
EMBEDDING_DEVICE = os.getenv("EMBEDDING_DEVICE") or None

# 코퍼스 임베딩 배치 크기
EMBEDDING_BATCH_SIZE = int(os.getenv("EMBEDDING_BATCH_SIZE", "32"))

# 추천 결과 개수
RECOMMEND_TOP_K = 8

# =============================================================================
# 문서 초안 설정
# =============================================================================

DRAFT_PROVIDERS = ("openai", "anthropic")

DEFAULT_DRAFT_PROVIDER = os.getenv("DRAFT_PROVIDER", "openai")

DEFAULT_DRAFT_MODELS = {
    "openai": os.getenv("OPENAI_DRAFT_MODEL", "gpt-4o"),
    "anthropic": os.getenv("ANTHROPIC_DRAFT_MODEL", "claude-sonnet-4-20250514"),
}

DEFAULT_DRAFT_TEMPERATURE = 0.2
DEFAULT_DRAFT_MAX_TOKENS = 4000

# 초안 생성 워크플로우 타임아웃 (초)
DRAFT_TIMEOUT_SEC = int(os.getenv("DRAFT_TIMEOUT_SEC", "180"))

# =============================================================================
# 유틸리티 함수
# =============================================================================

def get_api_key(provider: str):
    """provider에 해당하는 환경 변수 API 키를 반환합니다."""
    if provider == "openai":
        return OPENAI_API_KEY
    if provider == "anthropic":
        return ANTHROPIC_API_KEY
    return None


def validate_config(provider: str = DEFAULT_DRAFT_PROVIDER):
    """
    설정값 검증 함수

    Args:
        provider (str): 초안 생성에 사용할 provider

    Returns:
        bool: 필수 설정이 올바르게 되어 있으면 True, 아니면 False
    """
    if provider not in DRAFT_PROVIDERS:
        print(f"⚠️ 지원하지 않는 provider입니다: {provider}")
        return False

    if not get_api_key(provider):
        print(f"⚠️ {provider} API 키가 설정되지 않았습니다.")
        return False

    print("✅ 모든 설정이 올바르게 되어 있습니다.")
    return True


def get_config_summary():
    """
    현재 설정 요약 정보 반환 (API 키 값은 포함하지 않음)

    Returns:
        dict: 설정 정보 딕셔너리
    """
    return {
        "openai_api_configured": bool(OPENAI_API_KEY),
        "anthropic_api_configured": bool(ANTHROPIC_API_KEY),
        "embedding_model": EMBEDDING_MODEL_NAME,
        "embedding_device": EMBEDDING_DEVICE or "auto",
        "embedding_batch_size": EMBEDDING_BATCH_SIZE,
        "recommend_top_k": RECOMMEND_TOP_K,
        "draft": {
            "provider": DEFAULT_DRAFT_PROVIDER,
            "models": dict(DEFAULT_DRAFT_MODELS),
            "temperature": DEFAULT_DRAFT_TEMPERATURE,
            "max_tokens": DEFAULT_DRAFT_MAX_TOKENS,
            "timeout_sec": DRAFT_TIMEOUT_SEC,
        },
    }
