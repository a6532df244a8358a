"""
AI 에이전트 패키지
================

이 패키지는 외부 LLM과 연동하는 에이전트 모듈들을 포함합니다.

모듈 목록:
- draft_agent: LangGraph 기반 개발 프로세스 정의서 초안 생성 에이전트

버전: 1.0.0
"""

from .draft_agent import DraftAgent, DraftRequest, DraftResponse

__all__ = ['DraftAgent', 'DraftRequest', 'DraftResponse']
