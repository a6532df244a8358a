"""
핵심 로직 패키지
===============

이 패키지는 애플리케이션의 핵심 로직을 포함합니다.

모듈 목록:
- config: 설정 관리
- models: 프로젝트 입력 / 검증 / 생성 결과 데이터 모델
- defaults: 기본값, 예시 데이터, 마스터 템플릿
- validator: 필수 필드 검증
- template_engine: 프롬프트 문서 생성
- merge: 가져온 문서 깊은 병합
- project_io: YAML/JSON 가져오기/내보내기
- tech_recommender: 임베딩 기반 기술 스택 추천

버전: 1.0.0
"""

from .models import ProjectInput, ValidationMessage, ValidationReport, GenerateResult
from .validator import validate
from .template_engine import generate
from .merge import deep_merge, merge_project

__all__ = [
    'ProjectInput', 'ValidationMessage', 'ValidationReport', 'GenerateResult',
    'validate', 'generate', 'deep_merge', 'merge_project',
]
