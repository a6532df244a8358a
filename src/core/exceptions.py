"""
예외 정의 모듈

입력 누락 같은 "정상적인 미완성"은 예외가 아니라 검증 메시지로 표현합니다.
여기의 예외들은 요청한 작업 자체를 완료할 수 없을 때만 발생합니다.
"""

from typing import Optional


class ProjectBotError(RuntimeError):
    """모든 애플리케이션 예외의 기반 클래스"""


class ImportParseError(ProjectBotError):
    """YAML/JSON 가져오기 파싱 실패"""


class ModelLoadError(ProjectBotError):
    """임베딩 모델 로드 실패 (네트워크/리소스 문제)"""


class InferenceError(ProjectBotError):
    """임베딩 계산 실패 또는 코퍼스/모델 불일치"""


class RemoteServiceError(ProjectBotError):
    """외부 LLM provider 호출 실패"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self):
        return {"error": self.message, "status_code": self.status_code}


class DraftTimeoutError(RemoteServiceError):
    """초안 생성 워크플로우 시간 초과"""

    def __init__(self, timeout_sec: int):
        super().__init__(f"⏱️ 처리 시간이 {timeout_sec}초를 초과하여 요청을 취소했습니다.", 504)
        self.timeout_sec = timeout_sec
