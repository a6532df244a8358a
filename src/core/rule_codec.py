"""
Do/Don't 규칙 인코딩 모듈

claude_rules.do_dont 필드는 한 문자열 안에 두 목록을 접두사 라인으로 담습니다:

    DO: 테스트 먼저 작성
    DON'T: 시크릿 커밋

split_do_dont()는 이를 MUST / MUST NOT 목록으로 분리합니다.
"""

import re

from .models import RuleBuckets

DO_PREFIX = "DO:"
DONT_PREFIX = "DON'T:"

_DO_PATTERN = re.compile(r"^DO:\s*")
_DONT_PATTERN = re.compile(r"^DON'T:\s*")


def split_do_dont(text: str) -> RuleBuckets:
    """
    do_dont 문자열을 MUST / MUST NOT 목록으로 분리합니다.

    두 접두사 중 어느 것과도 맞지 않는 라인과 접두사만 있는 빈 라인은 버립니다.

    Args:
        text (str): 'DO:' / "DON'T:" 접두사 라인으로 구성된 문자열

    Returns:
        RuleBuckets: 접두사가 제거된 must / must_not 목록
    """
    must, must_not = [], []
    for line in (text or "").splitlines():
        trimmed = line.strip()
        if trimmed.startswith(DO_PREFIX):
            item = _DO_PATTERN.sub("", trimmed)
            if item:
                must.append(item)
        elif trimmed.startswith(DONT_PREFIX):
            item = _DONT_PATTERN.sub("", trimmed)
            if item:
                must_not.append(item)
    return RuleBuckets(must=must, must_not=must_not)
