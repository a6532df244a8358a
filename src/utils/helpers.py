"""
도우미 함수 모듈
===============

이 모듈은 애플리케이션 전반에서 사용되는 일반적인 도우미 함수들을 제공합니다.

주요 기능:
- 파일 읽기/쓰기
- 문자열 처리
- 진행률 포맷팅

버전: 1.0.0
"""

import os
from pathlib import Path
from typing import Union


def ensure_directory_exists(directory_path: Union[str, Path]) -> bool:
    """
    디렉토리가 존재하는지 확인하고, 없으면 생성하는 함수

    Args:
        directory_path (Union[str, Path]): 확인할 디렉토리 경로

    Returns:
        bool: 디렉토리 생성 성공 여부
    """
    try:
        if directory_path and not os.path.exists(directory_path):
            os.makedirs(directory_path)
        return True
    except OSError as e:
        print(f"디렉토리 생성 실패: {e}")
        return False


def read_text_file(file_path: Union[str, Path]) -> str:
    """
    UTF-8 텍스트 파일을 읽는 함수 (BOM이 있으면 제거)

    Args:
        file_path (Union[str, Path]): 읽을 파일 경로

    Returns:
        str: 파일 내용
    """
    with open(file_path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def write_text_file(file_path: Union[str, Path], content: str) -> Path:
    """
    텍스트를 UTF-8 파일로 저장하는 함수 (상위 디렉토리 자동 생성)

    Args:
        file_path (Union[str, Path]): 저장할 파일 경로
        content (str): 저장할 내용

    Returns:
        Path: 저장된 파일 경로
    """
    path = Path(file_path)
    ensure_directory_exists(path.parent)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path


def format_percentage(value: float, total: float, decimal_places: int = 1) -> str:
    """
    백분율을 포맷팅하는 함수

    Args:
        value (float): 값
        total (float): 전체값
        decimal_places (int): 소수점 자릿수

    Returns:
        str: 포맷팅된 백분율 문자열
    """
    if total == 0:
        return "0.0%"
    percentage = (value / total) * 100
    return f"{percentage:.{decimal_places}f}%"


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    텍스트를 지정된 길이로 자르는 함수

    Args:
        text (str): 자를 텍스트
        max_length (int): 최대 길이
        suffix (str): 자른 후 추가할 접미사

    Returns:
        str: 잘린 텍스트
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
