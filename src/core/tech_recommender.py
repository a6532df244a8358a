"""
기술 스택 추천 모듈
==================

자유 텍스트로 된 프로젝트 아이디어를 받아 고정 카탈로그에서 어울리는
기술 스택 8개를 문장 임베딩 코사인 유사도로 추천합니다.

처리 흐름:
1. 키워드 브리지 - 한국어 도메인 키워드를 영문 키워드 묶음으로 확장하고,
   원문의 영문 단어를 앞에 붙여 질의 문자열 구성
2. 임베딩 - sentence-transformers 모델로 질의/카탈로그 설명 임베딩
   (mean pooling + L2 정규화, 카탈로그 임베딩은 프로세스 수명 동안 캐시)
3. 랭킹 - 코사인 유사도 내림차순 (동점은 카탈로그 순서 유지), 상위 8개
4. 보정 - JavaScript 생태계 기술이 있고 TypeScript가 없으면
   8위를 빼고 TypeScript를 2위에 삽입

모델과 카탈로그 임베딩은 한 번만 초기화되며 (잠금으로 중복 로드 방지),
동시에 들어온 추천 요청은 순서대로 하나씩 처리됩니다.

버전: 1.0.0
"""

import re
import threading
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from .config import EMBEDDING_BATCH_SIZE, EMBEDDING_DEVICE, EMBEDDING_MODEL_NAME, RECOMMEND_TOP_K
from .exceptions import InferenceError, ModelLoadError
from .models import ProjectInput, TechItem
from .tech_catalog import JS_ECOSYSTEM, KEYWORD_BRIDGE_RULES, TECH_ITEMS, TYPED_COMPANION

ProgressCallback = Callable[[float], None]

_LATIN_RUN = re.compile(r"[a-zA-Z]+")


def build_query(idea: str, rules: Sequence[Tuple["re.Pattern[str]", str]] = KEYWORD_BRIDGE_RULES) -> str:
    """
    아이디어 텍스트로 임베딩 질의 문자열을 만드는 함수

    Args:
        idea (str): 사용자가 입력한 프로젝트 아이디어
        rules: (정규식, 영문 키워드 묶음) 규칙표

    Returns:
        str: "추출한 영문 단어 + 원문 + 매칭된 키워드 묶음"
    """
    english = " ".join(_LATIN_RUN.findall(idea))
    text = idea
    for pattern, keywords in rules:
        if pattern.search(idea):
            text += " " + keywords
    return f"{english} {text}".strip()


def apply_companion_rule(top: Sequence[str],
                         ecosystem: Iterable[str] = JS_ECOSYSTEM,
                         companion: str = TYPED_COMPANION) -> List[str]:
    """
    JavaScript 생태계 기술이 추천되었는데 TypeScript가 없으면
    마지막 항목을 빼고 TypeScript를 두 번째 자리에 넣습니다 (길이 유지).
    항목이 1개뿐이면 1위를 지우지 않도록 그대로 둡니다.
    """
    ecosystem = set(ecosystem)
    result = list(top)
    if len(result) > 1 and any(name in ecosystem for name in result) and companion not in result:
        result.pop()
        result.insert(1, companion)
    return result


def _report(on_progress: Optional[ProgressCallback], percent: float):
    if on_progress is not None:
        on_progress(percent)


class TechRecommender:
    """
    임베딩 유사도 기반 기술 스택 추천기

    encoder를 주입하지 않으면 첫 추천 시점에 sentence-transformers 모델을
    로드합니다. encoder는 `encode(texts, ...) -> ndarray` 인터페이스를 가져야 합니다.
    """

    def __init__(self,
                 model_name: str = EMBEDDING_MODEL_NAME,
                 catalog: Optional[Sequence[TechItem]] = None,
                 keyword_rules: Optional[Sequence[Tuple["re.Pattern[str]", str]]] = None,
                 top_k: int = RECOMMEND_TOP_K,
                 device: Optional[str] = EMBEDDING_DEVICE,
                 batch_size: int = EMBEDDING_BATCH_SIZE,
                 encoder=None):
        self.model_name = model_name
        self.catalog: List[TechItem] = list(catalog if catalog is not None else TECH_ITEMS)
        self.keyword_rules = list(keyword_rules if keyword_rules is not None else KEYWORD_BRIDGE_RULES)
        self.top_k = top_k
        self._device = device
        self._batch_size = batch_size

        self._encoder = encoder
        self._corpus_embeddings: Optional[np.ndarray] = None

        self._init_lock = threading.Lock()
        self._request_lock = threading.Lock()

    # ---------------------------------------------------------------------
    # 모델 / 카탈로그 임베딩 캐시
    # ---------------------------------------------------------------------
    @property
    def is_loaded(self) -> bool:
        return self._encoder is not None

    def _get_encoder(self, on_progress: Optional[ProgressCallback] = None):
        """임베딩 모델을 한 번만 로드하여 반환합니다."""
        if self._encoder is not None:
            return self._encoder
        with self._init_lock:
            if self._encoder is None:
                self._encoder = self._load_encoder(on_progress)
        return self._encoder

    def _load_encoder(self, on_progress: Optional[ProgressCallback]):
        _report(on_progress, 0.0)
        print(f"🔄 임베딩 모델을 로드합니다: {self.model_name}")
        try:
            from sentence_transformers import SentenceTransformer

            encoder = SentenceTransformer(self.model_name, device=self._device)
        except Exception as e:
            raise ModelLoadError(
                f"임베딩 모델 로드 실패: {e}\n"
                "네트워크 연결과 EMBEDDING_MODEL_NAME 설정을 확인해주세요."
            ) from e
        print(f"✅ 임베딩 모델을 로드했습니다: {self.model_name}")
        _report(on_progress, 100.0)
        return encoder

    def _encode(self, encoder, texts: List[str]) -> np.ndarray:
        """텍스트 리스트를 정규화된 임베딩 행렬(len(texts) x dim)로 변환합니다."""
        try:
            vectors = encoder.encode(
                texts,
                batch_size=self._batch_size,
                show_progress_bar=False,
                convert_to_numpy=True,
                normalize_embeddings=True,
            )
        except Exception as e:
            raise InferenceError(f"임베딩 계산 실패: {e}") from e

        vectors = np.asarray(vectors, dtype=np.float32)
        if vectors.ndim == 1:
            vectors = vectors.reshape(1, -1)
        if vectors.shape[0] != len(texts):
            raise InferenceError(
                f"임베딩 개수가 입력과 다릅니다. (입력 {len(texts)}개, 결과 {vectors.shape[0]}개)"
            )
        return vectors

    def _get_corpus_embeddings(self, encoder) -> np.ndarray:
        """카탈로그 설명 임베딩을 한 번만 배치 계산하여 반환합니다."""
        if self._corpus_embeddings is not None:
            return self._corpus_embeddings
        with self._init_lock:
            if self._corpus_embeddings is None:
                descriptions = [item.description for item in self.catalog]
                self._corpus_embeddings = self._encode(encoder, descriptions)
                print(f"✅ 기술 카탈로그 {len(descriptions)}개 항목을 임베딩했습니다.")
        return self._corpus_embeddings

    # ---------------------------------------------------------------------
    # 추천
    # ---------------------------------------------------------------------
    def rank(self, idea: str, on_progress: Optional[ProgressCallback] = None) -> List[Tuple[str, float]]:
        """
        카탈로그 전체를 아이디어와의 코사인 유사도 순으로 정렬합니다.

        Args:
            idea (str): 프로젝트 아이디어
            on_progress: 모델 로드 중 진행률(0~100) 콜백

        Returns:
            List[Tuple[str, float]]: (기술 이름, 유사도) 내림차순 리스트

        Raises:
            ModelLoadError: 모델을 로드할 수 없을 때
            InferenceError: 임베딩 계산 실패 또는 카탈로그/모델 불일치
        """
        with self._request_lock:
            encoder = self._get_encoder(on_progress)
            corpus = self._get_corpus_embeddings(encoder)
            query_vector = self._encode(encoder, [build_query(idea, self.keyword_rules)])

        if query_vector.shape[1] != corpus.shape[1]:
            raise InferenceError(
                f"임베딩 차원이 일치하지 않습니다. (질의 {query_vector.shape[1]}, 카탈로그 {corpus.shape[1]})"
            )

        scores = cosine_similarity(query_vector, corpus)[0]
        # sorted()는 안정 정렬이므로 동점은 카탈로그 순서를 따른다
        order = sorted(range(len(self.catalog)), key=lambda i: -scores[i])
        return [(self.catalog[i].name, float(scores[i])) for i in order]

    def recommend(self, idea: str, on_progress: Optional[ProgressCallback] = None) -> List[str]:
        """
        상위 top_k개 기술 이름을 추천합니다 (TypeScript 보정 규칙 적용).

        Raises:
            ModelLoadError, InferenceError: 부분 결과는 반환하지 않음
        """
        ranked = self.rank(idea, on_progress)
        top = [name for name, _ in ranked[:self.top_k]]
        return apply_companion_rule(top)


# =============================================================================
# 프로세스 전역 추천기
# =============================================================================

_recommender: Optional[TechRecommender] = None
_recommender_lock = threading.Lock()


def get_recommender() -> TechRecommender:
    """프로세스 전역 TechRecommender를 반환합니다 (최초 호출 시 생성)."""
    global _recommender
    if _recommender is None:
        with _recommender_lock:
            if _recommender is None:
                _recommender = TechRecommender()
    return _recommender


def recommend_techs(idea_text: str, on_progress: Optional[ProgressCallback] = None) -> List[str]:
    """아이디어 텍스트로 기술 스택 8개를 추천합니다."""
    return get_recommender().recommend(idea_text, on_progress)


def apply_recommendation(data: ProjectInput, names: Sequence[str]) -> ProjectInput:
    """추천 결과를 tech.tech_stack에 기록한 새 ProjectInput을 반환합니다."""
    return data.with_field("tech.tech_stack", ", ".join(names))
