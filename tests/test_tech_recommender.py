"""
기술 스택 추천기 테스트 모듈
==========================

TechRecommender의 기능을 테스트합니다.
실제 sentence-transformers 모델 대신 단어 빈도 기반 가짜 인코더를 사용합니다.

테스트 항목:
- 키워드 브리지 질의 구성
- 상위 8개 추천 / 안정 정렬 동점 처리
- TypeScript 보정 규칙
- 모델/카탈로그 임베딩 1회 로드 (동시 요청 포함)
- 모델 로드 실패 / 임베딩 실패 오류 처리

버전: 1.0.0
"""

import unittest
import sys
import os
import re
import threading
import time
import types
from unittest.mock import patch

import numpy as np

# 상위 디렉토리를 Python 경로에 추가
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from src.core.defaults import sample_project
from src.core.exceptions import InferenceError, ModelLoadError
from src.core.models import TechItem
from src.core.tech_catalog import KEYWORD_BRIDGE_RULES, TECH_ITEMS
from src.core.tech_recommender import (
    TechRecommender,
    apply_companion_rule,
    apply_recommendation,
    build_query,
)


class KeywordEncoder:
    """
    단어 빈도 벡터를 돌려주는 가짜 인코더 (SentenceTransformer.encode 인터페이스)
    """

    def __init__(self, vocabulary):
        self.vocabulary = list(vocabulary)
        self.calls = []

    def encode(self, texts, **kwargs):
        self.calls.append(list(texts))
        rows = []
        for text in texts:
            tokens = text.lower().split()
            rows.append([tokens.count(word) for word in self.vocabulary])
        return np.array(rows, dtype=np.float32)


def catalog_vocabulary(catalog):
    words = set()
    for item in catalog:
        words.update(item.description.lower().split())
    return sorted(words)


def fake_sentence_transformers(factory):
    """sys.modules에 넣을 가짜 sentence_transformers 모듈"""
    module = types.ModuleType("sentence_transformers")
    module.SentenceTransformer = factory
    return module


class TestBuildQuery(unittest.TestCase):
    """
    질의 문자열 구성 테스트
    """

    def test_korean_keywords_are_bridged(self):
        query = build_query("실시간 협업 웹 앱")
        self.assertTrue(query.startswith("실시간 협업 웹 앱"))
        self.assertIn("realtime", query)
        self.assertIn("collaboration", query)

    def test_english_words_are_prefixed(self):
        query = build_query("React로 만드는 쇼핑몰")
        self.assertTrue(query.startswith("React React로 만드는 쇼핑몰"))

    def test_no_rule_match(self):
        self.assertEqual(build_query("zzz", []), "zzz zzz")
        self.assertEqual(build_query("무엇", []), "무엇")

    def test_rules_follow_table_order(self):
        """
        매칭된 모든 규칙이 표 순서대로 붙음
        """
        query = build_query("실시간 협업 웹 앱", KEYWORD_BRIDGE_RULES)
        self.assertLess(query.index("web application website"), query.index("realtime websocket live"))
        self.assertLess(query.index("realtime websocket live"), query.index("collaboration team sharing"))

    def test_rules_match_original_idea_only(self):
        """
        이미 붙은 키워드 묶음은 다음 규칙 매칭에 영향을 주지 않음
        """
        rules = [(re.compile(r"웹"), "web AI"), (re.compile(r"AI"), "machine learning")]
        self.assertEqual(build_query("웹", rules), "웹 web AI")


class TestCompanionRule(unittest.TestCase):
    """
    TypeScript 보정 규칙 테스트
    """

    def test_inserted_at_second_position(self):
        top = ["Go", "React", "A", "B", "C", "D", "E", "F"]
        result = apply_companion_rule(top)
        self.assertEqual(result, ["Go", "TypeScript", "React", "A", "B", "C", "D", "E"])
        self.assertEqual(len(result), 8)

    def test_already_present(self):
        top = ["React", "A", "TypeScript", "B"]
        self.assertEqual(apply_companion_rule(top), top)

    def test_single_item_is_kept(self):
        self.assertEqual(apply_companion_rule(["React"]), ["React"])

    def test_top_k_one(self):
        catalog = [TechItem(name="React", description="web"), TechItem(name="Go", description="data")]
        recommender = TechRecommender(catalog=catalog, keyword_rules=[], top_k=1,
                                      encoder=KeywordEncoder(["web", "data"]))
        self.assertEqual(recommender.recommend("web"), ["React"])

    def test_no_js_ecosystem(self):
        top = ["Go", "Django", "PostgreSQL"]
        self.assertEqual(apply_companion_rule(top), top)


class TestTechRecommender(unittest.TestCase):
    """
    TechRecommender 테스트 케이스
    """

    def setUp(self):
        self.encoder = KeywordEncoder(catalog_vocabulary(TECH_ITEMS))
        self.recommender = TechRecommender(encoder=self.encoder)

    def test_recommends_eight_distinct_catalog_names(self):
        names = self.recommender.recommend("실시간 협업 웹 앱")
        self.assertEqual(len(names), 8)
        self.assertEqual(len(set(names)), 8)
        catalog_names = {item.name for item in TECH_ITEMS}
        self.assertTrue(set(names) <= catalog_names)

    def test_companion_invariant(self):
        """
        JavaScript 생태계 기술이 있으면 TypeScript도 반드시 포함
        """
        from src.core.tech_catalog import JS_ECOSYSTEM

        for idea in ["React 쇼핑몰 웹사이트", "실시간 채팅 앱", "데이터 분석 대시보드"]:
            names = self.recommender.recommend(idea)
            if set(names) & JS_ECOSYSTEM:
                self.assertIn("TypeScript", names)

            raw_top = [name for name, _ in self.recommender.rank(idea)[:8]]
            if set(raw_top) & JS_ECOSYSTEM and "TypeScript" not in raw_top:
                self.assertEqual(names[1], "TypeScript")
                self.assertEqual(names[2:], raw_top[1:7])

    def test_rank_is_sorted(self):
        ranked = self.recommender.rank("web frontend")
        scores = [score for _, score in ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertEqual(len(ranked), len(TECH_ITEMS))

    def test_ties_keep_catalog_order_and_companion(self):
        """
        동점은 카탈로그 순서, 이후 TypeScript를 2위에 삽입하고 8위 제거
        """
        catalog = [TechItem(name="React", description="web")]
        catalog += [TechItem(name=f"Item{i}", description="web") for i in range(1, 9)]
        catalog.append(TechItem(name="TypeScript", description="data"))
        recommender = TechRecommender(
            catalog=catalog,
            keyword_rules=[],
            encoder=KeywordEncoder(["web", "data"]),
        )

        names = recommender.recommend("web")
        self.assertEqual(
            names,
            ["React", "TypeScript", "Item1", "Item2", "Item3", "Item4", "Item5", "Item6"],
        )

    def test_corpus_is_embedded_once(self):
        self.recommender.recommend("웹 서비스")
        self.recommender.recommend("모바일 앱")
        corpus_calls = [call for call in self.encoder.calls if len(call) == len(TECH_ITEMS)]
        self.assertEqual(len(corpus_calls), 1)
        self.assertEqual(len(self.encoder.calls), 3)

    def test_encoder_failure(self):
        class BrokenEncoder:
            def encode(self, texts, **kwargs):
                raise RuntimeError("boom")

        recommender = TechRecommender(encoder=BrokenEncoder())
        with self.assertRaises(InferenceError):
            recommender.recommend("웹")

    def test_encoder_count_mismatch(self):
        class ShortEncoder:
            def encode(self, texts, **kwargs):
                return np.ones((1, 4), dtype=np.float32)

        recommender = TechRecommender(encoder=ShortEncoder())
        with self.assertRaises(InferenceError):
            recommender.recommend("웹")

    def test_dimension_mismatch(self):
        class DriftingEncoder:
            def encode(self, texts, **kwargs):
                dim = 4 if len(texts) > 1 else 3
                return np.ones((len(texts), dim), dtype=np.float32)

        recommender = TechRecommender(encoder=DriftingEncoder())
        with self.assertRaises(InferenceError):
            recommender.recommend("웹")


class TestModelLoading(unittest.TestCase):
    """
    sentence-transformers 모델 로드 테스트 (가짜 모듈 사용)
    """

    def test_load_once_with_progress(self):
        created = []

        def factory(model_name, device=None):
            created.append(model_name)
            return KeywordEncoder(catalog_vocabulary(TECH_ITEMS))

        progress = []
        recommender = TechRecommender(model_name="fake-model")
        with patch.dict(sys.modules, {"sentence_transformers": fake_sentence_transformers(factory)}):
            recommender.recommend("웹", on_progress=progress.append)
            recommender.recommend("앱", on_progress=progress.append)

        self.assertEqual(created, ["fake-model"])
        self.assertEqual(progress, [0.0, 100.0])
        self.assertTrue(recommender.is_loaded)

    def test_concurrent_first_calls_load_once(self):
        created = []

        def factory(model_name, device=None):
            created.append(model_name)
            time.sleep(0.05)
            return KeywordEncoder(catalog_vocabulary(TECH_ITEMS))

        recommender = TechRecommender(model_name="fake-model")
        results = []
        with patch.dict(sys.modules, {"sentence_transformers": fake_sentence_transformers(factory)}):
            threads = [
                threading.Thread(target=lambda: results.append(recommender.recommend("웹 서비스")))
                for _ in range(4)
            ]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        self.assertEqual(len(created), 1)
        self.assertEqual(len(results), 4)
        self.assertTrue(all(result == results[0] for result in results))

    def test_load_failure(self):
        def factory(model_name, device=None):
            raise OSError("network unreachable")

        progress = []
        recommender = TechRecommender(model_name="fake-model")
        with patch.dict(sys.modules, {"sentence_transformers": fake_sentence_transformers(factory)}):
            with self.assertRaises(ModelLoadError) as ctx:
                recommender.recommend("웹", on_progress=progress.append)

        self.assertIn("network unreachable", str(ctx.exception))
        self.assertEqual(progress, [0.0])
        self.assertFalse(recommender.is_loaded)


class TestApplyRecommendation(unittest.TestCase):

    def test_writes_tech_stack(self):
        data = sample_project()
        updated = apply_recommendation(data, ["React", "TypeScript", "Node.js"])
        self.assertEqual(updated.tech.tech_stack, "React, TypeScript, Node.js")
        self.assertNotEqual(data.tech.tech_stack, updated.tech.tech_stack)


if __name__ == '__main__':
    unittest.main()
