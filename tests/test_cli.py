"""
CLI 테스트 모듈
==============

typer CliRunner로 main.py 명령들을 테스트합니다.
기술 스택 추천은 모델을 로드하지 않도록 recommend_techs를 모킹합니다.

버전: 1.0.0
"""

import unittest
import sys
import os
import json
import tempfile
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

# 상위 디렉토리를 Python 경로에 추가
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from main import app
from src.core.exceptions import ModelLoadError
from src.core.project_io import load_project_file

RECOMMENDED = ["React", "TypeScript", "Node.js", "PostgreSQL", "Redis", "Docker", "Vercel", "Socket.io"]


class TestCli(unittest.TestCase):
    """
    CLI 명령 테스트 케이스
    """

    def setUp(self):
        self.runner = CliRunner()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)
        self.sample_path = self.root / "project.yaml"
        result = self.runner.invoke(app, ["init", str(self.sample_path), "--sample"])
        self.assertEqual(result.exit_code, 0, result.output)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_init_refuses_overwrite(self):
        result = self.runner.invoke(app, ["init", str(self.sample_path)])
        self.assertEqual(result.exit_code, 1)

        result = self.runner.invoke(app, ["init", str(self.sample_path), "--force"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(load_project_file(self.sample_path).tech.tech_stack, "")

    def test_validate_sample(self):
        result = self.runner.invoke(app, ["validate", str(self.sample_path)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("오류 0개", result.output)

    def test_validate_reports_errors(self):
        path = self.root / "broken.yaml"
        path.write_text("tech:\n  envs: [staging, prod]\n", encoding="utf-8")
        result = self.runner.invoke(app, ["validate", str(path)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("tech.envs", result.output)

    def test_validate_malformed_file(self):
        path = self.root / "bad.yaml"
        path.write_text("tech: [dev\n", encoding="utf-8")
        result = self.runner.invoke(app, ["validate", str(path)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("파일 파싱에 실패했습니다", result.output)

    def test_generate_to_file(self):
        path = self.root / "partial.yaml"
        path.write_text("tech:\n  envs: [staging]\n", encoding="utf-8")
        output = self.root / "out" / "prompt.md"
        result = self.runner.invoke(app, ["generate", str(path), "--output", str(output)])
        self.assertEqual(result.exit_code, 0, result.output)
        text = output.read_text(encoding="utf-8")
        self.assertIn("[결정 필요: ENVS]", text)
        self.assertIn("## 부록 A. 결정 필요 항목", text)

    def test_generate_custom_template(self):
        template = self.root / "template.md"
        template.write_text("# {DOC_TITLE}\n", encoding="utf-8")
        result = self.runner.invoke(app, ["generate", str(self.sample_path), "--template", str(template)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("# 실시간 협업 편집기 개발 프로세스 정의서", result.output)

    def test_generate_missing_template(self):
        missing = self.root / "missing.md"
        result = self.runner.invoke(app, ["generate", str(self.sample_path), "--template", str(missing)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("템플릿 파일을 읽을 수 없습니다", result.output)

    def test_validate_non_utf8_file(self):
        path = self.root / "latin.yaml"
        path.write_bytes(b"tech:\n  deployment: \xff\xfe bad\n")
        result = self.runner.invoke(app, ["validate", str(path)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("파일을 읽을 수 없습니다", result.output)

    def test_export_json(self):
        result = self.runner.invoke(app, ["export", str(self.sample_path), "--format", "json"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout)["tech"]["envs"], ["dev", "staging", "prod"])

    def test_export_unknown_format(self):
        result = self.runner.invoke(app, ["export", str(self.sample_path), "--format", "toml"])
        self.assertEqual(result.exit_code, 1)

    def test_recommend_requires_idea(self):
        """
        아이디어가 비어 있으면 추천을 시작하지 않음
        """
        with patch("src.core.tech_recommender.recommend_techs") as recommend:
            result = self.runner.invoke(app, ["recommend", "   "])
        self.assertEqual(result.exit_code, 1)
        recommend.assert_not_called()

    def test_recommend_writes_tech_stack(self):
        with patch("src.core.tech_recommender.recommend_techs", return_value=RECOMMENDED) as recommend:
            result = self.runner.invoke(app, ["recommend", "--input", str(self.sample_path), "--write"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(recommend.call_args.args[0], load_project_file(self.sample_path).doc_meta.idea)
        self.assertIn("1. React", result.output)
        self.assertEqual(load_project_file(self.sample_path).tech.tech_stack, ", ".join(RECOMMENDED))

    def test_recommend_model_failure_keeps_file(self):
        before = self.sample_path.read_text(encoding="utf-8")
        with patch("src.core.tech_recommender.recommend_techs", side_effect=ModelLoadError("offline")):
            result = self.runner.invoke(app, ["recommend", "--input", str(self.sample_path), "--write"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("offline", result.output)
        self.assertEqual(self.sample_path.read_text(encoding="utf-8"), before)

    def test_draft_dry_run(self):
        result = self.runner.invoke(
            app,
            ["draft", str(self.sample_path), "--provider", "openai", "--api-key", "sk-test", "--dry-run"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('"provider": "openai"', result.output)
        self.assertNotIn("sk-test", result.output)

    def test_config_hides_keys(self):
        with patch("src.core.config.OPENAI_API_KEY", "sk-hidden"):
            result = self.runner.invoke(app, ["config"])
        self.assertEqual(result.exit_code, 0)
        self.assertNotIn("sk-hidden", result.output)


if __name__ == '__main__':
    unittest.main()
