"""
설정 모듈 테스트
"""

import unittest
import sys
import os
import io
from contextlib import redirect_stdout
from unittest.mock import patch

# 상위 디렉토리를 Python 경로에 추가
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from src.core import config


class TestConfig(unittest.TestCase):

    def test_get_api_key(self):
        with patch.object(config, "ANTHROPIC_API_KEY", "sk-ant"):
            self.assertEqual(config.get_api_key("anthropic"), "sk-ant")
        self.assertIsNone(config.get_api_key("unknown"))

    def test_validate_config(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            with patch.object(config, "OPENAI_API_KEY", None):
                self.assertFalse(config.validate_config("openai"))
            with patch.object(config, "OPENAI_API_KEY", "sk-openai"):
                self.assertTrue(config.validate_config("openai"))
            self.assertFalse(config.validate_config("cohere"))
        self.assertNotIn("sk-openai", buffer.getvalue())

    def test_summary_has_no_key_values(self):
        with patch.object(config, "OPENAI_API_KEY", "sk-openai"):
            summary = config.get_config_summary()
        self.assertTrue(summary["openai_api_configured"])
        self.assertNotIn("sk-openai", str(summary))
        self.assertEqual(summary["recommend_top_k"], 8)


if __name__ == '__main__':
    unittest.main()
