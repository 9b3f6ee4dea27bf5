import pathlib
import unittest

PYPROJECT = pathlib.Path(__file__).resolve().parents[1] / "pyproject.toml"


class TestPackaging(unittest.TestCase):
    def test_mcp_pinned_to_v1_api(self):
        text = PYPROJECT.read_text(encoding="utf-8")
        self.assertIn('"mcp>=1.12,<2"', text)


if __name__ == "__main__":
    unittest.main()
