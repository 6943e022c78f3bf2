# tests/unit/test_parser.py
import pytest
from design_review.models.review import AssessmentResult, Severity
from design_review.review.parser import (
    ReviewParseError,
    changed_files_from_diff,
    extract_json,
    parse_review_response,
)


SAMPLE_DIFF = """--- a/src/main.py
+++ b/src/main.py
@@ -11,4 +11,6 @@ def hello():
     print("hello")
+    print("world")
+    return True
 
 def goodbye():
     pass
--- /dev/null
+++ b/src/new_module.py
@@ -0,0 +1,2 @@
+def new_func():
+    pass
--- a/src/legacy.py
+++ /dev/null
@@ -1,2 +0,0 @@
-x = 1
-y = 2
"""

REVIEW_JSON = """{
  "comments": [{"severity": "critical", "category": "security", "comment": "Token logged"}],
  "test_results": {"passed": null, "summary": "not run", "failing_tests": []},
  "overall_assessment": "needs_changes"
}"""


def test_changed_files_from_diff():
    assert changed_files_from_diff(SAMPLE_DIFF) == ["src/main.py", "src/new_module.py", "src/legacy.py"]


def test_changed_files_from_empty_diff():
    assert changed_files_from_diff("") == []


def test_extract_json_from_fence():
    text = f"Here is my review:\n```json\n{REVIEW_JSON}\n```"
    assert extract_json(text) == REVIEW_JSON


def test_extract_json_plain():
    assert extract_json(f"  {REVIEW_JSON}\n") == REVIEW_JSON


def test_parse_review_response():
    result = parse_review_response(REVIEW_JSON)

    assert result.overall_assessment == AssessmentResult.NEEDS_CHANGES
    assert result.comments[0].severity == Severity.CRITICAL
    assert result.test_results.passed is None


def test_parse_fenced_response():
    result = parse_review_response(f"```\n{REVIEW_JSON}\n```")
    assert len(result.comments) == 1


@pytest.mark.parametrize("text", ["", "   \n"])
def test_parse_empty_response(text):
    with pytest.raises(ReviewParseError, match="Empty"):
        parse_review_response(text)


def test_parse_invalid_json():
    with pytest.raises(ReviewParseError, match="not valid JSON"):
        parse_review_response("LGTM, ship it")


def test_parse_non_object():
    with pytest.raises(ReviewParseError, match="JSON object"):
        parse_review_response("[1, 2, 3]")


def test_parse_wrong_shape():
    with pytest.raises(ReviewParseError, match="review structure"):
        parse_review_response('{"overall_assessment": "approve"}')


def test_parse_error_is_value_error():
    assert issubclass(ReviewParseError, ValueError)
