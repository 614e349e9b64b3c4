import pytest

from data_designer_code_audit.core import LANGUAGES, analyze_code, detect_language
from data_designer_code_audit.samples import EXAMPLE_CODE, example_code


class TestExampleCode:
    def test_every_language_has_an_example(self):
        assert set(EXAMPLE_CODE) == set(LANGUAGES)

    def test_unknown_language_falls_back_to_java(self):
        assert example_code("cobol") == EXAMPLE_CODE["java"]

    @pytest.mark.parametrize("language", ["java", "python", "javascript"])
    def test_detected_as_own_language(self, language):
        assert detect_language(EXAMPLE_CODE[language], "php") == language

    def test_cpp_example_hits_java_rule_first(self):
        # "private:" matches the java rule before "#include" is considered.
        assert detect_language(EXAMPLE_CODE["cpp"], "cpp") == "java"

    @pytest.mark.parametrize("language", sorted(EXAMPLE_CODE))
    def test_examples_produce_a_report(self, language):
        result = analyze_code(example_code(language), language)
        assert result["quality"] is not None
        assert result["stats"].complexity != "High"
