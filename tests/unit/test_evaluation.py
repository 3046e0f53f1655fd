"""Unit tests for the rubric runner, injection sandbox and output validator."""

import json

import pytest

from app.strategies.evaluation import (
    evaluate_output,
    run_rubric,
    simulate_injection,
    validate_output,
)
from app.strategies.evaluation.injection import (
    ATTACK_VECTORS,
    STRATEGIES,
    attack_strength,
    get_strategy,
    protection_score,
)
from app.strategies.evaluation.models import Criterion, CriterionType, RubricTestCase
from app.strategies.evaluation.rubric import DEFAULT_CRITERIA, DEFAULT_TEST_CASES


def _attack(name: str) -> str:
    return next(a.input for a in ATTACK_VECTORS if a.name == name)


# =============================================================================
# Rubric Tests
# =============================================================================


class TestEvaluateOutput:
    """Test suite for evaluate_output."""

    def test_json_criterion(self):
        """Test JSON parsing criterion messages."""
        criterion = Criterion(name="JSON", type=CriterionType.JSON)

        assert evaluate_output('{"a": 1}', [criterion]).results[0].message == "Valid JSON"
        result = evaluate_output("not json", [criterion]).results[0]
        assert result.passed is False
        assert result.message == "Invalid JSON"

    @pytest.mark.parametrize("output", ["NaN", "Infinity", "-Infinity", '{"score": NaN}'])
    def test_json_criterion_rejects_non_standard_constants(self, output):
        """Test that NaN and Infinity are not accepted as JSON."""
        criterion = Criterion(name="JSON", type=CriterionType.JSON)

        result = evaluate_output(output, [criterion]).results[0]

        assert result.passed is False
        assert result.message == "Invalid JSON"

    def test_json_criterion_deeply_nested(self):
        """Test that nesting too deep to parse fails instead of raising."""
        criterion = Criterion(name="JSON", type=CriterionType.JSON)

        result = evaluate_output("[" * 100000 + "]" * 100000, [criterion]).results[0]

        assert result.passed is False
        assert result.message == "Invalid JSON"

    def test_contains_criterion_reports_missing(self):
        """Test that missing quoted fields are listed."""
        criterion = Criterion(name="Fields", type=CriterionType.CONTAINS, config="name, priority, tags")

        result = evaluate_output('{"name": "x"}', [criterion]).results[0]

        assert result.passed is False
        assert result.message == "Missing: priority, tags"

    def test_contains_requires_quoted_field(self):
        """Test that bare words do not count as fields."""
        criterion = Criterion(name="Fields", type=CriterionType.CONTAINS, config="priority")
        assert evaluate_output("priority is high", [criterion]).passed is False

    def test_regex_criterion(self):
        """Test regex criterion matching anywhere in the output."""
        criterion = Criterion(name="Date", type=CriterionType.REGEX, config=r"\d{4}-\d{2}-\d{2}")

        assert evaluate_output("due 2024-05-01", [criterion]).results[0].message == "Pattern matched"
        assert evaluate_output("due soon", [criterion]).results[0].message == "Pattern not found"

    def test_invalid_regex_fails(self):
        """Test that an invalid pattern fails instead of raising."""
        criterion = Criterion(name="Bad", type=CriterionType.REGEX, config="(")

        result = evaluate_output("anything", [criterion]).results[0]

        assert result.passed is False
        assert result.message.startswith("Invalid pattern")

    def test_length_criterion(self):
        """Test inclusive length ranges."""
        criterion = Criterion(name="Length", type=CriterionType.LENGTH, config="1-5")

        assert evaluate_output("abc", [criterion]).results[0].message == "Length 3 in range"
        assert evaluate_output("abcde", [criterion]).passed is True
        result = evaluate_output("abcdefg", [criterion]).results[0]
        assert result.passed is False
        assert result.message == "Length 7 outside range 1-5"

    @pytest.mark.parametrize("config", ["", "10", "a-b", "1-2-3"])
    def test_malformed_length_config_fails(self, config):
        """Test that malformed ranges fail the criterion."""
        criterion = Criterion(name="Length", type=CriterionType.LENGTH, config=config)
        assert evaluate_output("abc", [criterion]).passed is False

    def test_no_criteria_passes(self):
        """Test that an empty rubric passes vacuously."""
        evaluation = evaluate_output("anything", [])

        assert evaluation.passed is True
        assert evaluation.results == []


class TestRunRubric:
    """Test suite for run_rubric."""

    def test_default_rubric(self):
        """Test the built-in criteria against the built-in test cases."""
        report = run_rubric(DEFAULT_TEST_CASES, DEFAULT_CRITERIA)

        assert [r.evaluation.passed for r in report.results] == [True, False, False]
        assert all(r.correct for r in report.results)
        assert report.results[1].evaluation.results[1].message == "Missing: priority"
        assert report.summary.total == 3
        assert report.summary.passed == 1
        assert report.summary.pass_rate == 33.3
        assert report.summary.accuracy == 100.0

    def test_incorrect_expectation_lowers_accuracy(self):
        """Test that a wrong expected verdict counts against accuracy."""
        cases = [
            RubricTestCase(input="a", output="{}", expected_pass=True),
            RubricTestCase(input="b", output="oops", expected_pass=True),
        ]
        report = run_rubric(cases, [Criterion(name="JSON", type=CriterionType.JSON)])

        assert report.summary.pass_rate == 50.0
        assert report.summary.accuracy == 50.0
        assert report.results[1].correct is False

    def test_no_cases(self):
        """Test that an empty run reports zero percentages."""
        report = run_rubric([], DEFAULT_CRITERIA)

        assert report.summary.total == 0
        assert report.summary.pass_rate == 0.0
        assert report.summary.accuracy == 0.0


# =============================================================================
# Injection Sandbox Tests
# =============================================================================


class TestInjectionSandbox:
    """Test suite for the injection simulation."""

    @pytest.mark.parametrize(
        "strategy_id,expected",
        [("none", 0), ("delimiters", 2), ("role-separation", 3), ("defense-in-depth", 3)],
    )
    def test_protection_scores(self, strategy_id, expected):
        """Test protection points for each built-in strategy."""
        assert protection_score(get_strategy(strategy_id).template) == expected

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Direct Override", 3),
            ("Delimiter Escape", 3),
            ("Instruction Injection", 4),
            ("Role Confusion", 3),
            ("Nested Instructions", 1),
        ],
    )
    def test_attack_strengths(self, name, expected):
        """Test attack points for each built-in attack vector."""
        assert attack_strength(_attack(name)) == expected

    def test_blocked(self):
        """Test that stronger protection blocks the attack."""
        strategy = get_strategy("defense-in-depth")
        result = simulate_injection(strategy.template, _attack("Nested Instructions"))

        assert result.blocked is True
        assert result.response.startswith("Summary:")
        assert result.reasoning == (
            "Protection level (3) successfully defended against attack strength (1)"
        )

    def test_tie_is_not_blocked(self):
        """Test that equal scores let the attack through."""
        strategy = get_strategy("role-separation")
        result = simulate_injection(strategy.template, _attack("Direct Override"))

        assert result.blocked is False
        assert result.response == "HACKED"
        assert result.protection_score == result.attack_strength == 3

    def test_no_protection_never_blocks(self):
        """Test that an undefended template loses even to benign input."""
        result = simulate_injection(get_strategy("none").template, "Quarterly sales rose 4%.")

        assert result.blocked is False
        assert "Prompt injection successful" in result.reasoning

    def test_prompt_substitutes_first_placeholder_only(self):
        """Test that only the first user_input placeholder is filled."""
        result = simulate_injection("{user_input} / {user_input}", "X")
        assert result.prompt == "X / {user_input}"

    def test_signals_ascii_case_folding(self):
        """Test that non-ASCII letters do not case-fold into signal keywords."""
        assert protection_score("ſystem: ſtrictly") == 0

    def test_catalog(self):
        """Test the built-in catalogs."""
        assert [s.id for s in STRATEGIES] == ["none", "delimiters", "role-separation", "defense-in-depth"]
        assert len(ATTACK_VECTORS) == 5
        assert get_strategy("missing") is None


# =============================================================================
# Output Validator Tests
# =============================================================================


TASK_SCHEMA = json.dumps(
    {
        "type": "object",
        "required": ["name", "priority"],
        "properties": {
            "name": {"type": "string", "minLength": 1},
            "priority": {"type": "string", "enum": ["low", "medium", "high"]},
            "tags": {"type": "array", "items": {"type": "string"}},
        },
        "additionalProperties": False,
    }
)


class TestValidateOutput:
    """Test suite for validate_output."""

    def test_valid_output(self):
        """Test a conforming output."""
        report = validate_output(TASK_SCHEMA, '{"name": "Fix login bug", "priority": "high", "tags": ["bug"]}')

        assert report.valid is True
        assert report.errors == []

    def test_enum_violation(self):
        """Test that a bad enum value is reported with its path."""
        report = validate_output(TASK_SCHEMA, '{"name": "x", "priority": "urgent"}')

        assert report.valid is False
        assert len(report.errors) == 1
        assert report.errors[0].keyword == "enum"
        assert report.errors[0].path == "/priority"
        assert report.errors[0].schema_path == "/properties/priority/enum"

    def test_all_errors_collected(self):
        """Test that every missing field is reported."""
        report = validate_output(TASK_SCHEMA, "{}")

        assert report.valid is False
        assert [e.keyword for e in report.errors] == ["required", "required"]

    def test_nested_path(self):
        """Test JSON pointer paths into arrays."""
        report = validate_output(TASK_SCHEMA, '{"name": "x", "priority": "low", "tags": ["ok", 5]}')

        assert [e.path for e in report.errors] == ["/tags/1"]
        assert report.errors[0].keyword == "type"

    @pytest.mark.parametrize("output", ["not json", '```json\n{"data": "value"}\n```', ""])
    def test_unparseable_output(self, output):
        """Test that unparseable output yields a single parse error."""
        report = validate_output(TASK_SCHEMA, output)

        assert report.valid is False
        assert [e.keyword for e in report.errors] == ["parse"]

    def test_unparseable_schema(self):
        """Test that an unparseable schema yields a parse error."""
        assert validate_output("{", "{}").errors[0].keyword == "parse"

    def test_invalid_schema(self):
        """Test that a structurally invalid schema is reported."""
        report = validate_output('{"type": "nope"}', "{}")

        assert report.valid is False
        assert report.errors[0].keyword == "schema"

    @pytest.mark.parametrize("schema_text", ["null", "5", "3.5", '"object"', "[]"])
    def test_schema_must_be_object_or_boolean(self, schema_text):
        """Test that scalar and array schema documents are reported, not raised."""
        report = validate_output(schema_text, "{}")

        assert report.valid is False
        assert [e.keyword for e in report.errors] == ["schema"]

    def test_boolean_schemas(self):
        """Test that true accepts everything and false rejects everything."""
        assert validate_output("true", '{"any": 1}').valid is True

        report = validate_output("false", "1")
        assert report.valid is False
        assert report.errors[0].keyword == "false"

    def test_deeply_nested_output(self):
        """Test that nesting too deep to parse is a parse error."""
        report = validate_output("{}", "[" * 100000 + "]" * 100000)
        assert [e.keyword for e in report.errors] == ["parse"]

    @pytest.mark.parametrize("output", ["NaN", '{"name": "x", "priority": Infinity}'])
    def test_non_standard_constants_rejected(self, output):
        """Test that NaN and Infinity make the output unparseable."""
        report = validate_output(TASK_SCHEMA, output)
        assert [e.keyword for e in report.errors] == ["parse"]

    def test_pointer_escaping(self):
        """Test that '/' and '~' in property names are escaped in paths."""
        schema = json.dumps(
            {"properties": {"a/b": {"type": "string"}, "c~d": {"type": "string"}}}
        )

        report = validate_output(schema, '{"a/b": 1, "c~d": 2}')

        assert [e.path for e in report.errors] == ["/a~1b", "/c~0d"]
        assert report.errors[0].schema_path == "/properties/a~1b/type"
