"""Streamlit frontend for the Prompt Playground.

Provides the template playground, the example browser and the evaluation
demos on top of the Prompt Playground API.
"""

import json
import logging
import os
from typing import Any

import httpx
import streamlit as st

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

# Page config
st.set_page_config(
    page_title="Prompt Playground",
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """SYSTEM:
You are a helpful assistant. Extract key information from user messages.

USER MESSAGE:
{user_input}

Extract the following:
- Main topic
- Action requested
- Urgency level"""

DEFAULT_BINDINGS = {
    "user_input": "I need to schedule a meeting with the team ASAP to discuss the Q4 budget.",
}

DIFFICULTY_BADGES = {
    "beginner": "🟢 beginner",
    "intermediate": "🟠 intermediate",
    "advanced": "🔴 advanced",
}


# =============================================================================
# API Client
# =============================================================================


class PlaygroundAPIClient:
    """API client for the playground, examples and demos endpoints."""

    def __init__(self, base_url: str):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API.
        """
        self.base_url = base_url.rstrip("/")

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any] | None:
        try:
            response = httpx.post(f"{self.base_url}{path}", json=payload, timeout=10.0)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"POST {path} failed: {e.response.status_code} - {e.response.text}")
            st.error(f"Request failed: {e.response.status_code}")
            return None
        except httpx.HTTPError as e:
            logger.error(f"POST {path} error: {e}")
            st.error(f"Request error: {e}")
            return None

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any] | None:
        try:
            response = httpx.get(f"{self.base_url}{path}", params=params, timeout=10.0)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"GET {path} error: {e}")
            st.error(f"Request error: {e}")
            return None

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            response = httpx.get(f"{self.base_url}/health", timeout=5.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def analyze(self, template: str, bindings: dict[str, str]) -> dict[str, Any] | None:
        """Extract variables, render and score a template."""
        return self._post("/playground/analyze", {"template": template, "bindings": bindings})

    def list_examples(
        self,
        category: str = "all",
        difficulty: str = "all",
        query: str = "",
    ) -> dict[str, Any]:
        """List example summaries with optional filters."""
        params = {"category": category, "difficulty": difficulty, "q": query}
        return self._get("/examples", params) or {
            "examples": [],
            "total": 0,
            "categories": [],
            "difficulties": [],
        }

    def get_example(self, slug: str) -> dict[str, Any] | None:
        """Get one example with navigation context, or None if absent."""
        return self._get(f"/examples/{slug}")

    def rubric_defaults(self) -> dict[str, Any] | None:
        """Get the built-in rubric criteria and test cases."""
        return self._get("/demos/rubric/defaults")

    def run_rubric(self, criteria: list[dict], test_cases: list[dict]) -> dict[str, Any] | None:
        """Run rubric criteria over test cases."""
        return self._post("/demos/rubric/run", {"criteria": criteria, "test_cases": test_cases})

    def injection_catalog(self) -> dict[str, Any] | None:
        """Get the built-in injection strategies and attack vectors."""
        return self._get("/demos/injection/catalog")

    def simulate_injection(self, template: str, user_input: str) -> dict[str, Any] | None:
        """Simulate an injection attempt against a template."""
        return self._post(
            "/demos/injection/simulate",
            {"template": template, "user_input": user_input},
        )

    def validate_output(self, schema_text: str, output_text: str) -> dict[str, Any] | None:
        """Validate JSON output against a JSON Schema."""
        return self._post(
            "/demos/validator/validate",
            {"schema_text": schema_text, "output_text": output_text},
        )


# =============================================================================
# UI Components
# =============================================================================


def render_sidebar(client: PlaygroundAPIClient) -> str:
    """Render the sidebar with connection status and page navigation.

    Args:
        client: The API client instance.

    Returns:
        The selected page name.
    """
    with st.sidebar:
        st.title("🧪 Prompt Playground")

        st.divider()

        if client.health_check():
            st.success("✅ API Connected")
        else:
            st.error("❌ API Disconnected")
            st.info(f"API URL: {API_BASE_URL}")

        st.divider()

        page = st.radio(
            "Page",
            ["Template Playground", "Examples", "Eval Rubric", "Injection Sandbox", "Output Validator"],
        )

        st.divider()
        st.caption(f"API: `{API_BASE_URL}`")

    return page


def apply_binding(bindings: dict[str, str], name: str, value: str) -> None:
    """Record a variable field value.

    A field left empty stays unbound so its placeholder shows in the preview.
    Once a value has been entered, clearing it binds the empty string.
    """
    if value or name in bindings:
        bindings[name] = value


def render_playground(client: PlaygroundAPIClient) -> None:
    """Render the template playground with live scoring."""
    st.header("Prompt Template Playground")
    st.write(
        "Build prompts with variables and see quality feedback in real-time. "
        "Use `{variable_name}` syntax for placeholders."
    )

    if "bindings" not in st.session_state:
        st.session_state.bindings = dict(DEFAULT_BINDINGS)

    col1, col2 = st.columns(2)

    with col1:
        template = st.text_area("Prompt Template", value=DEFAULT_TEMPLATE, height=260)

        # First pass finds the variables; values typed below feed the second pass
        analysis = client.analyze(template, st.session_state.bindings)
        if analysis is None:
            return

        if analysis["variables"]:
            st.subheader("Variables")
            for name in analysis["variables"]:
                value = st.text_input(
                    f"{{{name}}}",
                    value=st.session_state.bindings.get(name, ""),
                    placeholder=f"Value for {name}",
                    key=f"var_{name}",
                )
                apply_binding(st.session_state.bindings, name, value)

            analysis = client.analyze(template, st.session_state.bindings) or analysis

    with col2:
        score = analysis["score"]
        st.subheader("Prompt Quality Score")
        st.metric("Score", score["score"], help=score["rating"])
        st.progress(score["score"] / 100, text=score["rating"])

        if score["strengths"]:
            st.markdown("**✓ Strengths**")
            for strength in score["strengths"]:
                st.markdown(f"- {strength}")

        if score["improvements"]:
            st.markdown("**⚠ Suggestions**")
            for improvement in score["improvements"]:
                st.markdown(f"- {improvement}")

        st.subheader("Final Prompt Preview")
        st.code(analysis["rendered"], language="text")

    st.info(
        "The quality score checks for prompt engineering best practices: role separation, "
        "delimiters, format specifications, constraints, and sufficient detail."
    )


def render_examples(client: PlaygroundAPIClient) -> None:
    """Render the example browser with filters and a detail view."""
    st.header("Examples")

    catalog = client.list_examples()
    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        query = st.text_input("Search examples...")
    with col2:
        category = st.selectbox("Category", ["all", *catalog["categories"]])
    with col3:
        difficulty = st.selectbox("Difficulty", ["all", *catalog["difficulties"]])

    listing = client.list_examples(category=category, difficulty=difficulty, query=query)
    if not listing["examples"]:
        st.info("No examples match your filters.")
        return

    options = {e["title"]: e["slug"] for e in listing["examples"]}
    title = st.selectbox(f"{listing['total']} examples", list(options))
    detail = client.get_example(options[title])
    if detail is None:
        st.warning("Example not found.")
        return

    example = detail["example"]
    st.subheader(example["title"])
    st.caption(
        f"{detail['category_label']} · "
        f"{DIFFICULTY_BADGES.get(example['difficulty'], example['difficulty'])}"
    )
    st.write(example["description"])

    if example.get("template"):
        st.code(example["template"], language="text")

    st.html(example["content"])

    if example["pitfalls"]:
        st.markdown("**Common pitfalls**")
        for pitfall in example["pitfalls"]:
            st.markdown(f"- {pitfall}")

    if example["checklist"]:
        st.markdown("**Checklist**")
        for item in example["checklist"]:
            st.checkbox(item, key=f"check_{example['slug']}_{item}")

    if detail["related"]:
        st.markdown("**Related**")
        for related in detail["related"]:
            st.markdown(f"- {related['title']}: {related['description']}")


def render_rubric(client: PlaygroundAPIClient) -> None:
    """Render the evaluation rubric demo."""
    st.header("Evaluation Rubric")

    defaults = client.rubric_defaults()
    if defaults is None:
        return

    criteria_text = st.text_area(
        "Criteria (JSON)", json.dumps(defaults["criteria"], indent=2), height=220
    )
    cases_text = st.text_area(
        "Test cases (JSON)", json.dumps(defaults["test_cases"], indent=2), height=260
    )

    if st.button("Run Evaluation", type="primary"):
        try:
            criteria = json.loads(criteria_text)
            test_cases = json.loads(cases_text)
        except json.JSONDecodeError as e:
            st.error(f"Invalid JSON: {e}")
            return

        report = client.run_rubric(criteria, test_cases)
        if report is None:
            return

        summary = report["summary"]
        col1, col2, col3 = st.columns(3)
        col1.metric("Total", summary["total"])
        col2.metric("Pass rate", f"{summary['pass_rate']}%")
        col3.metric("Accuracy", f"{summary['accuracy']}%")

        for result in report["results"]:
            verdict = "✅" if result["evaluation"]["passed"] else "❌"
            match = "correct" if result["correct"] else "unexpected"
            with st.expander(f"{verdict} {result['test_case']['input']} ({match})"):
                for item in result["evaluation"]["results"]:
                    mark = "✓" if item["passed"] else "✗"
                    st.write(f"{mark} **{item['criterion']}**: {item['message']}")


def render_injection(client: PlaygroundAPIClient) -> None:
    """Render the prompt injection sandbox."""
    st.header("Prompt Injection Sandbox")
    st.warning(
        "This is a simplified simulation for learning. Real prompt injection attacks "
        "can be much more sophisticated."
    )

    catalog = client.injection_catalog()
    if catalog is None:
        return

    strategies = {s["name"]: s for s in catalog["strategies"]}
    attacks = {a["name"]: a for a in catalog["attack_vectors"]}

    col1, col2 = st.columns(2)
    with col1:
        strategy = strategies[st.selectbox("Defense strategy", list(strategies))]
        st.caption(strategy["description"])
        template = st.text_area("Template", strategy["template"], height=220)
    with col2:
        attack = attacks[st.selectbox("Attack vector", list(attacks))]
        st.caption(f"Severity: {attack['severity']}")
        user_input = st.text_area("User input", attack["input"], height=220)

    if st.button("Test Strategy", type="primary"):
        result = client.simulate_injection(template, user_input)
        if result is None:
            return
        if result["blocked"]:
            st.success(f"🛡️ Blocked: {result['response']}")
        else:
            st.error(f"⚠️ Compromised: {result['response']}")
        st.write(result["reasoning"])
        st.code(result["prompt"], language="text")


def render_validator(client: PlaygroundAPIClient) -> None:
    """Render the JSON output validator."""
    st.header("Output Validator")

    example_schema = {
        "type": "object",
        "required": ["name", "priority"],
        "properties": {
            "name": {"type": "string", "minLength": 1},
            "priority": {"type": "string", "enum": ["low", "medium", "high"]},
            "tags": {"type": "array", "items": {"type": "string"}},
        },
        "additionalProperties": False,
    }
    example_output = {"name": "Fix login bug", "priority": "high", "tags": ["bug", "urgent"]}

    col1, col2 = st.columns(2)
    with col1:
        schema_text = st.text_area("JSON Schema", json.dumps(example_schema, indent=2), height=300)
    with col2:
        output_text = st.text_area("LLM Output", json.dumps(example_output, indent=2), height=300)

    if st.button("Validate", type="primary"):
        report = client.validate_output(schema_text, output_text)
        if report is None:
            return
        if report["valid"]:
            st.success("✅ Output matches the schema")
        else:
            st.error(f"❌ {len(report['errors'])} validation error(s)")
            st.dataframe(report["errors"], use_container_width=True, hide_index=True)


# =============================================================================
# Main App
# =============================================================================


def main() -> None:
    """Main application entry point."""
    client = PlaygroundAPIClient(API_BASE_URL)

    page = render_sidebar(client)

    match page:
        case "Template Playground":
            render_playground(client)
        case "Examples":
            render_examples(client)
        case "Eval Rubric":
            render_rubric(client)
        case "Injection Sandbox":
            render_injection(client)
        case "Output Validator":
            render_validator(client)


if __name__ == "__main__":
    main()
