"""Tests for result and error rendering."""

from devspace_mcp.core.formatting import (
    format_error,
    format_output,
    troubleshooting_suggestions,
)
from devspace_mcp.core.process import CommandTimeoutError, ProcessResult


class TestFormatOutput:

    def test_success_plain_stdout(self):
        result = ProcessResult(stdout="deployed", stderr="", exit_code=0)

        assert format_output(result) == "deployed"

    def test_success_with_stderr_shows_warnings(self):
        result = ProcessResult(stdout="built image", stderr="using cached layer", exit_code=0)

        output = format_output(result)

        assert output == "built image\n\n⚠️ Warnings/Info:\nusing cached layer"
        assert "❌" not in output

    def test_failure_layout(self):
        result = ProcessResult(stdout="step 1 ok", stderr="step 2 broke", exit_code=2)

        output = format_output(result)

        assert output.startswith("❌ Error (Exit Code: 2):\nstep 2 broke")
        assert "\n\n📄 Output:\nstep 1 ok" in output
        assert "Troubleshooting" not in output

    def test_failure_without_output_section(self):
        result = ProcessResult(stdout="", stderr="fatal", exit_code=1)

        assert "📄 Output" not in format_output(result)

    def test_failure_appends_matching_suggestions(self):
        result = ProcessResult(stdout="", stderr="dial tcp: connection refused", exit_code=1)

        output = format_output(result)

        assert "💡 Troubleshooting Suggestions:" in output
        assert "🌐 Check network connectivity" in output


class TestSuggestions:

    def test_no_match(self):
        assert troubleshooting_suggestions("something odd happened") == []

    def test_match_is_case_insensitive(self):
        assert troubleshooting_suggestions("PERMISSION DENIED")[0].startswith("☸️")

    def test_descriptor_rule_needs_both_patterns(self):
        only_path = troubleshooting_suggestions("open config: no such file or directory")
        both = troubleshooting_suggestions("open devspace.yaml: no such file or directory")

        assert not any("devspace_init" in s for s in only_path)
        assert any("devspace_init" in s for s in both)

    def test_multiple_rules_in_fixed_order(self):
        suggestions = troubleshooting_suggestions(
            "network unreachable: request timed out, permission denied"
        )

        permission = suggestions.index("🔑 Check file/directory permissions")
        timeout = suggestions.index("⏱️ Command may need more time to complete")
        network = suggestions.index("🚪 Check if required ports are open")
        assert permission < timeout < network

    def test_missing_executable_hints(self):
        suggestions = troubleshooting_suggestions(
            "[Errno 2] No such file or directory: 'devspace'"
        )

        assert suggestions[0].startswith("🔧 Install DevSpace CLI")


class TestFormatError:

    def test_message_only(self):
        assert format_error("devspace_ui", "boom") == "❌ Error in devspace_ui: boom"

    def test_exception_message_and_suggestions(self):
        text = format_error("devspace_dev", CommandTimeoutError(300000))

        assert text.startswith("❌ Error in devspace_dev: Command timed out after 300000ms")
        assert "⏱️ Command may need more time to complete" in text

    def test_context_rendering(self):
        text = format_error(
            "devspace_run",
            "Validation failed",
            {"path": "/work", "args": {"command": "migrate"}, "searchPaths": ["a", "b"]},
        )

        assert "\n\n📋 Context:\n" in text
        assert "  path: /work\n" in text
        assert '"command": "migrate"' in text
        assert '"a"' in text and '"b"' in text

    def test_empty_context_omitted(self):
        assert "📋 Context" not in format_error("devspace_version", "boom", {})
