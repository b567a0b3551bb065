"""Rendering of command results and errors into display text."""

import json
from typing import Any, Dict, List, Optional, Tuple

from .process import ProcessResult

# Each rule: slots of alternative substrings (every slot must match), then hints.
# Rules are checked in order and every match contributes.
_SUGGESTION_RULES: List[Tuple[Tuple[Tuple[str, ...], ...], List[str]]] = [
    (
        (("command not found", "enoent", "[errno 2]"),),
        [
            "🔧 Install DevSpace CLI: https://devspace.sh/docs/getting-started/installation",
            "🔍 Verify DevSpace is in your PATH: `devspace version`",
            "⚙️ Check if DevSpace binary has execute permissions",
        ],
    ),
    (
        (("no such file or directory",), ("devspace.yaml",)),
        [
            "🚀 Initialize a DevSpace project first: use devspace_init",
            "📂 Ensure you are in the correct project directory",
            "🔎 Check if devspace.yaml was moved or deleted",
        ],
    ),
    (
        (("denied", "permission"),),
        [
            "☸️ Check Kubernetes cluster access: `kubectl cluster-info`",
            "🔐 Verify your kubeconfig is configured correctly",
            "👤 Ensure you have permissions in the target namespace",
            "🔑 Check file/directory permissions",
        ],
    ),
    (
        (("timeout", "timed out"),),
        [
            "⏱️ Command may need more time to complete",
            "🌐 Check network connectivity to Kubernetes cluster",
            "🔄 Try running the command again",
            "📊 Check cluster resource availability",
        ],
    ),
    (
        (("connection refused", "network"),),
        [
            "🌐 Check network connectivity",
            "🔧 Verify Kubernetes cluster is running",
            "🚪 Check if required ports are open",
            "📱 Verify proxy/firewall settings",
        ],
    ),
]


def troubleshooting_suggestions(message: str) -> List[str]:
    """Collect remediation hints for every error pattern found in message."""
    text = message.lower()
    suggestions: List[str] = []
    for slots, hints in _SUGGESTION_RULES:
        if all(any(pattern in text for pattern in slot) for slot in slots):
            suggestions.extend(hints)
    return suggestions


def _suggestions_section(suggestions: List[str]) -> str:
    if not suggestions:
        return ""
    lines = "".join(f"  {suggestion}\n" for suggestion in suggestions)
    return f"\n\n💡 Troubleshooting Suggestions:\n{lines}"


def format_output(result: ProcessResult) -> str:
    """Render a process result; stderr on success is shown as warnings."""
    if result.exit_code == 0:
        output = result.stdout
        if result.stderr:
            output += "\n\n⚠️ Warnings/Info:\n" + result.stderr
        return output

    output = f"❌ Error (Exit Code: {result.exit_code}):\n"
    if result.stderr:
        output += result.stderr
    if result.stdout:
        output += "\n\n📄 Output:\n" + result.stdout
    output += _suggestions_section(troubleshooting_suggestions(result.stderr))
    return output


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2, default=str)
    return str(value)


def format_error(
    tool_name: str,
    error: Any,
    context: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Render an error with its context and matching troubleshooting hints.

    Args:
        tool_name: Tool the error belongs to
        error: Exception or message
        context: Extra key/value pairs shown under a context heading

    Returns:
        Display text
    """
    message = str(error)
    formatted = f"❌ Error in {tool_name}: {message}"

    if context:
        formatted += "\n\n📋 Context:\n"
        for key, value in context.items():
            formatted += f"  {key}: {_format_value(value)}\n"

    formatted += _suggestions_section(troubleshooting_suggestions(message))
    return formatted
