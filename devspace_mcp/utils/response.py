"""Standardized response utilities for MCP tools."""

from typing import Any, Dict, List


def is_success(result: Dict[str, Any]) -> bool:
    """Check if a tool response reports success."""
    return not result.get("isError", False)


def response_text(result: Dict[str, Any]) -> str:
    """Concatenate the text content blocks of a tool response."""
    return "\n".join(
        block.get("text", "") for block in result.get("content", []) if block.get("type") == "text"
    )


def text_response(text: str, is_error: bool = False) -> Dict[str, Any]:
    """Create a tool response envelope with a single text block.

    Args:
        text: Display text
        is_error: Whether the call failed

    Returns:
        Tool response in MCP call-result shape
    """
    content: List[Dict[str, str]] = [{"type": "text", "text": text}]
    return {
        "content": content,
        "isError": is_error,
    }


def error_response(text: str) -> Dict[str, Any]:
    """Create an error tool response."""
    return text_response(text, is_error=True)
