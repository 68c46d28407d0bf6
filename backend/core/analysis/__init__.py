"""
Study material generation and tutoring: prompt templates and the chat model client.
"""

from backend.core.analysis.llm_client import LLMClient
from backend.core.analysis.prompts import build_prompts, build_tutor_messages, parse_action

__all__ = ["LLMClient", "build_prompts", "build_tutor_messages", "parse_action"]
