"""Prompt builders for LLM calls."""

from chatsum.prompts.summary_prompt import SummaryPromptBuilder, build_summary_instructions, count_tokens

__all__ = ["SummaryPromptBuilder", "build_summary_instructions", "count_tokens"]
