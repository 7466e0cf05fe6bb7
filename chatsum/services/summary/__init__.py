"""Summary pipeline: model selection, resilient invocation, and orchestration."""

from chatsum.services.summary.conversation_summarizer import ConversationSummarizer
from chatsum.services.summary.model_selector import ModelSelector
from chatsum.services.summary.resilient_invoker import ResilientInvoker

__all__ = [
    "ConversationSummarizer",
    "ModelSelector",
    "ResilientInvoker",
]
