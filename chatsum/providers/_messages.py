"""Conversion helpers shared by the LangChain-backed providers."""

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage


def build_langchain_messages(messages: list[dict[str, str]]) -> list[BaseMessage]:
    """
    Build LangChain message list from message dicts.

    :param messages: List of message dicts with 'role' and 'content' keys
    :return: List of LangChain message objects in the same order
    """
    lc_messages: list[BaseMessage] = []

    for msg in messages:
        role = msg.get("role", "user")
        content = msg.get("content", "")

        if role == "system":
            lc_messages.append(SystemMessage(content=content))
        elif role == "assistant":
            lc_messages.append(AIMessage(content=content))
        else:
            lc_messages.append(HumanMessage(content=content))

    return lc_messages


def extract_text(content: str | list | None) -> str:
    """
    Flatten LangChain response content into plain text.

    :param content: ``AIMessage.content`` (string or list of content blocks)
    :return: Text content, empty string if there is none
    """
    if not content:
        return ""
    if isinstance(content, str):
        return content

    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
