"""Resilient conversation summarization backed by hosted language models."""
