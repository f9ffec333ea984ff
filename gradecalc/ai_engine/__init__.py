"""LLM advisory integration (OpenRouter via LangChain)."""
