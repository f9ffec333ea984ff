from typing import Any

from langchain_openai import ChatOpenAI

from .settings import AdvisorySettings


def build_llm(cfg: AdvisorySettings) -> ChatOpenAI:
    return ChatOpenAI(
        openai_api_key=cfg.api_key,
        openai_api_base=cfg.base_url,
        model_name=cfg.model,
        temperature=float(cfg.temperature),
        request_timeout=float(cfg.timeout_s),
        max_retries=int(cfg.max_retries),
        default_headers={
            "HTTP-Referer": "http://localhost:8000",
            "X-Title": "GradeTargetChecker",
        },
    )


def message_text(out: Any) -> str:
    if hasattr(out, "content"):
        content = out.content
        if isinstance(content, list):
            # beberapa provider mengembalikan content berupa list blok
            parts = []
            for block in content:
                if isinstance(block, dict):
                    parts.append(str(block.get("text") or ""))
                else:
                    parts.append(str(block))
            return "".join(parts)
        return content or ""
    return str(out)


async def ainvoke_text(llm: Any, prompt: str) -> str:
    out = await llm.ainvoke(prompt)
    return message_text(out)
