from typing import Any


def log_advisory_start(logger: Any, model: str, timeout_s: float) -> None:
    logger.info(" [ADVISORY] MULAI model=%s timeout_s=%s", model or "-", timeout_s)


def log_advisory_ok(logger: Any, model: str, is_impossible: bool, llm_ms: int) -> None:
    logger.info(" [ADVISORY] OK model=%s is_impossible=%s llm_ms=%s", model or "-", is_impossible, llm_ms)


def log_advisory_fail(logger: Any, code: str, reason: str, fallback: str = "deterministic") -> None:
    logger.warning(" [ADVISORY] FAIL code=%s reason=%s fallback=%s", code, reason or "unknown_error", fallback)


def log_verdict_disagreement(logger: Any, deterministic_kind: str, policy: str) -> None:
    logger.warning(
        " [ADVISORY] DISAGREE deterministic=%s advisory=impossible policy=%s",
        deterministic_kind,
        policy,
    )
