"""Shared utilities."""
import hashlib
import json
import re


def only_digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def content_hash(data) -> str:
    """Deterministic SHA-256 of a JSON-serializable structure (key order ignored)."""
    raw = json.dumps(data, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha256(raw.encode()).hexdigest()


def truncate(text: str, max_len: int = 200) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
