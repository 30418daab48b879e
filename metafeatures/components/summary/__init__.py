from .engine import apply_summarizers, resolve_summarizers, summarize

__all__ = ["apply_summarizers", "resolve_summarizers", "summarize"]
