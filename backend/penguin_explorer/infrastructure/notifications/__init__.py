from .sse_notifier import SSENotifier

__all__ = [
    "SSENotifier",
]
