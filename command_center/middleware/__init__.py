"""Command center request middleware."""

from command_center.middleware.performance import RequestIDMiddleware, RequestTimingMiddleware

__all__ = ["RequestIDMiddleware", "RequestTimingMiddleware"]
