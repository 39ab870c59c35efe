"""HTTP middleware applied in taskhub.main (last added = outermost)."""

from taskhub.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
