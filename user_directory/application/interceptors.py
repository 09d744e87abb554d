"""gRPC server interceptors."""

import logging
import time

import grpc

logger = logging.getLogger(__name__)


def _log_call(method: str, code: grpc.StatusCode, start: float) -> None:
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{method} -> {code.name} in {elapsed_ms:.2f}ms")


class LoggingInterceptor(grpc.ServerInterceptor):
    """Logs the method, status code and duration of every unary call."""

    def intercept_service(self, continuation, handler_call_details):
        handler = continuation(handler_call_details)
        if handler is None or handler.unary_unary is None:
            return handler

        method = handler_call_details.method
        behavior = handler.unary_unary

        def logged_behavior(request, context):
            start = time.perf_counter()
            try:
                response = behavior(request, context)
            except Exception:
                # context.abort() raises after setting the code
                _log_call(method, context.code() or grpc.StatusCode.UNKNOWN, start)
                raise
            _log_call(method, context.code() or grpc.StatusCode.OK, start)
            return response

        return grpc.unary_unary_rpc_method_handler(
            logged_behavior,
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )
