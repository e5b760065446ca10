"""Stand-ins for the external translation provider."""

import httpx


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it answered."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def fake_translation(text: str, target_lang: str) -> str:
    return f"[{target_lang}] {text}"


def echo_provider() -> RecordingTransport:
    """Answers in the provider's fragment format with a fake translation."""

    def handler(request: httpx.Request) -> httpx.Response:
        text = request.url.params["q"]
        target = request.url.params["tl"]
        source = request.url.params["sl"]
        fragments = [
            [f"[{target}] ", "", None, None],
            [text, text, None, None],
        ]
        return httpx.Response(200, json=[fragments, None, source])

    return RecordingTransport(handler)


def status_provider(status_code: int) -> RecordingTransport:
    """Answers every request with the given status and no usable body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text="provider error")

    return RecordingTransport(handler)


def payload_provider(payload) -> RecordingTransport:
    """Answers every request with a fixed JSON payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    return RecordingTransport(handler)


def failing_provider(exc: Exception) -> RecordingTransport:
    """Raises a transport error instead of answering."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return RecordingTransport(handler)
