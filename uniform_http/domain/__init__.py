"""Domain layer - request/response model.

Structure:
- enums/: HttpMethod
- value_objects/: HttpRequest, HttpResponse, TransportResponse
- protocols/: TransportProtocol, LoggerProtocol

The domain layer has NO dependencies on httpx or structlog.
"""
