"""HTTP response builders for the gateway

Every error response shares the same JSON body:

    {
        "message": "Bad Request (invalid JSON body)",
        "errorCode": "service:invalid_input_error"
    }

Internal error details are never included in a response body; they are logged instead.
"""

from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from linkshortener.types import ResponseBody


def _error(status_code: int, base: str, message: str | None, error_code: str | None) -> JSONResponse:
    body: ResponseBody = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return JSONResponse(status_code=status_code, content=body)


def response_400(message: str | None = None, error_code: str | None = None) -> JSONResponse:
    return _error(400, 'Bad Request', message, error_code)


def response_404(message: str | None = None, error_code: str | None = None) -> JSONResponse:
    return _error(404, 'Not Found', message, error_code)


def response_500(message: str | None = None, error_code: str | None = None) -> JSONResponse:
    return _error(500, 'Internal Server Error', message, error_code)


def response_503(message: str | None = None, error_code: str | None = None) -> JSONResponse:
    return _error(503, 'Service Unavailable', message, error_code)


def response_not_implemented(status_code: int, error_code: str | None = None) -> JSONResponse:
    return _error(status_code, 'Not Implemented', None, error_code)


def response_200_shortcode(shortcode: str) -> PlainTextResponse:
    return PlainTextResponse(status_code=200, content=shortcode)


def response_302(*, location: str) -> RedirectResponse:
    return RedirectResponse(url=location, status_code=302)
