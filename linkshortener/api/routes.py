"""Short URL endpoints

HTTP responses:
    POST / and POST /create (JSON body: {"url": "<target url>"})
        200: Successful URL shortening, plain text body is the new shortcode
        400: Bad client request (invalid JSON body or missing/empty 'url')
        500: No free shortcode found (generation attempts exhausted)
        503: Data store unavailable

    GET /{shortcode}
        302: Successful redirect, `Location` header holds the target URL
        404: Unknown or expired shortcode
        503: Data store unavailable
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from linkshortener.service import LinkService
from linkshortener.exceptions import GenerationExhaustedError, InvalidInputError, LinkNotFoundError, StoreUnavailableError
from linkshortener.api.responses import (
    response_200_shortcode,
    response_302,
    response_400,
    response_404,
    response_500,
    response_503,
)
from linkshortener.constants import INVALID_REQUEST, REDIRECT_SUCCESS, SHORT_URL_NOT_FOUND


logger = logging.getLogger(__name__)

router = APIRouter()

TARGET_URL_FIELD = 'url'


def get_service(request: Request) -> LinkService:
    return request.app.state.service


@router.post('/')
@router.post('/create')
async def shorten_url(request: Request, service: LinkService = Depends(get_service)) -> Response:
    # 1- Extract target URL from request body
    raw_body = await request.body()
    try:
        request_body = json.loads(raw_body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_REQUEST})
        return response_400(message='invalid JSON body', error_code=InvalidInputError.error_code)

    if not isinstance(request_body, dict) or TARGET_URL_FIELD not in request_body:
        logger.info("Missing 'url' in JSON body. Responding with 400.", extra={'event': INVALID_REQUEST})
        return response_400(message=f"missing '{TARGET_URL_FIELD}' in JSON body", error_code=InvalidInputError.error_code)

    # 2- Shorten target URL (blocking Redis I/O runs in the worker thread pool)
    try:
        short_url = await run_in_threadpool(service.shorten, request_body[TARGET_URL_FIELD])
    except InvalidInputError as e:
        logger.info('Invalid target URL. Responding with 400.', extra={'event': INVALID_REQUEST, 'reason': str(e)})
        return response_400(message=f"'{TARGET_URL_FIELD}' must be a non-empty string", error_code=e.error_code)
    except StoreUnavailableError as e:
        logger.warning('Data store unavailable. Responding with 503.')
        return response_503(error_code=e.error_code)
    except GenerationExhaustedError as e:
        logger.warning('Shortcode generation exhausted. Responding with 500.')
        return response_500(error_code=e.error_code)

    # 3- Respond with the new shortcode
    return response_200_shortcode(short_url.shortcode)


@router.get('/{shortcode}')
def redirect_url(shortcode: str, service: LinkService = Depends(get_service)) -> Response:
    try:
        short_url = service.resolve(shortcode)
    except LinkNotFoundError as e:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url '{shortcode}' doesn't exist", error_code=e.error_code)
    except StoreUnavailableError as e:
        logger.warning('Data store unavailable. Responding with 503.', extra={'shortcode': shortcode})
        return response_503(error_code=e.error_code)

    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=short_url.target)
