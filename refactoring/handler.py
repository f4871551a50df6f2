import logging
from typing import Optional
from flask import Request, Response
from config import Config
from constants import (
    CORS_HEADERS,
    MSG_CONFIG_ERROR,
    MSG_INVALID_FIELD,
    MSG_METHOD_NOT_ALLOWED,
    MSG_MISSING_FIELD,
    MSG_PROCESSING_ERROR,
    REQUEST_FIELD,
    TEXT_CONTENT_TYPE,
)
from refactoring.errors import ErrorKind, RefactorError
from refactoring.gemini import GeminiClient
from refactoring.prompts import build_prompt

logger = logging.getLogger(__name__)


def text_response(body: str, status: int) -> Response:
    return Response(body, status=status, content_type=TEXT_CONTENT_TYPE, headers=CORS_HEADERS)


def parse_abap_code(request: Request) -> str:
    """
    Pulls the ABAP source out of the JSON body.

    A body that is absent, unparsable or not an object counts as missing the
    field. A present field must be a string with non-whitespace content.
    """
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict) or REQUEST_FIELD not in body:
        raise RefactorError(ErrorKind.VALIDATION, MSG_MISSING_FIELD)

    abap_code = body[REQUEST_FIELD]
    if not isinstance(abap_code, str) or not abap_code.strip():
        raise RefactorError(ErrorKind.VALIDATION, MSG_INVALID_FIELD)
    return abap_code


class RequestHandler:
    """Serves the refactoring endpoint with a fixed config and completion client."""

    def __init__(self, config: Config, client: Optional[GeminiClient] = None):
        self.config = config
        self.client = client

    @property
    def ready(self) -> bool:
        return self.config.is_valid and self.client is not None

    def __call__(self, request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response("", status=204, headers=CORS_HEADERS)

        try:
            output = self.handle(request)
        except RefactorError as e:
            return text_response(e.message, e.status)
        return text_response(output, 200)

    def handle(self, request: Request) -> str:
        if not self.ready:
            raise RefactorError(ErrorKind.CONFIGURATION, MSG_CONFIG_ERROR)

        if request.method != "POST":
            raise RefactorError(ErrorKind.METHOD_NOT_ALLOWED, MSG_METHOD_NOT_ALLOWED)

        abap_code = parse_abap_code(request)
        logger.info(f"Received ABAP code for analysis: {abap_code}")
        return self.refactor(abap_code)

    def refactor(self, abap_code: str) -> str:
        prompt = build_prompt(abap_code)
        try:
            return self.client.generate_text(prompt)
        except RefactorError:
            raise
        except Exception as e:
            logger.error(f"Error calling model {self.client.model_name}: {e}")
            raise RefactorError(
                ErrorKind.UPSTREAM_RUNTIME, MSG_PROCESSING_ERROR.format(error=e)
            ) from e
