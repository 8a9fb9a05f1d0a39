"""
LLM-based flight extraction, used only after every heuristic parser gave up.

The model is asked for a bare JSON object. Whatever comes back, the caller
always gets a ParserResult: backend and parsing problems become failures
instead of exceptions.
"""

from __future__ import annotations

import json
from typing import Optional

import openai
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import LlmSettings, load_llm_settings
from ..parsers.types import ParsedFlight, ParseErrorKind, ParserResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

PARSER_NAME = 'model-fallback'
DEFAULT_CONFIDENCE = 0.7

SYSTEM_PROMPT = """You are a flight confirmation email parser. Extract flight information from emails and return ONLY valid JSON.

Your task:
1. Identify the ORIGIN airport/city (where the journey STARTS, not layovers)
2. Identify the FINAL DESTINATION (where the journey ENDS, not layovers)
3. Extract departure date and return date if applicable
4. Determine if it's one-way or round-trip
5. Extract airline name if mentioned
6. Extract confirmation/booking number if present

Rules:
- Never use a layover as origin or destination. "DCA -> JFK -> Paris" is origin DCA, destination Paris.
- Use 3 letter airport codes when available, otherwise city names
- Dates must be YYYY-MM-DD
- Use null for anything you cannot determine

Respond with ONLY this JSON object and no other text:
{
  "origin": "ABC or City Name",
  "destination": "XYZ or City Name",
  "departureDate": "YYYY-MM-DD or null",
  "returnDate": "YYYY-MM-DD or null",
  "isOneWay": true or false,
  "airline": "Airline Name or null",
  "confirmationNumber": "ABC123 or null",
  "confidence": 0.0 to 1.0
}"""

_DECODER = json.JSONDecoder()


class LlmFlightInfo(BaseModel):
    model_config = ConfigDict(extra='ignore')

    origin: Optional[str] = Field(default=None, description="Origin airport code or city")
    destination: Optional[str] = Field(default=None, description="Final destination airport code or city")
    departureDate: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    returnDate: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    isOneWay: Optional[bool] = Field(default=None)
    airline: Optional[str] = Field(default=None)
    confirmationNumber: Optional[str] = Field(default=None)
    confidence: Optional[float] = Field(default=None, description="0-1 confidence")

    @field_validator('origin', 'destination', 'departureDate', 'returnDate', 'airline',
                     'confirmationNumber', mode='before')
    @classmethod
    def _blank_to_none(cls, value):
        # Models sometimes emit a confirmation number as a JSON number
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str) and (not value.strip() or value.strip().lower() == 'null'):
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator('isOneWay', mode='before')
    @classmethod
    def _loose_bool(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ('true', 'yes'):
                return True
            if lowered in ('false', 'no'):
                return False
            return None
        return value if isinstance(value, bool) else None

    @field_validator('confidence', mode='before')
    @classmethod
    def _confidence_in_range(cls, value):
        # Anything that is not a 0-1 number falls back to the default confidence
        try:
            value = float(value)
        except (TypeError, ValueError):
            return None
        return value if 0 <= value <= 1 else None


def _build_prompt(from_addr: str, subject: str, body: str, max_body_chars: Optional[int]) -> str:
    body = body or ""
    if max_body_chars is not None and max_body_chars > 0 and len(body) > max_body_chars:
        body = body[:max_body_chars] + "..."

    return (
        "Parse this flight confirmation email:\n\n"
        f"From: {from_addr or ''}\n"
        f"Subject: {subject or ''}\n\n"
        "Body:\n"
        f"{body}"
    )


def _complete(client, settings: LlmSettings, prompt: str) -> str:
    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]
    try:
        response = client.chat.completions.create(
            model=settings.model,
            messages=messages,
            max_completion_tokens=settings.max_tokens,
            temperature=0,
        )
    except openai.BadRequestError as exc:
        message = str(exc)
        if "temperature" in message and "not supported" in message:
            response = client.chat.completions.create(
                model=settings.model,
                messages=messages,
                max_completion_tokens=settings.max_tokens,
            )
        else:
            raise

    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    return choices[0].message.content or ""


def parse_model_response(text: str) -> ParserResult:
    """Turn raw model output into a ParserResult.

    The first JSON object in the text is parsed and anything after it is
    ignored, so chatter around the object is tolerated.
    """
    text = text or ""
    start = text.find('{')
    if start < 0:
        return ParserResult.fail(ParseErrorKind.RESPONSE_UNPARSEABLE,
                                 'Could not find JSON in model response', PARSER_NAME)

    try:
        data, _ = _DECODER.raw_decode(text, start)
        parsed = LlmFlightInfo.model_validate(data)
    except json.JSONDecodeError as exc:
        logger.warning(f"Model returned malformed JSON: {exc}")
        return ParserResult.fail(ParseErrorKind.RESPONSE_UNPARSEABLE,
                                 f'Could not parse JSON from model response: {exc}', PARSER_NAME)
    except ValidationError as exc:
        logger.warning(f"Model JSON did not match the flight schema: {exc}")
        return ParserResult.fail(ParseErrorKind.RESPONSE_UNPARSEABLE,
                                 'Model response did not match the flight schema', PARSER_NAME)

    if not parsed.origin or not parsed.destination:
        return ParserResult.fail(ParseErrorKind.MISSING_REQUIRED_FIELDS,
                                 'Model could not extract origin/destination', PARSER_NAME)

    is_one_way = True if parsed.isOneWay is None else parsed.isOneWay
    flight = ParsedFlight(
        origin=parsed.origin,
        destination=parsed.destination,
        departure_date=parsed.departureDate,
        return_date=None if is_one_way else parsed.returnDate,
        is_one_way=is_one_way,
        airline=parsed.airline,
        confirmation_number=parsed.confirmationNumber,
        confidence=parsed.confidence or DEFAULT_CONFIDENCE,
    )
    return ParserResult.ok(flight, PARSER_NAME)


def parse_with_model(
    from_addr: str,
    subject: str,
    body: str,
    settings: Optional[LlmSettings] = None,
    client=None,
) -> ParserResult:
    """Last-resort extraction through the OpenAI chat completions API.

    Args:
        from_addr: Raw From header
        subject: Email subject
        body: Plain text body, truncated to ``settings.max_body_chars``
        settings: Model name, limits and API key (defaults to the environment)
        client: Pre-built OpenAI-compatible client, mainly for tests

    Returns:
        ParserResult; never raises for backend or response problems
    """
    settings = settings or load_llm_settings()

    if not settings.enabled:
        return ParserResult.fail(ParseErrorKind.BACKEND_UNAVAILABLE,
                                 'Model fallback disabled', PARSER_NAME)

    if client is None:
        if not settings.api_key:
            return ParserResult.fail(ParseErrorKind.BACKEND_UNAVAILABLE,
                                     'OpenAI API key not configured', PARSER_NAME)
        client = openai.OpenAI(api_key=settings.api_key, timeout=settings.timeout, max_retries=0)

    prompt = _build_prompt(from_addr, subject, body, settings.max_body_chars)
    logger.info(f"Falling back to model {settings.model} for: {subject}")

    try:
        text = _complete(client, settings, prompt)
    except openai.APITimeoutError as exc:
        logger.error(f"Model request timed out: {exc}")
        return ParserResult.fail(ParseErrorKind.BACKEND_UNAVAILABLE,
                                 f'Model request timed out after {settings.timeout}s', PARSER_NAME)
    except openai.APIError as exc:
        logger.error(f"Model request failed: {exc}")
        return ParserResult.fail(ParseErrorKind.BACKEND_UNAVAILABLE,
                                 f'Model parsing failed: {exc}', PARSER_NAME)

    return parse_model_response(text)
