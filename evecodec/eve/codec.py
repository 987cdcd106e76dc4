# evecodec/eve/codec.py
"""
Entry points for turning eve.json lines into EveEvent values and back.

Every decode failure surfaces as FormatError (timestamp layout) or ParseError
(anything else); pydantic's ValidationError never leaks out. Nothing here
logs or retries: the caller decides whether to skip the record or abort.
"""
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from evecodec.eve.errors import EveDecodeError, ParseError
from evecodec.eve.output import LENIENT_FLOW_ID, EveOutEvent
from evecodec.eve.schemas import EveEvent

Raw = Union[bytes, bytearray, str]

_DUMP_OPTS = dict(by_alias=True, exclude_unset=True)


def _wire_path(loc) -> str:
    loc = list(loc)
    # bodies live under their kind key on the wire: body.dns.ttl -> dns.ttl
    if loc[:1] == ["body"]:
        loc = loc[1:]
    elif loc[:1] == ["attached"]:
        loc = loc[2:]
    return ".".join(str(p) for p in loc)


def _translate(e: ValidationError) -> EveDecodeError:
    """First error wins; the record fails as a whole either way."""
    err = e.errors(include_url=False)[0]
    path = _wire_path(err.get("loc", ()))

    cause = (err.get("ctx") or {}).get("error")
    if isinstance(cause, EveDecodeError):
        return type(cause)(cause.message, path=cause.path or path)

    return ParseError(err.get("msg", "invalid value"), path=path)


def _validate_json(model, raw: Raw, context: Optional[Dict[str, Any]] = None):
    try:
        return model.model_validate_json(raw, context=context)
    except ValidationError as e:
        raise _translate(e) from e


def decode_event(raw: Raw) -> EveEvent:
    """Decode one eve.json line into its canonical form."""
    return _validate_json(EveEvent, raw)


def decode_event_dict(obj: Dict[str, Any]) -> EveEvent:
    """Same as decode_event for input already parsed by json.loads."""
    try:
        return EveEvent.model_validate(obj)
    except ValidationError as e:
        raise _translate(e) from e


def encode_event(event: EveEvent) -> bytes:
    return event.model_dump_json(**_DUMP_OPTS).encode("utf-8")


def decode_out_event(raw: Raw, lenient: Optional[bool] = None) -> EveEvent:
    """
    Decode a record produced by encode_out_event (or by a legacy producer that
    still writes flow_id as a number). Returns the canonical EveEvent.
    """
    context = None if lenient is None else {LENIENT_FLOW_ID: lenient}
    out = _validate_json(EveOutEvent, raw, context=context)
    return out.to_event()


def encode_out_event(event: EveEvent) -> bytes:
    """Encode for downstream delivery: flow_id is written as a JSON string."""
    if not isinstance(event, EveOutEvent):
        event = EveOutEvent.from_event(event)
    return event.model_dump_json(**_DUMP_OPTS).encode("utf-8")
