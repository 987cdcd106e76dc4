# evecodec/eve/output.py
"""
Re-encoding view of an EveEvent used only when handing records downstream.

Some downstream JSON parsers (syslog-ng's, for one) truncate large integers,
so flow_id leaves as a base-10 string. On the way back in, both the string
and the plain number form are accepted.

Leniency: a flow_id whose text is not a signed 64-bit integer decodes to 0
instead of failing the whole record, so a single sensor quirk does not
discard an otherwise valid event. Set EVE_FLOWID_LENIENT=false (or pass
lenient=False to the codec) to get a ParseError instead.
"""
import logging
import re
from typing import Annotated, Any, Optional

from pydantic import PlainSerializer, PlainValidator, ValidationInfo, model_validator

from evecodec.eve.errors import ParseError
from evecodec.eve.fields import INT64_MAX, INT64_MIN
from evecodec.eve.schemas import EveEvent
from evecodec.shared.config import settings
from evecodec.shared.logging import FlowAdapter

log = logging.getLogger(__name__)

_INT_TEXT_RE = re.compile(r"[+-]?[0-9]+")

LENIENT_FLOW_ID = "lenient_flow_id"


def _parse_int64(value: Any) -> Optional[int]:
    """Returns the int64 held by a JSON string/number, or None if there is none."""
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _INT_TEXT_RE.fullmatch(value):
        number = int(value)
    else:
        return None
    if INT64_MIN <= number <= INT64_MAX:
        return number
    return None


def _flow_id_from_wire(value: Any, info: ValidationInfo) -> int:
    # bool is an int subclass but never a flow id
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ParseError(f"flow_id must be a JSON string or number, got {type(value).__name__}")

    number = _parse_int64(value)
    if number is not None:
        return number

    lenient = (info.context or {}).get(LENIENT_FLOW_ID, settings.flow_id_lenient)
    if not lenient:
        raise ParseError(f"flow_id {value!r} is not a 64-bit integer")

    FlowAdapter(log, {"flow_id": value}).debug("malformed flow_id, defaulting to 0")
    return 0


def _flow_id_to_wire(value: int) -> str:
    return str(value)


OutFlowId = Annotated[
    int,
    PlainValidator(_flow_id_from_wire),
    PlainSerializer(_flow_id_to_wire, return_type=str, when_used="json"),
]


class EveOutEvent(EveEvent):
    """EveEvent with flow_id written as a JSON string."""
    flow_id: Optional[OutFlowId] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_null_flow_id(cls, data: Any) -> Any:
        # null is not a flow id; the string form has no way to carry it
        if isinstance(data, dict) and "flow_id" in data and data["flow_id"] is None:
            data = {k: v for k, v in data.items() if k != "flow_id"}
        return data

    @classmethod
    def from_event(cls, event: EveEvent) -> "EveOutEvent":
        fields_set = set(event.model_fields_set)
        if event.flow_id is None:
            fields_set.discard("flow_id")
        return cls.model_construct(_fields_set=fields_set, **dict(event))

    def to_event(self) -> EveEvent:
        return EveEvent.model_construct(_fields_set=set(self.model_fields_set), **dict(self))
