# evecodec/eve/schemas.py
from typing import Any, List, Optional

from pydantic import Field, model_serializer, model_validator

from evecodec.eve.bodies import BODY_TYPES, EveBody
from evecodec.eve.errors import ParseError
from evecodec.eve.fields import EveModel, Int, Int64, Str, StrList
from evecodec.eve.suritime import SuriTime

EVENT_TYPE_FLOW = "flow"
EVENT_TYPE_ALERT = "alert"


class ExtraInfo(EveModel):
    """Non-EVE-standard data added by enrichment stages."""
    bloom_ioc: Str = Field(None, alias="bloom-ioc")


class EveEvent(EveModel):
    """
    One parsed eve.json line.

    On the wire every body sits under its own key ("dns": {...}). In memory the
    body selected by event_type is `body`; any other sub-objects the sensor
    attached (an alert's "flow" or "http" context) are kept in `attached`,
    in wire order.
    """
    timestamp: SuriTime
    event_type: str = Field(..., strict=True)

    flow_id: Int64 = None
    in_iface: Str = None
    src_ip: Str = None
    src_port: Int = None
    src_host: StrList = None
    dest_ip: Str = None
    dest_port: Int = None
    dest_host: StrList = None
    proto: Str = None
    app_proto: Str = None
    tx_id: Int = None
    payload: Str = None
    payload_printable: Str = None
    stream: Int = None
    packet: Str = None

    body: Optional[EveBody] = None
    attached: Optional[List[EveBody]] = None

    extra: Optional[ExtraInfo] = Field(None, alias="_extra")

    @model_validator(mode="before")
    @classmethod
    def _lift_bodies(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # a null body is the same as no body
        keys = [k for k in data if k in BODY_TYPES and data[k] is not None]
        if not keys:
            return data

        for key in keys:
            if not isinstance(data[key], dict):
                raise ParseError("expected a JSON object", path=key)

        event_type = data.get("event_type")
        primary = event_type if event_type in keys else keys[0]

        lifted = {k: v for k, v in data.items() if k not in BODY_TYPES and k not in ("body", "attached")}
        lifted["body"] = {**data[primary], "kind": primary}
        others = [{**data[k], "kind": k} for k in keys if k != primary]
        if others:
            lifted["attached"] = others
        return lifted

    @model_serializer(mode="wrap")
    def _lower_bodies(self, handler):
        data = handler(self)
        if not isinstance(data, dict):
            return data

        out = {}
        for key, value in data.items():
            if key == "body":
                if self.body is not None:
                    out[self.body.kind] = value
            elif key == "attached":
                for body, body_value in zip(self.attached or [], value or []):
                    out[body.kind] = body_value
            else:
                out[key] = value
        return out

    @property
    def body_kind(self) -> Optional[str]:
        return self.body.kind if self.body is not None else None

    def body_matches(self) -> bool:
        """True when no body is present or the body kind equals event_type."""
        return self.body is None or self.body.kind == self.event_type

    def get_body(self, kind: str) -> Optional[EveBody]:
        """Find the primary or an attached body by its wire key."""
        for body in [self.body, *(self.attached or [])]:
            if body is not None and body.kind == kind:
                return body
        return None
