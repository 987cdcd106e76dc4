# tests/test_output_wrapper.py
import json
import logging

import pytest

from evecodec.eve.codec import decode_event, decode_out_event, encode_event, encode_out_event
from evecodec.eve.errors import ParseError
from evecodec.eve import output
from evecodec.eve.output import EveOutEvent
from evecodec.eve.schemas import EveEvent
from evecodec.shared.config import Settings

TS = "2019-03-14T10:11:12.123456+0000"


def _line(flow_id_json: str) -> str:
    return (
        '{"timestamp":"%s","flow_id":%s,"event_type":"flow","src_ip":"10.0.0.1",'
        '"dest_port":53,"flow":{"age":0,"state":"new"}}' % (TS, flow_id_json)
    )


def test_flow_id_is_written_as_string(flow_line):
    ev = decode_event(flow_line)
    out = encode_out_event(ev)
    assert b'"flow_id":"1234567890123456"' in out
    # canonical in-memory value is untouched
    assert ev.flow_id == 1234567890123456
    assert b'"flow_id":1234567890123456' in encode_event(ev)


def test_other_fields_pass_through_unchanged(alert_line):
    ev = decode_event(alert_line)
    canonical = json.loads(encode_event(ev))
    wrapped = json.loads(encode_out_event(ev))

    assert list(wrapped) == list(canonical)
    assert wrapped.pop("flow_id") == str(canonical.pop("flow_id"))
    assert wrapped == canonical


@pytest.mark.parametrize(
    "flow_id",
    [0, 1, -1, 1234567890123456789, 2 ** 63 - 1, -(2 ** 63)],
)
def test_string_form_round_trips(flow_id):
    ev = EveEvent(timestamp=TS, event_type="flow", flow_id=flow_id)
    out = encode_out_event(ev)
    assert ('"flow_id":"%d"' % flow_id).encode() in out

    back = decode_out_event(out)
    assert back.flow_id == flow_id
    assert encode_out_event(back) == out


@pytest.mark.parametrize("flow_id", [0, -7, 1234567890123456789, 2 ** 63 - 1])
def test_accepts_numeric_flow_id(flow_id):
    ev = decode_out_event(_line(str(flow_id)))
    assert ev.flow_id == flow_id


def test_decode_returns_canonical_event():
    ev = decode_out_event(_line('"42"'))
    assert type(ev) is EveEvent
    assert ev == decode_event(_line("42"))


@pytest.mark.parametrize(
    "flow_id_json",
    ['"abc"', '"12abc"', '" 12"', '"1.5"', '""', "1.5", "1e3", '"99999999999999999999"', "99999999999999999999"],
)
def test_malformed_flow_id_defaults_to_zero(flow_id_json):
    ev = decode_out_event(_line(flow_id_json), lenient=True)
    assert ev.flow_id == 0
    assert ev.src_ip == "10.0.0.1"
    assert ev.dest_port == 53
    assert ev.body.age == 0
    assert ev.body.state == "new"


def test_malformed_flow_id_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="evecodec.eve.output")
    decode_out_event(_line('"abc"'), lenient=True)
    records = [r for r in caplog.records if r.name == "evecodec.eve.output"]
    assert records
    assert records[0].levelno == logging.DEBUG
    assert records[0].flow_id == "abc"


def test_lenient_by_default():
    ev = decode_out_event(_line('"abc"'))
    assert ev.flow_id == 0
    assert ev.event_type == "flow"
    assert ev.src_ip == "10.0.0.1"
    assert ev.dest_port == 53
    assert ev.body.state == "new"


def test_settings_can_turn_leniency_off(monkeypatch):
    monkeypatch.setattr(output, "settings", Settings(flow_id_lenient=False))
    with pytest.raises(ParseError) as ei:
        decode_out_event(_line('"abc"'))
    assert ei.value.path == "flow_id"
    # an explicit argument still wins
    assert decode_out_event(_line('"abc"'), lenient=True).flow_id == 0


def test_strict_mode_rejects_malformed_flow_id():
    with pytest.raises(ParseError) as ei:
        decode_out_event(_line('"abc"'), lenient=False)
    assert ei.value.path == "flow_id"


@pytest.mark.parametrize("flow_id_json", ["true", "[1]", '{"id":1}'])
def test_non_scalar_flow_id(flow_id_json):
    with pytest.raises(ParseError) as ei:
        decode_out_event(_line(flow_id_json), lenient=True)
    assert ei.value.path == "flow_id"


def test_null_flow_id_is_treated_as_absent():
    ev = decode_out_event(_line("null"))
    assert ev.flow_id is None
    assert "flow_id" not in ev.model_fields_set
    assert b"flow_id" not in encode_out_event(ev)

    canonical = decode_event(_line("null"))
    assert "flow_id" in canonical.model_fields_set
    assert b"flow_id" not in encode_out_event(canonical)


def test_absent_flow_id_stays_absent(dns_line):
    ev = decode_event(dns_line)
    out = encode_out_event(ev)
    assert b"flow_id" not in out
    assert decode_out_event(out) == ev


def test_conversion_keeps_presence(dns_line):
    ev = decode_event(dns_line)
    out_ev = EveOutEvent.from_event(ev)
    assert out_ev.model_fields_set == ev.model_fields_set
    assert out_ev.to_event() == ev
