# evecodec/eve/bodies.py
"""
Event-type specific sub-objects of an EVE record.

Each body carries an excluded `kind` tag equal to its wire key, so that
`EveBody` is a tagged union: exactly one case per kind, no polymorphism
inside a body.
"""
from typing import Annotated, Dict, Literal, Optional, Type, Union

from pydantic import Field

from evecodec.eve.fields import Bool, EveModel, Int, Str, StrList
from evecodec.eve.stats import StatsBody
from evecodec.eve.suritime import SuriTime


class AlertBody(EveModel):
    kind: Literal["alert"] = Field("alert", exclude=True)

    action: Str = None
    gid: Int = None
    signature_id: Int = None
    rev: Int = None
    signature: Str = None
    category: Str = None
    severity: Int = None


class DnsBody(EveModel):
    kind: Literal["dns"] = Field("dns", exclude=True)

    type: Str = None
    id: Int = None
    rcode: Str = None
    rrname: Str = None
    rrtype: Str = None
    ttl: Int = None
    rdata: Str = None
    tx_id: Int = None


class HttpBody(EveModel):
    kind: Literal["http"] = Field("http", exclude=True)

    hostname: Str = None
    url: Str = None
    http_user_agent: Str = None
    http_content_type: Str = None
    http_method: Str = None
    protocol: Str = None
    status: Int = None
    length: Int = None


class TlsBody(EveModel):
    kind: Literal["tls"] = Field("tls", exclude=True)

    subject: Str = None
    issuerdn: Str = None
    fingerprint: Str = None
    sni: Str = None
    version: Str = None


class FlowBody(EveModel):
    kind: Literal["flow"] = Field("flow", exclude=True)

    pkts_toserver: Int = None
    pkts_toclient: Int = None
    bytes_toserver: Int = None
    bytes_toclient: Int = None
    start: Optional[SuriTime] = None
    end: Optional[SuriTime] = None
    age: Int = None
    state: Str = None
    reason: Str = None


class FileinfoBody(EveModel):
    kind: Literal["fileinfo"] = Field("fileinfo", exclude=True)

    filename: Str = None
    magic: Str = None
    state: Str = None
    md5: Str = None
    stored: Bool = None
    size: Int = None
    tx_id: Int = None


class SshEndpoint(EveModel):
    proto_version: Str = None
    software_version: Str = None


class SshBody(EveModel):
    kind: Literal["ssh"] = Field("ssh", exclude=True)

    client: Optional[SshEndpoint] = None
    server: Optional[SshEndpoint] = None


class SmtpBody(EveModel):
    kind: Literal["smtp"] = Field("smtp", exclude=True)

    helo: Str = None
    mail_from: Str = None
    rcpt_to: StrList = None


class EmailBody(EveModel):
    kind: Literal["email"] = Field("email", exclude=True)

    status: Str = None


class TcpBody(EveModel):
    kind: Literal["tcp"] = Field("tcp", exclude=True)

    state: Str = None
    syn: Bool = None
    tcp_flags: Str = None
    tcp_flags_tc: Str = None
    tcp_flags_ts: Str = None


class PacketInfoBody(EveModel):
    kind: Literal["packet_info"] = Field("packet_info", exclude=True)

    linktype: Int = None


EveBody = Annotated[
    Union[
        AlertBody,
        DnsBody,
        HttpBody,
        TlsBody,
        FlowBody,
        FileinfoBody,
        SshBody,
        SmtpBody,
        EmailBody,
        TcpBody,
        PacketInfoBody,
        StatsBody,
    ],
    Field(discriminator="kind"),
]

# wire key -> body model
BODY_TYPES: Dict[str, Type[EveModel]] = {
    "alert": AlertBody,
    "dns": DnsBody,
    "http": HttpBody,
    "tls": TlsBody,
    "flow": FlowBody,
    "fileinfo": FileinfoBody,
    "ssh": SshBody,
    "smtp": SmtpBody,
    "email": EmailBody,
    "tcp": TcpBody,
    "packet_info": PacketInfoBody,
    "stats": StatsBody,
}
