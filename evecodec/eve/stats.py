# evecodec/eve/stats.py
"""
Engine statistics ("event_type": "stats").

Only the counters below are modelled; unknown counters are ignored like any
other unknown key. Field order follows the order Suricata writes them in.
"""
from typing import Literal, Optional

from pydantic import Field

from evecodec.eve.fields import EveModel, Int


class CaptureStats(EveModel):
    kernel_packets: Int = None
    kernel_drops: Int = None


class IprawStats(EveModel):
    invalid_ip_version: Int = None


class LtnullStats(EveModel):
    pkt_too_small: Int = None
    unsupported_type: Int = None


class DceStats(EveModel):
    pkt_too_small: Int = None


class DecoderStats(EveModel):
    pkts: Int = None
    bytes: Int = None
    invalid: Int = None
    ipv4: Int = None
    ipv6: Int = None
    ethernet: Int = None
    raw: Int = None
    null: Int = None
    sll: Int = None
    tcp: Int = None
    udp: Int = None
    sctp: Int = None
    icmpv4: Int = None
    icmpv6: Int = None
    ppp: Int = None
    pppoe: Int = None
    gre: Int = None
    vlan: Int = None
    vlan_qinq: Int = None
    teredo: Int = None
    ipv4_in_ipv6: Int = None
    ipv6_in_ipv6: Int = None
    mpls: Int = None
    avg_pkt_size: Int = None
    max_pkt_size: Int = None
    erspan: Int = None
    ipraw: Optional[IprawStats] = None
    ltnull: Optional[LtnullStats] = None
    dce: Optional[DceStats] = None


class FlowStats(EveModel):
    memcap: Int = None
    spare: Int = None
    emerg_mode_entered: Int = None
    emerg_mode_over: Int = None
    tcp_reuse: Int = None
    memuse: Int = None


class DefragFamilyStats(EveModel):
    fragments: Int = None
    reassembled: Int = None
    timeouts: Int = None


class DefragStats(EveModel):
    ipv4: Optional[DefragFamilyStats] = None
    ipv6: Optional[DefragFamilyStats] = None
    max_frag_hits: Int = None


class StreamStats(EveModel):
    # wire names start with a digit
    three_whs_ack_in_wrong_dir: Int = Field(None, alias="3whs_ack_in_wrong_dir")
    three_whs_async_wrong_seq: Int = Field(None, alias="3whs_async_wrong_seq")
    three_whs_right_seq_wrong_ack_evasion: Int = Field(None, alias="3whs_right_seq_wrong_ack_evasion")


class TcpStats(EveModel):
    sessions: Int = None
    ssn_memcap_drop: Int = None
    pseudo: Int = None
    pseudo_failed: Int = None
    invalid_checksum: Int = None
    no_flow: Int = None
    syn: Int = None
    synack: Int = None
    rst: Int = None
    segment_memcap_drop: Int = None
    stream_depth_reached: Int = None
    reassembly_gap: Int = None
    memuse: Int = None
    reassembly_memuse: Int = None


class DetectStats(EveModel):
    alert: Int = None


class FlowMgrStats(EveModel):
    closed_pruned: Int = None
    new_pruned: Int = None
    est_pruned: Int = None


class DnsStats(EveModel):
    memuse: Int = None
    memcap_state: Int = None
    memcap_global: Int = None


class HttpStats(EveModel):
    memuse: Int = None
    memcap: Int = None


class StatsBody(EveModel):
    kind: Literal["stats"] = Field("stats", exclude=True)

    uptime: Int = None
    capture: Optional[CaptureStats] = None
    decoder: Optional[DecoderStats] = None
    flow: Optional[FlowStats] = None
    defrag: Optional[DefragStats] = None
    stream: Optional[StreamStats] = None
    tcp: Optional[TcpStats] = None
    detect: Optional[DetectStats] = None
    flow_mgr: Optional[FlowMgrStats] = None
    dns: Optional[DnsStats] = None
    http: Optional[HttpStats] = None
