# tests/conftest.py
import pytest

FLOW_LINE = (
    '{"timestamp":"2019-03-14T10:11:12.123456+0100","flow_id":1234567890123456,'
    '"in_iface":"eth0","event_type":"flow","src_ip":"10.0.0.1","src_port":51234,'
    '"dest_ip":"10.0.0.2","dest_port":443,"proto":"TCP","app_proto":"tls",'
    '"flow":{"pkts_toserver":10,"pkts_toclient":8,"bytes_toserver":1200,'
    '"bytes_toclient":5400,"start":"2019-03-14T10:11:00.000001+0100",'
    '"end":"2019-03-14T10:11:10.999999+0100","age":10,"state":"closed","reason":"timeout"}}'
)

ALERT_LINE = (
    '{"timestamp":"2019-03-14T10:11:12.654321+0000","flow_id":-4611686018427387904,'
    '"in_iface":"eth1","event_type":"alert","src_ip":"192.0.2.7","src_port":80,'
    '"dest_ip":"198.51.100.3","dest_port":49152,"proto":"TCP","tx_id":0,'
    '"alert":{"action":"allowed","gid":1,"signature_id":2019401,"rev":3,'
    '"signature":"ET POLICY Suspicious inbound","category":"Potentially Bad Traffic","severity":2},'
    '"http":{"hostname":"example.com","url":"/x","http_user_agent":"curl/7.64.0",'
    '"http_content_type":"text/html","http_method":"GET","protocol":"HTTP/1.1","status":200,"length":512},'
    '"app_proto":"http",'
    '"flow":{"pkts_toserver":3,"pkts_toclient":2,"bytes_toserver":300,"bytes_toclient":700,'
    '"start":"2019-03-14T10:11:10.000000+0000"},'
    '"payload":"R0VUIC94","payload_printable":"GET /x","stream":1}'
)

DNS_LINE = (
    '{"timestamp":"2019-03-14T10:11:12.000010+0000","event_type":"dns",'
    '"src_ip":"10.0.0.1","src_port":0,"dns":{"type":"query","id":0,"rrname":"example.com","tx_id":0}}'
)


@pytest.fixture
def flow_line():
    return FLOW_LINE


@pytest.fixture
def alert_line():
    return ALERT_LINE


@pytest.fixture
def dns_line():
    return DNS_LINE
