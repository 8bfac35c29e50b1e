import pytest

from fwsyslog.normalize import normalize


SCENARIO_LINE = (
    "Jan 05 10:22:31 policy_id=14 service=http src_zone=trust dst_zone=untrust "
    "action=Permit src=10.1.1.5 src_port=4041 dst=8.8.8.8 dst_port=80"
)

SCENARIO_ROW = "Jan,05,10:22:31,14,http,trust,untrust,Permit,10.1.1.5,4041,8.8.8.8,80"

DEVICE_LINE = (
    "Feb 24 08:00:01 10.0.0.1 ns2000: NetScreen device_id=ns2000  "
    "[Root]system-notification-00257(traffic): start_time=\"2009-02-24 08:00:01\" "
    "duration=0 policy_id=320001 service=MS-RPC Endpoint Mapper proto=6 "
    "src zone=Trust dst zone=Untrust action=Deny sent=0 rcvd=0 "
    "src=10.1.2.3 dst=192.168.0.9 src_port=3345 dst_port=135"
)

STATISTICS_LINE = (
    "Feb 24 08:00:02 10.0.0.1 ns2000: NetScreen device_id=ns2000 "
    "[Root]system-information-00536: Log statistics; sent 512 messages, dropped 0 messages."
)


class FakeLookup:
    def __init__(self, answers=None, error=None):
        self.answers = answers or {}
        self.error = error
        self.calls = []

    def __call__(self, ip):
        self.calls.append(ip)
        if self.error is not None:
            raise self.error
        return self.answers.get(ip, f"host-{ip.replace('.', '-')}.example.com")


@pytest.fixture
def scenario_normalized():
    return normalize(SCENARIO_LINE)


@pytest.fixture
def fake_lookup():
    return FakeLookup()
