from dataclasses import astuple, dataclass


DELIMITER = ","

HEADER = (
    "Month,Day,Time,Policy,Service,Source Zone,Destination Zone,Action,"
    "Source Address,Source Port,Destination,Destination Port"
)


@dataclass(frozen=True)
class OutputRecord:
    """
    One converted firewall event.

    Columns are fixed and always present:
    - missing fields are empty strings
    - addresses may be hostnames when resolution was requested
    """
    month: str
    day: str
    time: str
    policy: str
    service: str
    src_zone: str
    dst_zone: str
    action: str
    src_address: str
    src_port: str
    dst_address: str
    dst_port: str

    def to_row(self, delimiter: str = DELIMITER) -> str:
        return delimiter.join(astuple(self))


@dataclass(frozen=True)
class CacheEntry:
    ip_address: str
    hostname: str
