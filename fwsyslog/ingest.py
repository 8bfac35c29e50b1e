import logging
from typing import Callable, Iterable, Iterator, Optional, Protocol

from .detect import LineKind, classify_line, is_statistics_line
from .normalize import normalize
from .parsers import field_at, field_by_key
from .types import HEADER, OutputRecord


logger = logging.getLogger("fwsyslog.convert")


# ---------- Resolver Interface ----------

class AddressResolver(Protocol):
    def resolve(self, ip: str) -> str:
        ...


# ---------- Assembly ----------

def assemble(
    normalized_line: str,
    resolve_src: bool = False,
    resolve_dst: bool = False,
    resolver: Optional[AddressResolver] = None,
) -> Optional[OutputRecord]:
    """
    Build one OutputRecord from a normalized line.

    Returns None for device statistics lines. Missing fields
    come back as empty columns, never as errors.
    """
    if (resolve_src or resolve_dst) and resolver is None:
        raise ValueError("address resolution requested without a resolver")

    if is_statistics_line(normalized_line):
        return None

    src = field_by_key(normalized_line, "src=")
    if resolve_src:
        src = resolver.resolve(src)

    dst = field_by_key(normalized_line, "dst=")
    if resolve_dst:
        dst = resolver.resolve(dst)

    return OutputRecord(
        month=field_at(normalized_line, 0),
        day=field_at(normalized_line, 1),
        time=field_at(normalized_line, 2),
        policy=field_by_key(normalized_line, "policy_id"),
        service=field_by_key(normalized_line, "service"),
        src_zone=field_by_key(normalized_line, "src_zone"),
        dst_zone=field_by_key(normalized_line, "dst_zone"),
        action=field_by_key(normalized_line, "action"),
        src_address=src,
        src_port=field_by_key(normalized_line, "src_port"),
        dst_address=dst,
        dst_port=field_by_key(normalized_line, "dst_port"),
    )


def ingest_line(
    raw_line: str,
    resolve_src: bool = False,
    resolve_dst: bool = False,
    resolver: Optional[AddressResolver] = None,
) -> Optional[OutputRecord]:
    """
    Convert a single raw syslog line.

    Pipeline:
      raw line
        → strip line terminator
          → normalization
            → field extraction (+ optional resolution)
              → OutputRecord
    """
    normalized = normalize(raw_line.rstrip("\r\n"))
    return assemble(
        normalized,
        resolve_src=resolve_src,
        resolve_dst=resolve_dst,
        resolver=resolver,
    )


# ---------- Metrics ----------

class ConvertMetrics:
    def __init__(self):
        self.read = 0
        self.written = 0
        self.suppressed = 0
        self.blank = 0

    def record_written(self):
        self.read += 1
        self.written += 1

    def record_suppressed(self):
        self.read += 1
        self.suppressed += 1

    def record_blank(self):
        self.read += 1
        self.blank += 1


# ---------- Conversion Pipeline ----------

class LogConverter:
    def __init__(
        self,
        resolver: Optional[AddressResolver] = None,
        resolve_src: bool = False,
        resolve_dst: bool = False,
        emit_header: bool = True,
    ):
        if (resolve_src or resolve_dst) and resolver is None:
            raise ValueError("address resolution requested without a resolver")

        self.resolver = resolver
        self.resolve_src = resolve_src
        self.resolve_dst = resolve_dst
        self.emit_header = emit_header
        self.metrics = ConvertMetrics()

    def records(self, lines: Iterable[str]) -> Iterator[OutputRecord]:
        for line in lines:
            normalized = normalize(line.rstrip("\r\n"))
            kind = classify_line(normalized)

            if kind == LineKind.EMPTY:
                self.metrics.record_blank()
                continue

            if kind == LineKind.STATISTICS:
                logger.debug("suppressed statistics line: %s", line.rstrip("\r\n"))
                self.metrics.record_suppressed()
                continue

            record = assemble(
                normalized,
                resolve_src=self.resolve_src,
                resolve_dst=self.resolve_dst,
                resolver=self.resolver,
            )
            self.metrics.record_written()
            yield record

    def convert(
        self,
        lines: Iterable[str],
        sink: Callable[[str], None],
    ) -> ConvertMetrics:
        """
        Stream lines into sink, one formatted row per call.
        """
        if self.emit_header:
            sink(HEADER)

        for record in self.records(lines):
            sink(record.to_row())

        logger.info(
            "converted %d lines: %d written, %d suppressed, %d blank",
            self.metrics.read,
            self.metrics.written,
            self.metrics.suppressed,
            self.metrics.blank,
        )
        return self.metrics
