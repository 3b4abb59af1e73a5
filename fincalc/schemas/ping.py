"""Health-check response."""

from fincalc.schemas.common import Record


class PingResponse(Record):
    message: str
    version: str
