from typing import Literal, TypedDict

ServiceStatus = Literal['online', 'readonly', 'offline']


class Capabilities(TypedDict):
    version_minimum: str
    version_maximum: str
    area_maximum: float
    note_area_maximum: float
    tracepoints_per_page: int
    waynodes_maximum: int
    relationmembers_maximum: int
    changesets_maximum_elements: int
    changesets_default_query_limit: int
    changesets_maximum_query_limit: int
    notes_default_query_limit: int
    notes_maximum_query_limit: int
    timeout: int
    database_status: ServiceStatus
    api_status: ServiceStatus
    gpx_status: ServiceStatus
    imagery_blacklist: list[str]
