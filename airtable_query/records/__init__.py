from airtable_query.records.models import (
    AirtableRecord,
    DynamicRecord,
    Record,
    RecordCodec,
    SortDirection,
)
from airtable_query.records.envelope import (
    CreateRecordRequest,
    EnvelopeRecord,
    PageEnvelope,
    UpdateRecordRequest,
)

__all__ = [
    "AirtableRecord",
    "DynamicRecord",
    "Record",
    "RecordCodec",
    "SortDirection",
    "CreateRecordRequest",
    "EnvelopeRecord",
    "PageEnvelope",
    "UpdateRecordRequest",
]
