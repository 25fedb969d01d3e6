"""
Services package for the guide generator

This package contains the resolve, load and serialize stages plus the pipeline
that runs them. The pipeline itself lives in epg_guide.services.guide_service.
"""
from epg_guide.services.association_service import load_association_table
from epg_guide.services.channel_resolver import fetch_schedule_records, resolve_channel_ids
from epg_guide.services.xmltv_serializer import convert_to_xmltv

__all__ = [
    'load_association_table',
    'fetch_schedule_records',
    'resolve_channel_ids',
    'convert_to_xmltv',
]
