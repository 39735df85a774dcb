"""Constants for Report document field names"""


class ReportFields:
    """Field name constants for persisted reports"""
    ID = "id"
    VIDEO_URL = "videoUrl"
    VIDEO_FILE_NAME = "videoFileName"
    REFERENCE_URLS = "referenceUrls"
    REFERENCE_FILE_NAMES = "referenceFileNames"
    CITED_URLS = "referenceUrlsList"
    SUMMARY = "summary"
    FINDINGS = "findings"
    CREATED_AT = "createdAt"
    CREATED_BY = "createdBy"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class FindingFields:
    """Field name constants for stored findings"""
    SERIAL_NO = "serial_no"
    TIMESTAMP = "timestamp"
    TAG_NUMBER = "tag_number"
    COMPONENT = "component"
    FAULT_TYPE = "fault_type"
    SEVERITY = "severity"
    DESCRIPTION = "description"
    RECOMMENDATION = "recommendation"
    STANDARD_GAP = "standard_gap"
