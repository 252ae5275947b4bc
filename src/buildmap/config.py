from __future__ import annotations

from pydantic import BaseModel, Field


DEFAULT_BASE_URL = "https://learn.microsoft.com/en-us/officeupdates/"
DEFAULT_TABLE_NAME = "O365BuildToVersionMap"


class ScrapeConfig(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    version_prefix: str = "16.0."
    channel_pages: dict[str, list[str]] = Field(default_factory=lambda: {
        "semi-annual-enterprise-channel": [
            "semi-annual-enterprise-channel",
            "semi-annual-enterprise-channel-archived",
        ],
        "semi-annual-enterprise-channel-preview": [
            "semi-annual-enterprise-channel-preview",
            "semi-annual-enterprise-channel-preview-archived",
        ],
        "monthly-enterprise-channel": [
            "monthly-enterprise-channel",
            "monthly-enterprise-channel-archived",
        ],
    })
    # Only pulled in by the "All" selector
    legacy_pages: list[str] = Field(default_factory=lambda: [
        "current-channel",
        "monthly-channel-archived",
    ])

    def page_url(self, page: str) -> str:
        return self.base_url.rstrip("/") + "/" + page


class CaseExpressionConfig(BaseModel):
    column: str = "v_GS_OFFICE365PROPLUSCONFIGURATIONS.VersionToReport0"
    alias: str = "Office365Build"
    unknown_label: str = "Unknown"


class TableScriptOptions(BaseModel):
    table_name: str = DEFAULT_TABLE_NAME
    dont_drop_table: bool = False
    delete_existing_records: bool = False
    column_length: int = 50
