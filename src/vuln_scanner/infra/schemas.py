from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OssIndexVulnerability(BaseModel):
	"""One advisory attached to a component report"""
	model_config = ConfigDict(populate_by_name=True)

	id: str
	title: str = ""
	description: str = ""
	cvss_score: Optional[float] = Field(None, alias="cvssScore")
	cvss_vector: Optional[str] = Field(None, alias="cvssVector")
	cve: Optional[str] = None
	reference: str = ""

	@field_validator("title", "description", "reference", mode="before")
	@classmethod
	def _null_as_empty(cls, value: Any) -> Any:
		# The service sends explicit nulls for text it does not have.
		return "" if value is None else value


class ComponentReport(BaseModel):
	"""Top-level element of the OSS Index component-report response"""
	coordinates: str
	description: Optional[str] = None
	reference: Optional[str] = None
	vulnerabilities: list[OssIndexVulnerability] = Field(default_factory=list)

	@field_validator("vulnerabilities", mode="before")
	@classmethod
	def _null_as_no_vulnerabilities(cls, value: Any) -> Any:
		return [] if value is None else value
