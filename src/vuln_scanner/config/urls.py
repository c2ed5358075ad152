from __future__ import annotations


OSS_INDEX_COMPONENT_REPORT_URL = "https://ossindex.sonatype.org/api/v3/component-report"
