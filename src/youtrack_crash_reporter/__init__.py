"""YouTrack crash reporter.

Reports crash-monitoring events into a YouTrack project:
- configuration loaded from `.env`
- structured logging
- project verification and issue creation over the YouTrack REST API
"""

__version__ = "0.1.0"

from youtrack_crash_reporter.config import ReporterSettings, YouTrackConfig
from youtrack_crash_reporter.service import YouTrackService

__all__ = ["__version__", "ReporterSettings", "YouTrackConfig", "YouTrackService"]
