# Import every model so metadata (create_all, Flask-Migrate) sees all tables.
from .domain import Domain
from .template import Template
from .presets import ThemePreset, ComponentStylePreset, AnalyticsProfile
from .site import Site
from .page import Page
from .page_version import PageVersion
from .link import LinkLibrary, LinkAssignment
from .build import Build
from .autopost import AutopostSchedule, AutopostRun
from .bulk_operation import BulkOperation

__all__ = [
    "Domain",
    "Template",
    "ThemePreset",
    "ComponentStylePreset",
    "AnalyticsProfile",
    "Site",
    "Page",
    "PageVersion",
    "LinkLibrary",
    "LinkAssignment",
    "Build",
    "AutopostSchedule",
    "AutopostRun",
    "BulkOperation",
]
