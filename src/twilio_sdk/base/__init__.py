"""Generic resource operations shared by every resource type."""

from .deleter import Deleter
from .descriptor import ResourceDescriptor
from .errors import RestException, check_response
from .fetcher import Fetcher
from .page import Page, PageMeta
from .reader import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Reader
from .resource import SidResource
from .resource_set import ResourceSet, SequenceState
from .writer import Creator, Updater

__all__ = [
    "Creator",
    "Deleter",
    "Fetcher",
    "Page",
    "PageMeta",
    "Reader",
    "ResourceDescriptor",
    "ResourceSet",
    "RestException",
    "SequenceState",
    "SidResource",
    "Updater",
    "check_response",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
]
