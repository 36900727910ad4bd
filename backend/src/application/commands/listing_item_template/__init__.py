"""ListingItemTemplate commands."""

from .add_template import TemplateAddCommand
from .get_template import TemplateGetCommand
from .remove_template import TemplateRemoveCommand
from .search_templates import TemplateSearchCommand

__all__ = [
    "TemplateAddCommand",
    "TemplateGetCommand",
    "TemplateRemoveCommand",
    "TemplateSearchCommand",
]
