"""Message rendering: template selection, stringification, formatting."""

from validkit.application.message.formatter import MessageFormatter
from validkit.application.message.selector import choose_template
from validkit.application.message.stringifier import Stringifier

__all__ = [
    "MessageFormatter",
    "Stringifier",
    "choose_template",
]
