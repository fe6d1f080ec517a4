"""Root of the validkit exception hierarchy."""


class ValidkitError(Exception):
    """Base of every error validkit raises.

    Two branches hang off it: ComponentError for factory and registry
    misuse (unknown rules, missing templates), and ValidationException
    for inputs that failed a rule. Catching ValidkitError covers both.
    """
