"""
Error taxonomy for the research engine.

Only wiring errors propagate to the caller:
- UnknownResearchError: a research name that is not registered
- ResearchRegistrationError / ResearchCycleError: broken research registry
- RuleTableError: malformed locale rule table

Per-document problems never abort an analysis run:
- InvalidInputError is caught by the Researcher and turned into an empty result
- UnsupportedLocaleError is logged and recorded, analysis continues with identity rules
"""


class ResearchError(Exception):
    """Base class for all research engine errors"""


class InvalidInputError(ResearchError):
    """Paper is missing a field a research needs"""

    def __init__(self, field: str, research: str = ""):
        self.field = field
        self.research = research
        where = f" (research: {research})" if research else ""
        super().__init__(f"Paper has no {field}{where}")


class UnknownResearchError(ResearchError, KeyError):
    """Requested research is not registered"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown research: {name!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class UnsupportedLocaleError(ResearchError):
    """No morphology rules for a locale; identity rules are used instead"""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"No morphology rules for locale {locale!r}, using literal word forms")


class ResearchRegistrationError(ResearchError):
    """Research registry is inconsistent (duplicate name, missing dependency, cycle)"""


class ResearchCycleError(ResearchError):
    """A research was requested while it was still being computed"""

    def __init__(self, chain: list):
        self.chain = list(chain)
        super().__init__("Research dependency cycle: " + " -> ".join(self.chain))


class RuleTableError(ResearchError):
    """Locale rule table could not be loaded or validated"""
