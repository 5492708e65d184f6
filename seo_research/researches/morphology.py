"""Morphology research: word forms of the keyphrase and synonyms"""

import logging

from ..language.morphology import KeyphraseForms, build_topic_forms
from .base import BaseResearch, ResearchName

logger = logging.getLogger(__name__)


class MorphologyResearch(BaseResearch):
    """
    Build KeyphraseForms for the paper's keyphrase and synonyms.

    Computed once per run and shared by every research that matches the
    keyphrase. The result is immutable.
    """

    name = ResearchName.MORPHOLOGY

    def run(self, paper, researcher) -> KeyphraseForms:
        rules = researcher.config.rules_for(paper.locale)
        if rules is None and (paper.has_keyword() or paper.has_synonyms()):
            researcher.report_unsupported_locale(paper.locale)
        return build_topic_forms(paper.keyword, paper.synonyms, rules, paper.locale)

    def empty_result(self) -> KeyphraseForms:
        return KeyphraseForms()
