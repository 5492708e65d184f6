"""
Analysis configuration.

Config sources (later wins):
1. Built-in rule table (DEFAULT_MORPHOLOGY_RULES)
2. YAML rule file: explicit path, or SEO_RESEARCH_RULES_PATH env var
3. SEO_RESEARCH_DEFAULT_LOCALE env var

Environment variables are read from .env.local (local dev) or .env when
load_environment() is called; variables already set are not overridden.

The config object is passed explicitly to each Researcher, rule tables are
never looked up from module globals during analysis.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .errors import RuleTableError
from .language.rules import DEFAULT_MORPHOLOGY_RULES, MorphologyRules, parse_rule_table, resolve_rules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "SEO_RESEARCH_RULES_PATH"
DEFAULT_LOCALE_ENV = "SEO_RESEARCH_DEFAULT_LOCALE"


class AnalysisConfig(BaseModel):
    """Configuration shared by the analysis runs of a session"""

    model_config = ConfigDict(frozen=True)

    morphology_rules: Dict[str, MorphologyRules] = Field(
        default_factory=lambda: dict(DEFAULT_MORPHOLOGY_RULES),
        description="Locale or language → morphology rules",
    )
    default_locale: str = Field(default="en_US", description="Locale used when a paper has none")

    def rules_for(self, locale: str) -> Optional[MorphologyRules]:
        """Rule set for a locale, None when the locale has no rules"""
        return resolve_rules(locale or self.default_locale, self.morphology_rules)


def load_environment(directory: Union[str, Path, None] = None) -> Optional[Path]:
    """
    Load .env.local (preferred) or .env into os.environ.

    Returns:
        Path of the loaded file, None when neither exists
    """
    base = Path(directory) if directory else Path.cwd()
    for name in (".env.local", ".env"):
        env_file = base / name
        if env_file.exists():
            logger.debug(f"Loading environment from: {env_file}")
            load_dotenv(env_file, override=False)
            return env_file
    return None


def load_rule_file(path: Union[str, Path]) -> Dict[str, MorphologyRules]:
    """
    Load a YAML locale rule table.

    Raises:
        RuleTableError: file missing, not valid YAML, or rules invalid
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise RuleTableError(f"Cannot read rule table {path}: {e}") from e
    except yaml.YAMLError as e:
        raise RuleTableError(f"Rule table {path} is not valid YAML: {e}") from e

    if raw is None:
        return {}
    table = parse_rule_table(raw)
    logger.info(f"Loaded morphology rules for {len(table)} locales from {path}")
    return table


def load_config(rules_path: Union[str, Path, None] = None) -> AnalysisConfig:
    """
    Build the analysis config from defaults, an optional YAML file and env vars.

    Args:
        rules_path: YAML rule file; defaults to $SEO_RESEARCH_RULES_PATH

    Raises:
        RuleTableError: the rule file is malformed
    """
    rules = dict(DEFAULT_MORPHOLOGY_RULES)

    rules_path = rules_path or os.getenv(RULES_PATH_ENV)
    if rules_path:
        rules.update(load_rule_file(rules_path))

    default_locale = os.getenv(DEFAULT_LOCALE_ENV) or "en_US"
    return AnalysisConfig(morphology_rules=rules, default_locale=default_locale)
