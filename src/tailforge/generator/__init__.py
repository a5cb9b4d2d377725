from tailforge.generator.generator import generate
from tailforge.generator.rules import DEFAULT_RULES, STATIC_UTILITIES, UtilityRule
from tailforge.generator.universe import UtilityUniverse

__all__ = ["DEFAULT_RULES", "STATIC_UTILITIES", "UtilityRule", "UtilityUniverse", "generate"]
