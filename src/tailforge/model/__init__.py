"""Tailforge model layer -- public type re-exports."""

from tailforge.model.candidate import CandidateToken, ParsedCandidate
from tailforge.model.diagnostic import Diagnostic, Severity, WarningReport
from tailforge.model.theme import CATEGORIES, Theme
from tailforge.model.utility import Layer, UtilityDefinition, escape_class
from tailforge.model.variant import RuleTarget, VariantKind, VariantModifier

__all__ = [
    # theme
    "CATEGORIES",
    "Theme",
    # utility
    "Layer",
    "UtilityDefinition",
    "escape_class",
    # variant
    "VariantKind",
    "RuleTarget",
    "VariantModifier",
    # candidate
    "CandidateToken",
    "ParsedCandidate",
    # diagnostic
    "Severity",
    "Diagnostic",
    "WarningReport",
]
