from tailforge.variants.expander import VariantExpander, expand
from tailforge.variants.registry import VariantRegistry, sorted_screens

__all__ = ["VariantExpander", "VariantRegistry", "expand", "sorted_screens"]
