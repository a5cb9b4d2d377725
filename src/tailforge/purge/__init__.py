from tailforge.purge.engine import purge
from tailforge.purge.safelist import Safelist, SafelistEntry

__all__ = ["Safelist", "SafelistEntry", "purge"]
