from tailforge.emitter.css import emit, render_rule
from tailforge.emitter.preflight import preflight_rules

__all__ = ["emit", "preflight_rules", "render_rule"]
