"""Base token table every theme extends."""

from __future__ import annotations

from typing import Any

DEFAULT_SCREENS = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

DEFAULT_COLORS: dict[str, Any] = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000000",
    "white": "#ffffff",
    "slate": {
        "50": "#f8fafc", "100": "#f1f5f9", "200": "#e2e8f0", "300": "#cbd5e1",
        "400": "#94a3b8", "500": "#64748b", "600": "#475569", "700": "#334155",
        "800": "#1e293b", "900": "#0f172a", "950": "#020617",
    },
    "gray": {
        "50": "#f9fafb", "100": "#f3f4f6", "200": "#e5e7eb", "300": "#d1d5db",
        "400": "#9ca3af", "500": "#6b7280", "600": "#4b5563", "700": "#374151",
        "800": "#1f2937", "900": "#111827", "950": "#030712",
    },
    "red": {
        "50": "#fef2f2", "100": "#fee2e2", "200": "#fecaca", "300": "#fca5a5",
        "400": "#f87171", "500": "#ef4444", "600": "#dc2626", "700": "#b91c1c",
        "800": "#991b1b", "900": "#7f1d1d", "950": "#450a0a",
    },
    "amber": {
        "50": "#fffbeb", "100": "#fef3c7", "200": "#fde68a", "300": "#fcd34d",
        "400": "#fbbf24", "500": "#f59e0b", "600": "#d97706", "700": "#b45309",
        "800": "#92400e", "900": "#78350f", "950": "#451a03",
    },
    "green": {
        "50": "#f0fdf4", "100": "#dcfce7", "200": "#bbf7d0", "300": "#86efac",
        "400": "#4ade80", "500": "#22c55e", "600": "#16a34a", "700": "#15803d",
        "800": "#166534", "900": "#14532d", "950": "#052e16",
    },
    "blue": {
        "50": "#eff6ff", "100": "#dbeafe", "200": "#bfdbfe", "300": "#93c5fd",
        "400": "#60a5fa", "500": "#3b82f6", "600": "#2563eb", "700": "#1d4ed8",
        "800": "#1e40af", "900": "#1e3a8a", "950": "#172554",
    },
}

DEFAULT_SPACING = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

# Sizing scales hold only what spacing does not: fractions, viewport and
# intrinsic keywords.
_FRACTIONS = {
    "1/2": "50%",
    "1/3": "33.333333%",
    "2/3": "66.666667%",
    "1/4": "25%",
    "3/4": "75%",
}

_INTRINSIC = {
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

DEFAULT_WIDTH = {"auto": "auto", **_FRACTIONS, "full": "100%", "screen": "100vw", **_INTRINSIC}

DEFAULT_HEIGHT = {"auto": "auto", **_FRACTIONS, "full": "100%", "screen": "100vh", **_INTRINSIC}

DEFAULT_MIN_WIDTH = {"0": "0px", "full": "100%", **_INTRINSIC}

DEFAULT_MIN_HEIGHT = {"0": "0px", "full": "100%", "screen": "100vh", **_INTRINSIC}

DEFAULT_MAX_WIDTH = {
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "full": "100%",
    **_INTRINSIC,
    "prose": "65ch",
}

DEFAULT_MAX_HEIGHT = {"none": "none", "full": "100%", "screen": "100vh", **_INTRINSIC}

DEFAULT_BORDER_RADIUS = {
    "none": "0px",
    "sm": "0.125rem",
    "DEFAULT": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

DEFAULT_BORDER_WIDTH = {
    "DEFAULT": "1px",
    "0": "0px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

DEFAULT_BOX_SHADOW = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "DEFAULT": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "none",
}

DEFAULT_FONT_FAMILY = {
    "sans": [
        "ui-sans-serif",
        "system-ui",
        "sans-serif",
        "Apple Color Emoji",
        "Segoe UI Emoji",
    ],
    "serif": ["ui-serif", "Georgia", "Cambria", "Times New Roman", "Times", "serif"],
    "mono": ["ui-monospace", "SFMono-Regular", "Menlo", "Monaco", "Consolas", "monospace"],
}

DEFAULT_FONT_SIZE = {
    "xs": ["0.75rem", "1rem"],
    "sm": ["0.875rem", "1.25rem"],
    "base": ["1rem", "1.5rem"],
    "lg": ["1.125rem", "1.75rem"],
    "xl": ["1.25rem", "1.75rem"],
    "2xl": ["1.5rem", "2rem"],
    "3xl": ["1.875rem", "2.25rem"],
    "4xl": ["2.25rem", "2.5rem"],
    "5xl": ["3rem", "1"],
    "6xl": ["3.75rem", "1"],
}

DEFAULT_FONT_WEIGHT = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

DEFAULT_OPACITY = {
    "0": "0",
    "5": "0.05",
    "10": "0.1",
    "20": "0.2",
    "25": "0.25",
    "30": "0.3",
    "40": "0.4",
    "50": "0.5",
    "60": "0.6",
    "70": "0.7",
    "75": "0.75",
    "80": "0.8",
    "90": "0.9",
    "95": "0.95",
    "100": "1",
}

DEFAULT_KEYFRAMES = {
    "spin": {"to": {"transform": "rotate(360deg)"}},
    "ping": {"75%, 100%": {"transform": "scale(2)", "opacity": "0"}},
    "pulse": {"50%": {"opacity": ".5"}},
    "bounce": {
        "0%, 100%": {
            "transform": "translateY(-25%)",
            "animation-timing-function": "cubic-bezier(0.8,0,1,1)",
        },
        "50%": {
            "transform": "none",
            "animation-timing-function": "cubic-bezier(0,0,0.2,1)",
        },
    },
}

DEFAULT_ANIMATION = {
    "none": "none",
    "spin": "spin 1s linear infinite",
    "ping": "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite",
    "pulse": "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
    "bounce": "bounce 1s infinite",
}

DEFAULT_DISPLAY = {
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "table": "table",
    "contents": "contents",
    "hidden": "none",
}

BASE_THEME: dict[str, dict[str, Any]] = {
    "screens": DEFAULT_SCREENS,
    "colors": DEFAULT_COLORS,
    "spacing": DEFAULT_SPACING,
    "width": DEFAULT_WIDTH,
    "height": DEFAULT_HEIGHT,
    "minWidth": DEFAULT_MIN_WIDTH,
    "minHeight": DEFAULT_MIN_HEIGHT,
    "maxWidth": DEFAULT_MAX_WIDTH,
    "maxHeight": DEFAULT_MAX_HEIGHT,
    "borderRadius": DEFAULT_BORDER_RADIUS,
    "borderWidth": DEFAULT_BORDER_WIDTH,
    "boxShadow": DEFAULT_BOX_SHADOW,
    "fontFamily": DEFAULT_FONT_FAMILY,
    "fontSize": DEFAULT_FONT_SIZE,
    "fontWeight": DEFAULT_FONT_WEIGHT,
    "opacity": DEFAULT_OPACITY,
    "keyframes": DEFAULT_KEYFRAMES,
    "animation": DEFAULT_ANIMATION,
    "display": DEFAULT_DISPLAY,
}
