"""Text formatting utilities for the TUI.

Hides the details of how assistant replies are turned into something the
terminal can render.
"""

import re

# Ordered (pattern, replacement) pairs; delimiters first, then commands
_LATEX_RULES: list[tuple[str, str]] = [
    (r"\\\(\s*", ""),
    (r"\s*\\\)", ""),
    (r"\\\[\s*", ""),
    (r"\s*\\\]", ""),
    (r"\$\$\s*", ""),
    # Inline math only; "$5 and $10" are prices and stay as written
    (r"(?<![\\\w])\$(?=[^\d\s$])([^$\n]+)(?<![\\\s])\$", r"\1"),
    (r"\\frac\{([^}]*)\}\{([^}]*)\}", r"(\1)/(\2)"),
    (r"\\sqrt\{([^}]*)\}", r"sqrt(\1)"),
    (r"\\times", "x"),
    (r"\\cdot", "*"),
    (r"\\approx", "~="),
    (r"\\leq", "<="),
    (r"\\geq", ">="),
    (r"\\neq", "!="),
    (r"\\(?:text|textbf|mathrm)\{([^}]*)\}", r"\1"),
    (r"\^{([^}]*)}", r"^(\1)"),
    (r"_{([^}]*)}", r"_(\1)"),
]

_CODE_PREFIXES = ("def ", "class ", "import ", "from ", "async def ", "function ", "const ")


def clean_latex(text: str) -> str:
    """Convert LaTeX notation to plain text equivalents.

    DeFi answers often carry pricing formulas; Rich cannot render LaTeX, so
    delimiters are dropped and common commands spelled out.
    """
    for pattern, replacement in _LATEX_RULES:
        text = re.sub(pattern, replacement, text)
    return text


def looks_like_code(text: str) -> bool:
    """True for multi-line replies that are bare code without fences."""
    stripped = text.strip()
    return (
        "\n" in stripped
        and stripped.startswith(_CODE_PREFIXES)
        and "```" not in stripped
    )


def truncate(text: str, limit: int) -> str:
    """Shorten text to limit characters, marking the cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
