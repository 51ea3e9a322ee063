"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Which palette color marks which message role

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

THEME_NAME = "gqlchat-mocha"

# Catppuccin Mocha, user turns in green and assistant turns in mauve
GQLCHAT_MOCHA = Theme(
    name=THEME_NAME,
    primary="#89b4fa",      # Blue - focus and header
    secondary="#cba6f7",    # Mauve - assistant messages
    accent="#f9e2af",       # Yellow - typing placeholder
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",      # Green - user messages, send button
    warning="#fab387",      # Peach - request in flight
    error="#f38ba8",        # Red - error banner
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "block-cursor-foreground": "#11111b",
        "block-cursor-background": "#f5e0dc",
        "input-cursor-background": "#cdd6f4",
        "input-selection-background": "#89b4fa 30%",
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "scrollbar-background": "#181825",
        "footer-background": "#11111b",
        "footer-key-foreground": "#f9e2af",
        "footer-description-foreground": "#a6adc8",
        "text-muted": "#6c7086",
        "text-disabled": "#45475a",
    },
)
