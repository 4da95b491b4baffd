from prepare_template.tui.renderers import PrepareConsoleUI

__all__ = ["PrepareConsoleUI"]
