from baseline_analyzer.tui.renderers import ReportConsoleUI

__all__ = ["ReportConsoleUI"]
