from ui.widgets.paper import PaperView, glyphs_to_html

__all__ = ["PaperView", "glyphs_to_html"]
