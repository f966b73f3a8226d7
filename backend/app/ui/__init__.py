from .page import PageState, render_page

__all__ = ["PageState", "render_page"]
