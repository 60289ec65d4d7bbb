from .css_parser import parse_color

__all__ = ["parse_color"]
