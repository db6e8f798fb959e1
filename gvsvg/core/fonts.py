"""
Equivalents of the standard PostScript fonts.

Layouts name fonts by their PostScript name (``Times-Roman``,
``Helvetica-Bold``...). Each name maps to a family, weight, stretch and
style in the native (fontconfig) convention and to a generic family with
weight and style in the SVG convention.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class PostscriptAlias:
    name: str
    family: str
    weight: Optional[str] = None
    stretch: Optional[str] = None
    style: Optional[str] = None
    svg_font_family: Optional[str] = None
    svg_font_weight: Optional[str] = None
    svg_font_style: Optional[str] = None


def _alias(name, family, weight, stretch, style, svg_family, svg_weight, svg_style):
    return PostscriptAlias(
        name=name,
        family=family,
        weight=weight or None,
        stretch=stretch or None,
        style=style or None,
        svg_font_family=svg_family or None,
        svg_font_weight=svg_weight or None,
        svg_font_style=svg_style or None,
    )


_POSTSCRIPT_ALIASES = (
    _alias("AvantGarde-Book", "URW Gothic L", "book", "", "", "sans-Serif", "", ""),
    _alias("AvantGarde-BookOblique", "URW Gothic L", "book", "", "oblique", "sans-Serif", "", "oblique"),
    _alias("AvantGarde-Demi", "URW Gothic L", "demi", "", "", "sans-Serif", "bold", ""),
    _alias("AvantGarde-DemiOblique", "URW Gothic L", "demi", "", "oblique", "sans-Serif", "bold", "oblique"),
    _alias("Bookman-Demi", "URW Bookman L", "demi", "", "", "serif", "bold", ""),
    _alias("Bookman-DemiItalic", "URW Bookman L", "demi", "", "italic", "serif", "bold", "italic"),
    _alias("Bookman-Light", "URW Bookman L", "light", "", "", "serif", "", ""),
    _alias("Bookman-LightItalic", "URW Bookman L", "light", "", "italic", "serif", "", "italic"),
    _alias("Courier", "Courier", "", "", "", "monospace", "", ""),
    _alias("Courier-Bold", "Courier", "bold", "", "", "monospace", "bold", ""),
    _alias("Courier-BoldOblique", "Courier", "bold", "", "oblique", "monospace", "bold", "oblique"),
    _alias("Courier-Oblique", "Courier", "", "", "oblique", "monospace", "", "oblique"),
    _alias("Helvetica", "Helvetica", "", "", "", "sans-Serif", "", ""),
    _alias("Helvetica-Bold", "Helvetica", "bold", "", "", "sans-Serif", "bold", ""),
    _alias("Helvetica-BoldOblique", "Helvetica", "bold", "", "oblique", "sans-Serif", "bold", "oblique"),
    _alias("Helvetica-Narrow", "Helvetica", "", "condensed", "", "sans-Serif", "", ""),
    _alias("Helvetica-Narrow-Bold", "Helvetica", "bold", "condensed", "", "sans-Serif", "bold", ""),
    _alias("Helvetica-Narrow-BoldOblique", "Helvetica", "bold", "condensed", "oblique", "sans-Serif", "bold", "oblique"),
    _alias("Helvetica-Narrow-Oblique", "Helvetica", "", "condensed", "oblique", "sans-Serif", "", "oblique"),
    _alias("Helvetica-Oblique", "Helvetica", "", "", "oblique", "sans-Serif", "", "oblique"),
    _alias("NewCenturySchlbk-Bold", "Century Schoolbook L", "bold", "", "", "serif", "bold", ""),
    _alias("NewCenturySchlbk-BoldItalic", "Century Schoolbook L", "bold", "", "italic", "serif", "bold", "italic"),
    _alias("NewCenturySchlbk-Italic", "Century Schoolbook L", "", "", "italic", "serif", "", "italic"),
    _alias("NewCenturySchlbk-Roman", "Century Schoolbook L", "roman", "", "", "serif", "", ""),
    _alias("Palatino-Bold", "Palatino Linotype", "bold", "", "", "serif", "bold", ""),
    _alias("Palatino-BoldItalic", "Palatino Linotype", "bold", "", "italic", "serif", "bold", "italic"),
    _alias("Palatino-Italic", "Palatino Linotype", "", "", "italic", "serif", "", "italic"),
    _alias("Palatino-Roman", "Palatino Linotype", "", "", "", "serif", "", ""),
    _alias("Symbol", "Symbol", "", "", "", "fantasy", "", ""),
    _alias("Times-Bold", "Times", "bold", "", "", "serif", "bold", ""),
    _alias("Times-BoldItalic", "Times", "bold", "", "italic", "serif", "bold", "italic"),
    _alias("Times-Italic", "Times", "", "", "italic", "serif", "", "italic"),
    _alias("Times-Roman", "Times", "", "", "", "serif", "", ""),
    _alias("ZapfChancery-MediumItalic", "URW Chancery L", "medium", "", "italic", "serif", "", "italic"),
    _alias("ZapfDingbats", "Dingbats", "", "", "", "fantasy", "", ""),
)

POSTSCRIPT_ALIASES: Dict[str, PostscriptAlias] = {
    alias.name.lower(): alias for alias in _POSTSCRIPT_ALIASES
}


def lookup_postscript_alias(fontname: str) -> Optional[PostscriptAlias]:
    """Find the alias bundle for a PostScript font name, ignoring case."""
    return POSTSCRIPT_ALIASES.get(fontname.lower())
