"""
templates.py
------------
The eight resume designs expressed as immutable configuration.

A template is pure data (palette, typography, margins, ordered section rows,
optional sidebar) plus three painter hooks from `decorations`. The shared
`layout_renderer.render_layout` turns any of them into a document.

Section rows hold one SectionSpec (single column) or two (rendered side by
side, cursor continues below the taller column).

Section modes: paragraph | summary | bullets | timeline | card | chips | code
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from reportlab.lib.pagesizes import A4

from . import decorations, primitives
from .canvas import Margins

SECTION_MODES = ("paragraph", "summary", "bullets", "timeline", "card", "chips", "code")
TITLE_RULES = primitives.TITLE_RULES + ("vertical",)


@dataclass(frozen=True)
class Palette:
    primary: str
    accent: str
    background: str
    text: str
    muted: str
    surface: str
    highlight: str

    def role(self, name: str) -> str:
        return getattr(self, name)


@dataclass(frozen=True)
class Typography:
    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"
    italic: str = "Helvetica-Oblique"
    mono: str = "Courier"
    title_size: float = 14
    body_size: float = 10
    line_gap: float = 3


SERIF = dict(regular="Times-Roman", bold="Times-Bold", italic="Times-Italic")
MONO = dict(regular="Courier", bold="Courier-Bold", italic="Courier-Oblique")


@dataclass(frozen=True)
class SectionSpec:
    title: str
    field: str
    mode: str = "paragraph"
    color: str = "primary"


@dataclass(frozen=True)
class SidebarSpec:
    side: str
    width: float
    sections: Tuple[SectionSpec, ...]
    padding: float = 20.0


@dataclass(frozen=True)
class TemplateConfig:
    name: str
    label: str
    palette: Palette
    typography: Typography
    margins: Margins
    sections: Tuple[Tuple[SectionSpec, ...], ...]
    paint_header: Callable
    paint_footer: Callable
    paint_background: Optional[Callable] = None
    after_row: Optional[Callable] = None
    sidebar: Optional[SidebarSpec] = None
    title_rule: str = "none"
    bullet: str = "•"
    justify: bool = False
    gutter: float = 20.0
    section_spacing: float = 15.0
    body_indent: float = 0.0
    label_x: Optional[float] = None
    timeline_radius: float = 5.0
    timeline_step: float = 30.0
    emphasize_headings: bool = False

    def __post_init__(self):
        specs = [spec for row in self.sections for spec in row]
        if self.sidebar is not None:
            specs.extend(self.sidebar.sections)
        for spec in specs:
            if spec.mode not in SECTION_MODES:
                raise ValueError(f"{self.name}: unknown section mode {spec.mode!r}")
        if any(len(row) not in (1, 2) for row in self.sections):
            raise ValueError(f"{self.name}: rows hold one or two sections")
        if self.title_rule not in TITLE_RULES:
            raise ValueError(f"{self.name}: unknown title rule {self.title_rule!r}")


def _single(*specs: SectionSpec) -> Tuple[Tuple[SectionSpec, ...], ...]:
    return tuple((spec,) for spec in specs)


CLASSIC = TemplateConfig(
    name="classic",
    label="Classic Resume",
    palette=Palette(
        primary="#bfa14a", accent="#e0c97f", background="#f9f6f2", text="#222222",
        muted="#f5ecd7", surface="#f9f6f2", highlight="#222222",
    ),
    typography=Typography(**SERIF, title_size=14, body_size=10, line_gap=3),
    margins=Margins(top=40, right=40, bottom=55, left=40),
    sections=(
        (SectionSpec("PROFESSIONAL SUMMARY", "objective", "summary"),),
        (SectionSpec("EDUCATION", "education"), SectionSpec("EXPERIENCE", "experience")),
        (SectionSpec("CORE SKILLS", "skills"), SectionSpec("LANGUAGES", "languages")),
    ) + _single(
        SectionSpec("PROJECTS", "projects", "summary"),
        SectionSpec("CERTIFICATIONS", "certifications", "summary"),
        SectionSpec("ACHIEVEMENTS", "achievements", "summary"),
        SectionSpec("REFERENCES", "references_info", "summary"),
        SectionSpec("ADDITIONAL INFORMATION", "additional_info", "summary"),
    ),
    paint_background=decorations.classic_background,
    paint_header=decorations.classic_header,
    paint_footer=decorations.classic_footer,
    title_rule="above",
    justify=True,
)

EXECUTIVE = TemplateConfig(
    name="executive",
    label="Executive Resume",
    palette=Palette(
        primary="#00695c", accent="#00897b", background="#ffffff", text="#1b2b2a",
        muted="#5f7a76", surface="#e0f2f1", highlight="#80cbc4",
    ),
    typography=Typography(title_size=15, body_size=11, line_gap=2),
    margins=Margins(top=50, right=40, bottom=56, left=decorations.EXECUTIVE_SIDEBAR + 40),
    sections=_single(
        SectionSpec("EXECUTIVE SUMMARY", "objective", "summary"),
        SectionSpec("PROFESSIONAL EXPERIENCE", "experience", "timeline"),
        SectionSpec("EDUCATION", "education", "timeline"),
        SectionSpec("PROJECTS", "projects", "card"),
        SectionSpec("CERTIFICATIONS", "certifications", "card"),
        SectionSpec("ACHIEVEMENTS", "achievements", "card"),
        SectionSpec("REFERENCES", "references_info", "card"),
        SectionSpec("ADDITIONAL INFO", "additional_info", "card"),
    ),
    sidebar=SidebarSpec(
        side="left",
        width=decorations.EXECUTIVE_SIDEBAR,
        sections=(
            SectionSpec("SKILLS", "skills", "chips"),
            SectionSpec("LANGUAGES", "languages", "chips"),
        ),
    ),
    paint_background=decorations.executive_background,
    paint_header=decorations.executive_header,
    paint_footer=decorations.executive_footer,
    justify=True,
    section_spacing=12.0,
    emphasize_headings=True,
)

MINIMALIST = TemplateConfig(
    name="minimalist",
    label="Minimalist Resume",
    palette=Palette(
        primary="#ff9800", accent="#ff9800", background="#ffffff", text="#222222",
        muted="#bdbdbd", surface="#fff3e0", highlight="#ff9800",
    ),
    typography=Typography(title_size=12, body_size=12, line_gap=5),
    margins=Margins(top=40, right=decorations.MINIMALIST_SIDEBAR + 30, bottom=45, left=50),
    sections=_single(
        SectionSpec("OBJECTIVE", "objective"),
        SectionSpec("EDUCATION", "education"),
        SectionSpec("EXPERIENCE", "experience"),
        SectionSpec("SKILLS", "skills"),
        SectionSpec("PROJECTS", "projects"),
        SectionSpec("CERTIFICATIONS", "certifications"),
        SectionSpec("ACHIEVEMENTS", "achievements"),
        SectionSpec("LANGUAGES", "languages"),
        SectionSpec("REFERENCES", "references_info"),
        SectionSpec("INFO", "additional_info"),
    ),
    paint_background=decorations.minimalist_background,
    paint_header=decorations.minimalist_header,
    paint_footer=decorations.minimalist_footer,
    title_rule="vertical",
    section_spacing=30.0,
    label_x=A4[0] - decorations.MINIMALIST_SIDEBAR / 2.0 + 4,
)

CREATIVE = TemplateConfig(
    name="creative",
    label="Creative Resume",
    palette=Palette(
        primary="#a21caf", accent="#f472b6", background="#ffffff", text="#2d033b",
        muted="#a78bfa", surface="#fde68a", highlight="#ffffff",
    ),
    typography=Typography(title_size=15, body_size=10, line_gap=3),
    margins=Margins(top=40, right=50, bottom=45, left=50),
    sections=(
        (SectionSpec("Profile", "objective"),),
        (SectionSpec("Skills", "skills", "bullets"), SectionSpec("Projects", "projects", "bullets")),
    ) + _single(
        SectionSpec("Education", "education"),
        SectionSpec("Experience", "experience"),
        SectionSpec("Certifications", "certifications"),
        SectionSpec("Achievements", "achievements"),
        SectionSpec("Languages", "languages"),
        SectionSpec("References", "references_info"),
        SectionSpec("Additional Info", "additional_info"),
    ),
    paint_header=decorations.creative_header,
    paint_footer=decorations.creative_footer,
    after_row=decorations.creative_divider,
    section_spacing=18.0,
    body_indent=10.0,
)

TECHNICAL = TemplateConfig(
    name="technical",
    label="Technical Resume",
    palette=Palette(
        primary="#39ff14", accent="#ffe600", background="#181a20", text="#e0e0e0",
        muted="#23272e", surface="#22242a", highlight="#00fff7",
    ),
    typography=Typography(**MONO, title_size=13, body_size=10, line_gap=3),
    margins=Margins(top=60, right=60, bottom=70, left=60),
    sections=_single(
        SectionSpec("profile", "objective", "code", "primary"),
        SectionSpec("experience", "experience", "code", "accent"),
        SectionSpec("education", "education", "code", "highlight"),
        SectionSpec("skills", "skills", "code", "primary"),
        SectionSpec("projects", "projects", "code", "accent"),
        SectionSpec("certifications", "certifications", "code", "highlight"),
        SectionSpec("achievements", "achievements", "code", "primary"),
        SectionSpec("languages", "languages", "code", "accent"),
        SectionSpec("references", "references_info", "code", "highlight"),
        SectionSpec("info", "additional_info", "code", "primary"),
    ),
    paint_background=decorations.technical_background,
    paint_header=decorations.technical_header,
    paint_footer=decorations.technical_footer,
    title_rule="prompt",
    section_spacing=8.0,
)

PROFESSIONAL = TemplateConfig(
    name="professional",
    label="Professional Resume",
    palette=Palette(
        primary="#ff5722", accent="#ff5722", background="#f4f4f4", text="#111111",
        muted="#999999", surface="#333333", highlight="#e0f2fe",
    ),
    typography=Typography(title_size=15, body_size=11, line_gap=3),
    margins=Margins(top=40, right=decorations.PROFESSIONAL_SIDEBAR + 40, bottom=45, left=60),
    sections=_single(
        SectionSpec("PROFESSIONAL SUMMARY", "objective", "summary"),
        SectionSpec("EXPERIENCE", "experience", "timeline"),
        SectionSpec("EDUCATION", "education"),
        SectionSpec("PROJECTS", "projects"),
        SectionSpec("CERTIFICATIONS", "certifications"),
        SectionSpec("ACHIEVEMENTS", "achievements"),
        SectionSpec("REFERENCES", "references_info"),
        SectionSpec("ADDITIONAL INFO", "additional_info"),
    ),
    sidebar=SidebarSpec(
        side="right",
        width=decorations.PROFESSIONAL_SIDEBAR,
        sections=(
            SectionSpec("SKILLS", "skills", "bullets"),
            SectionSpec("LANGUAGES", "languages", "bullets"),
        ),
    ),
    paint_background=decorations.professional_background,
    paint_header=decorations.professional_header,
    paint_footer=decorations.professional_footer,
    justify=True,
    section_spacing=18.0,
)

ACADEMIC = TemplateConfig(
    name="academic",
    label="Academic Resume",
    palette=Palette(
        primary="#800000", accent="#e8b4b8", background="#f8d7da", text="#333333",
        muted="#777777", surface="#800000", highlight="#ffffff",
    ),
    typography=Typography(**SERIF, title_size=15, body_size=11, line_gap=3),
    margins=Margins(top=40, right=30, bottom=45, left=decorations.ACADEMIC_SIDEBAR + 30),
    sections=_single(
        SectionSpec("OBJECTIVE", "objective", "summary"),
        SectionSpec("EXPERIENCE", "experience"),
        SectionSpec("RESEARCH & PROJECTS", "projects", "bullets"),
        SectionSpec("SKILLS", "skills"),
        SectionSpec("CERTIFICATIONS", "certifications", "bullets"),
        SectionSpec("HONORS & ACHIEVEMENTS", "achievements", "bullets"),
        SectionSpec("REFERENCES", "references_info"),
        SectionSpec("ADDITIONAL INFO", "additional_info"),
    ),
    sidebar=SidebarSpec(
        side="left",
        width=decorations.ACADEMIC_SIDEBAR,
        sections=(
            SectionSpec("EDUCATION", "education", "timeline"),
            SectionSpec("LANGUAGES", "languages", "bullets"),
        ),
    ),
    paint_background=decorations.academic_background,
    paint_header=decorations.academic_header,
    paint_footer=decorations.academic_footer,
    title_rule="below",
    justify=True,
    section_spacing=18.0,
    timeline_radius=4.0,
    timeline_step=24.0,
)

ELEGANT = TemplateConfig(
    name="elegant",
    label="Elegant Resume",
    palette=Palette(
        primary="#b8860b", accent="#ffd54f", background="#e1f5fe", text="#424242",
        muted="#757575", surface="#e1f5fe", highlight="#01579b",
    ),
    typography=Typography(**SERIF, title_size=15, body_size=11, line_gap=3),
    margins=Margins(top=40, right=60, bottom=45, left=60),
    sections=(
        (SectionSpec("PROFILE", "objective", "summary"),),
        (SectionSpec("SKILLS", "skills", "bullets"), SectionSpec("EXPERIENCE", "experience", "bullets")),
        (SectionSpec("PROJECTS", "projects", "bullets"), SectionSpec("EDUCATION", "education", "bullets")),
    ) + _single(
        SectionSpec("CERTIFICATIONS", "certifications", "bullets"),
        SectionSpec("ACHIEVEMENTS", "achievements", "bullets"),
        SectionSpec("LANGUAGES", "languages", "bullets"),
        SectionSpec("REFERENCES", "references_info"),
        SectionSpec("ADDITIONAL INFO", "additional_info"),
    ),
    paint_background=decorations.elegant_background,
    paint_header=decorations.elegant_header,
    paint_footer=decorations.elegant_footer,
    title_rule="short",
    bullet="»",
    justify=True,
    gutter=40.0,
    section_spacing=18.0,
)

TEMPLATES: Tuple[TemplateConfig, ...] = (
    CLASSIC,
    EXECUTIVE,
    MINIMALIST,
    CREATIVE,
    TECHNICAL,
    PROFESSIONAL,
    ACADEMIC,
    ELEGANT,
)
