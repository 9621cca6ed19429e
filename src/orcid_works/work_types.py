"""ORCID work type vocabulary.

Values follow the list of work types supported by ORCID:
    https://info.orcid.org/ufaqs/what-work-types-does-orcid-support/

Anything the registry sends outside this vocabulary is mapped to
WorkType.UNSUPPORTED, never passed through as a raw string.
"""

import re
from enum import Enum

_WHITESPACE_RE = re.compile(r'\s+')


class WorkType(str, Enum):
    """Closed set of ORCID work types."""

    # ── Academic publications ─────────────────────────────────────────────
    ARTICLE = "journal-article"
    BOOK = "book"
    BOOK_CHAPTER = "book-chapter"
    CONFERENCE_PAPER = "conference-paper"
    CONFERENCE_PROCEEDINGS = "conference-proceedings"
    CONFERENCE_POSTER = "conference-poster"
    CONFERENCE_PRESENTATION = "conference-presentation"
    CONFERENCE_OUTPUT = "conference-output"  # abstracts, extended abstracts
    DISSERTATION = "dissertation-thesis"
    PREPRINT = "preprint"
    WORKING_PAPER = "working-paper"

    # ── Review and editing ────────────────────────────────────────────────
    ANNOTATION = "annotation"
    BOOK_REVIEW = "book-review"
    JOURNAL_ISSUE = "journal-issue"
    REVIEW = "review"

    # ── Dissemination ─────────────────────────────────────────────────────
    BLOG_POST = "blog-post"
    DICTIONARY_ENTRY = "dictionary-entry"
    ENCYCLOPEDIA_ENTRY = "encyclopedia-entry"
    MAGAZINE_ARTICLE = "magazine-article"
    NEWSPAPER_ARTICLE = "newspaper-article"
    PUBLIC_SPEECH = "public-speech"
    REPORT = "report"
    WEBSITE = "website"

    # ── Creative ──────────────────────────────────────────────────────────
    ARTISTIC_PERFORMANCE = "artistic-performance"
    DESIGN = "design"
    IMAGE = "image"
    ONLINE_RESOURCE = "online-resource"
    MOVING_IMAGE = "moving-image"
    MUSICAL_COMPOSITION = "musical-composition"
    SOUND = "sound"

    # ── Data and process ──────────────────────────────────────────────────
    CARTOGRAPHIC_MATERIAL = "cartographic-material"
    CLINICAL_STUDY = "clinical-study"
    DATASET = "data-set"
    DATA_MANAGEMENT_PLAN = "data-management-plan"
    PHYSICAL_OBJECT = "physical-object"
    RESEARCH_TECHNIQUE = "research-technique"
    RESEARCH_TOOL = "research-tool"
    SOFTWARE = "software"

    # ── Legal and IP ──────────────────────────────────────────────────────
    INVENTION = "invention"
    LICENSE = "license"
    PATENT = "patent"
    REGISTERED_COPYRIGHT = "registered-copyright"
    STANDARDS_AND_POLICY = "standards-and-policy"
    TRADEMARK = "trademark"

    # ── Teaching and supervision ──────────────────────────────────────────
    LECTURE_SPEECH = "lecture-speech"
    LEARNING_OBJECT = "learning-object"
    SUPERVISED_STUDENT_PUBLICATION = "supervised-student-publication"

    # ── Sentinels ─────────────────────────────────────────────────────────
    OTHER = "other"
    UNSUPPORTED = "unsupported"

    # ── Legacy (still returned for older records) ─────────────────────────
    CONFERENCE_ABSTRACT = "conference-abstract"
    DISCLOSURE = "disclosure"
    EDITED_BOOK = "edited-book"
    MANUAL = "manual"
    NEWSLETTER_ARTICLE = "newsletter-article"
    SPIN_OFF_COMPANY = "spin-off-company"
    TECHNICAL_STANDARDS = "technical-standards"
    TEST = "test"

    def __str__(self) -> str:
        return self.value

    def format(self) -> str:
        """Human-readable label, e.g. "Journal article"."""
        return format_work_type(self)

    @classmethod
    def from_string(cls, text: str) -> "WorkType":
        """Lenient lookup by member name or value; see parse_work_type()."""
        return parse_work_type(text)


DEPRECATED_WORK_TYPES = frozenset({
    WorkType.CONFERENCE_ABSTRACT,
    WorkType.DISCLOSURE,
    WorkType.EDITED_BOOK,
    WorkType.MANUAL,
    WorkType.NEWSLETTER_ARTICLE,
    WorkType.SPIN_OFF_COMPANY,
    WorkType.TECHNICAL_STANDARDS,
    WorkType.TEST,
})

_VALUES = {member.value: member for member in WorkType}


def format_work_type(work_type: WorkType | str) -> str:
    """Format a work type the way the ORCID user interface labels it.

    Only the first hyphen becomes a space and only the first letter is
    capitalized: "journal-article" -> "Journal article",
    "data-management-plan" -> "Data management-plan".
    """
    text = str(work_type).replace("-", " ", 1)
    return text[:1].upper() + text[1:]


def parse_work_type(text: str) -> WorkType:
    """Parse user input into a WorkType.

    Tries, in order:
        1. a member name, case-insensitive, whitespace runs read as "_"
           ("journal article" is not a name, "  conference  paper " is)
        2. a member value ("journal-article")

    Returns WorkType.UNSUPPORTED when neither matches.
    """
    if not isinstance(text, str):
        return WorkType.UNSUPPORTED

    trimmed = text.strip()
    key = _WHITESPACE_RE.sub("_", trimmed.upper())
    member = WorkType.__members__.get(key)
    if member is not None:
        return member

    return _VALUES.get(trimmed, WorkType.UNSUPPORTED)


def coerce_work_type(raw) -> WorkType:
    """Strict membership check used on registry data: exact values only."""
    if isinstance(raw, WorkType):
        return raw
    if isinstance(raw, str):
        return _VALUES.get(raw, WorkType.UNSUPPORTED)
    return WorkType.UNSUPPORTED
