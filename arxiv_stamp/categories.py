"""
The closed vocabulary of arXiv subject categories.

A category token is either a bare archive (``hep-th``, ``astro-ph``) or an
archive plus subject class joined by a dot (``q-bio.CB``, ``math.AG``).
Matching is exact and case-sensitive.  The table is built once at import and
never mutated.

Reference: https://arxiv.org/category_taxonomy
"""

from __future__ import annotations

from enum import Enum


class ArchiveGroup(str, Enum):
    """Top-level arXiv grouping an archive belongs to."""

    PHYSICS = "Physics"
    MATHEMATICS = "Mathematics"
    COMPUTER_SCIENCE = "Computer Science"
    QUANTITATIVE_BIOLOGY = "Quantitative Biology"
    QUANTITATIVE_FINANCE = "Quantitative Finance"
    STATISTICS = "Statistics"
    EESS = "Electrical Engineering and Systems Science"
    ECONOMICS = "Economics"


# ─── Subject Classes per Archive ─────────────────────────────────────
# An empty tuple means the archive has no subject classes.

_SUBJECT_CLASSES: dict[str, tuple[str, ...]] = {
    "astro-ph": ("CO", "EP", "GA", "HE", "IM", "SR"),
    "cond-mat": (
        "dis-nn", "mes-hall", "mtrl-sci", "other", "quant-gas",
        "soft", "stat-mech", "str-el", "supr-con",
    ),
    "cs": (
        "AI", "AR", "CC", "CE", "CG", "CL", "CR", "CV", "CY", "DB",
        "DC", "DL", "DM", "DS", "ET", "FL", "GL", "GR", "GT", "HC",
        "IR", "IT", "LG", "LO", "MA", "MM", "MS", "NA", "NE", "NI",
        "OH", "OS", "PF", "PL", "RO", "SC", "SD", "SE", "SI", "SY",
    ),
    "econ": ("EM", "GN", "TH"),
    "eess": ("AS", "IV", "SP", "SY"),
    "gr-qc": (),
    "hep-ex": (),
    "hep-lat": (),
    "hep-ph": (),
    "hep-th": (),
    "math": (
        "AC", "AG", "AP", "AT", "CA", "CO", "CT", "CV", "DG", "DS",
        "FA", "GM", "GN", "GR", "GT", "HO", "IT", "KT", "LO", "MG",
        "MP", "NA", "NT", "OA", "OC", "PR", "QA", "RA", "RT", "SG",
        "SP", "ST",
    ),
    "math-ph": (),
    "nlin": ("AO", "CD", "CG", "PS", "SI"),
    "nucl-ex": (),
    "nucl-th": (),
    "physics": (
        "acc-ph", "ao-ph", "app-ph", "atm-clus", "atom-ph", "bio-ph",
        "chem-ph", "class-ph", "comp-ph", "data-an", "ed-ph", "flu-dyn",
        "gen-ph", "geo-ph", "hist-ph", "ins-det", "med-ph", "optics",
        "plasm-ph", "pop-ph", "soc-ph", "space-ph",
    ),
    "q-bio": ("BM", "CB", "GN", "MN", "NC", "OT", "PE", "QM", "SC", "TO"),
    "q-fin": ("CP", "EC", "GN", "MF", "PM", "PR", "RM", "ST", "TR"),
    "quant-ph": (),
    "stat": ("AP", "CO", "ME", "ML", "OT", "TH"),
}

# Archives that were merged into others but still name old-scheme papers,
# e.g. alg-geom/9201001 or solv-int/9901001.
_RETIRED_ARCHIVES: dict[str, ArchiveGroup] = {
    "acc-phys": ArchiveGroup.PHYSICS,
    "adap-org": ArchiveGroup.PHYSICS,
    "alg-geom": ArchiveGroup.MATHEMATICS,
    "ao-sci": ArchiveGroup.PHYSICS,
    "atom-ph": ArchiveGroup.PHYSICS,
    "bayes-an": ArchiveGroup.PHYSICS,
    "chao-dyn": ArchiveGroup.PHYSICS,
    "chem-ph": ArchiveGroup.PHYSICS,
    "cmp-lg": ArchiveGroup.COMPUTER_SCIENCE,
    "comp-gas": ArchiveGroup.PHYSICS,
    "dg-ga": ArchiveGroup.MATHEMATICS,
    "funct-an": ArchiveGroup.MATHEMATICS,
    "mtrl-th": ArchiveGroup.PHYSICS,
    "patt-sol": ArchiveGroup.PHYSICS,
    "plasm-ph": ArchiveGroup.PHYSICS,
    "q-alg": ArchiveGroup.MATHEMATICS,
    "solv-int": ArchiveGroup.PHYSICS,
    "supr-con": ArchiveGroup.PHYSICS,
}

_ARCHIVE_GROUPS: dict[str, ArchiveGroup] = {
    "cs": ArchiveGroup.COMPUTER_SCIENCE,
    "econ": ArchiveGroup.ECONOMICS,
    "eess": ArchiveGroup.EESS,
    "math": ArchiveGroup.MATHEMATICS,
    "q-bio": ArchiveGroup.QUANTITATIVE_BIOLOGY,
    "q-fin": ArchiveGroup.QUANTITATIVE_FINANCE,
    "stat": ArchiveGroup.STATISTICS,
    **_RETIRED_ARCHIVES,
}


def _build_vocabulary() -> frozenset[str]:
    tokens: set[str] = set(_RETIRED_ARCHIVES)
    for archive, subjects in _SUBJECT_CLASSES.items():
        tokens.add(archive)
        tokens.update(f"{archive}.{subject}" for subject in subjects)
    return frozenset(tokens)


VALID_CATEGORIES: frozenset[str] = _build_vocabulary()


# ─── Public API ──────────────────────────────────────────────────────


def is_valid_category(token: str) -> bool:
    """Return True if *token* is a current or historical arXiv category."""
    return token in VALID_CATEGORIES


def split_category(token: str) -> tuple[str, str | None]:
    """Split ``q-bio.CB`` into ``("q-bio", "CB")`` and ``hep-th`` into ``("hep-th", None)``.

    Raises:
        ValueError: If *token* is not a valid category.
    """
    if not is_valid_category(token):
        raise ValueError(f"Not an arXiv category: {token!r}")
    archive, _, subject = token.partition(".")
    return archive, subject or None


def archive_group(archive: str) -> ArchiveGroup:
    """Map an archive name to its top-level group.

    Every archive not listed explicitly is a physics archive.

    Raises:
        ValueError: If *archive* is not a known archive.
    """
    if archive not in _SUBJECT_CLASSES and archive not in _RETIRED_ARCHIVES:
        raise ValueError(f"Not an arXiv archive: {archive!r}")
    return _ARCHIVE_GROUPS.get(archive, ArchiveGroup.PHYSICS)
