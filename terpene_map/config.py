"""
Configuration constants for the terpene browsing engine.
"""

import os
from pathlib import Path
from typing import Dict, List, Tuple

# ======================================================
#  DATA SOURCES / CONSTANTS
# ======================================================
# Bundled catalog; point TERPENE_CATALOG at another file or an HTTP(S) URL.
DEFAULT_CATALOG_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "terpenes.json"
CATALOG_SOURCE: str = os.getenv("TERPENE_CATALOG", str(DEFAULT_CATALOG_PATH))

REQUEST_TIMEOUT: int = 30

# Search queries longer than this are truncated before matching
MAX_QUERY_LENGTH: int = 500

ROOT_NAME: str = "Terpenes"

# ======================================================
#  LOCALES
# ======================================================
SUPPORTED_LOCALES: Tuple[str, ...] = ("en", "de")
DEFAULT_LOCALE: str = "en"

LOCALE_OPTIONS: List[Tuple[str, str]] = [
    ("English", "en"),
    ("Deutsch", "de"),
]

# ======================================================
#  CATEGORY TIERS
# ======================================================
# Order matters: rank is the position in this mapping.
CATEGORY_RANKS: Dict[str, int] = {
    "Core": 1,
    "Secondary": 2,
    "Minor": 3,
    "Uncategorized": 4,
}

TIER_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "Core": "Core",
        "Secondary": "Secondary",
        "Minor": "Minor",
        "Uncategorized": "Uncategorized",
    },
    "de": {
        "Core": "Kern",
        "Secondary": "Sekundär",
        "Minor": "Gering",
        "Uncategorized": "Nicht kategorisiert",
    },
}

# ======================================================
#  THERAPEUTIC GROUPS AND EFFECT METADATA
# ======================================================
GROUP_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "mood": "Mood & Energy",
        "cognitive": "Cognitive & Mental Enhancement",
        "relaxation": "Relaxation & Anxiety Management",
        "physical": "Physical & Physiological Management",
        "other": "Other effects",
    },
    "de": {
        "mood": "Stimmung & Energie",
        "cognitive": "Kognitive & mentale Leistung",
        "relaxation": "Entspannung & Angstbewältigung",
        "physical": "Körperliche & physiologische Wirkung",
        "other": "Weitere Wirkungen",
    },
}

# Neutral grey used for effects without metadata
DEFAULT_EFFECT_COLOR: str = "#78909C"

# effect id -> (English name, German name, color, therapeutic group)
EFFECT_METADATA: Dict[str, Tuple[str, str, str, str]] = {
    # Mood & Energy
    "energizing": ("Energizing", "Energetisierend", "#FFA726", "mood"),
    "mood enhancing": ("Mood Enhancing", "Stimmungsaufhellend", "#FFCA28", "mood"),
    "mood stabilizing": ("Mood Stabilizing", "Stimmungsstabilisierend", "#FDD835", "mood"),
    "uplifting": ("Uplifting", "Aufmunternd", "#F57C00", "mood"),
    "balancing": ("Balancing", "Ausgleichend", "#FDD835", "mood"),
    # Cognitive & Mental Enhancement
    "alertness": ("Alertness", "Wachsamkeit", "#66BB6A", "cognitive"),
    "cognitive enhancement": ("Cognitive Enhancement", "Kognitive Verbesserung", "#26A69A", "cognitive"),
    "focus": ("Focus", "Fokus", "#FF7043", "cognitive"),
    "memory-enhancement": ("Memory Enhancement", "Gedächtnisverbessernd", "#26A69A", "cognitive"),
    # Relaxation & Anxiety Management
    "anxiety relief": ("Anxiety Relief", "Angstlinderung", "#5C6BC0", "relaxation"),
    "anxiolytic": ("Anxiolytic", "Angstlösend", "#42A5F5", "relaxation"),
    "relaxing": ("Relaxing", "Entspannend", "#7E57C2", "relaxation"),
    "sedative": ("Sedative", "Beruhigungsmittel", "#7E57C2", "relaxation"),
    "stress relief": ("Stress Relief", "Stressabbau", "#F57C00", "relaxation"),
    "couch-lock": ("Couch-lock", "Couchfesselung", "#7E57C2", "relaxation"),
    "grounding": ("Grounding", "Erdend", "#5C6BC0", "relaxation"),
    # Physical & Physiological Management
    "anti-inflammatory": ("Anti-Inflammatory", "Entzündungshemmend", "#8D6E63", "physical"),
    "appetite suppressant": ("Appetite Suppressant", "Appetitzügler", "#FF8A65", "physical"),
    "breathing support": ("Breathing Support", "Atemunterstützung", "#D7CCC8", "physical"),
    "muscle relaxant": ("Muscle Relaxant", "Muskelentspannend", "#26C6DA", "physical"),
    "pain relief": ("Pain Relief", "Schmerzlinderung", "#A1887F", "physical"),
    "seizure related": ("Seizure Related", "Krampfbezogen", "#66BB6A", "physical"),
    "antioxidant": ("Antioxidant", "Antioxidans", "#9CCC65", "physical"),
    "antimicrobial": ("Antimicrobial", "Antimikrobiell", "#AB47BC", "physical"),
    "antibacterial": ("Antibacterial", "Antibakteriell", "#BA68C8", "physical"),
    "antiviral": ("Antiviral", "Antiviral", "#EC407A", "physical"),
    "antifungal": ("Antifungal", "Antimykotisch", "#F06292", "physical"),
    "decongestant": ("Decongestant", "Abschwellend", "#FFB74D", "physical"),
    "immune-modulating": ("Immune Modulating", "Immunmodulierend", "#AB47BC", "physical"),
}

# ======================================================
#  UI DEFAULTS
# ======================================================
SORT_OPTIONS: List[Tuple[str, str]] = [
    ("Category", "category"),
    ("Name", "name"),
    ("Aroma", "aroma"),
    ("Effects", "effects"),
    ("Sources", "sources"),
]

DIRECTION_OPTIONS: List[Tuple[str, str]] = [
    ("Ascending", "asc"),
    ("Descending", "desc"),
]

EFFECT_MODE_OPTIONS: List[Tuple[str, str]] = [
    ("Match any selected effect (OR)", "OR"),
    ("Match all selected effects (AND)", "AND"),
]

VIEW_OPTIONS: List[Tuple[str, str]] = [
    ("Table", "table"),
    ("Sunburst", "sunburst"),
]

DEFAULT_SORT_KEY: str = "category"
DEFAULT_SORT_DIRECTION: str = "asc"
DEFAULT_EFFECT_MODE: str = "OR"
DEFAULT_VIEW: str = "table"
