"""Pattern tables for engineering-principle classification.

Category groups are listed in enumeration order; the scan order matters for
ties (first group scanned wins).
"""

from __future__ import annotations

from ..types import PrincipleCategory

CATEGORY_PATTERNS: dict[PrincipleCategory, list[str]] = {
    PrincipleCategory.STRUCTURAL: [
        r"(load|stress|strain|tension|compression|shear|moment|deflection)",
        r"(beam|column|truss|frame|foundation|support)",
        r"(buckling|stiffness|failure|span)",
        r"(structural\s+integrity|bearing\s+capacity|factor\s+of\s+safety)",
    ],
    PrincipleCategory.MECHANICAL: [
        r"(force|torque|power|energy|motion|velocity|acceleration)",
        r"(gear|lever|pulley|spring|damper|actuator)",
        r"(friction|lubrication|wear|vibration|resonance)",
        r"(mechanical\s+advantage|efficiency|work|momentum)",
    ],
    PrincipleCategory.ELECTRICAL: [
        r"(voltage|current|resistance|capacitance|inductance)",
        r"(circuit|conductor|insulator|semiconductor|transistor)",
        r"(electric\s+field|magnetic\s+field|electromagnetic)",
        r"(ohm's\s+law|kirchhoff|maxwell|faraday)",
    ],
    PrincipleCategory.THERMAL: [
        r"(heat|temperature|thermal|conduction|convection|radiation)",
        r"(thermodynamic|entropy|enthalpy|specific\s+heat)",
        r"(heat\s+transfer|thermal\s+expansion|insulation)",
        r"(carnot|stefan.boltzmann|fourier)",
    ],
    PrincipleCategory.CHEMICAL: [
        r"(reaction|catalyst|equilibrium|kinetics|stoichiometry)",
        r"(acid|base|oxidation|reduction|pH|molarity)",
        r"(chemical\s+bond|molecular|atomic|ionic)",
        r"(mass\s+transfer|diffusion|absorption|distillation)",
    ],
    PrincipleCategory.MATERIAL: [
        r"(crystal|grain|microstructure|phase|alloy)",
        r"(elastic\s+modulus|yield\s+strength|strength|hardness|toughness|ductility)",
        r"(composite|polymer|ceramic|metal|steel|concrete|aluminium|aluminum|timber)",
        r"(corrosion|creep|fracture|fatigue|resist|withstand|durability)",
    ],
    PrincipleCategory.SYSTEM: [
        r"(feedback|control|regulation|stability|response)",
        r"(input|output|transfer\s+function|block\s+diagram)",
        r"(system\s+dynamics|optimization|performance|reliability)",
        r"(redundancy|fault\s+tolerance|safety\s+factor)",
    ],
    PrincipleCategory.PROCESS: [
        r"(manufacturing|production|assembly|quality\s+control)",
        r"(workflow|procedure|protocol|standard|specification)",
        r"(efficiency|throughput|yield|waste|optimization)",
        r"(automation|robotics|lean|six\s+sigma)",
    ],
    PrincipleCategory.DESIGN: [
        r"(requirement|specification|constraint|objective)",
        r"(iteration|prototype|validation|verification)",
        r"(trade.off|optimization|design\s+space|parameter)",
        r"(modularity|scalability|maintainability|sustainability)",
    ],
}

PRINCIPLE_INDICATORS = [
    r"(principle|law|theorem|rule|equation|formula)",
    r"(based\s+on|according\s+to|governed\s+by|follows)",
    r"(fundamental|basic|key|essential|critical|important)",
    r"(mechanism|process|phenomenon|effect|relationship)",
    r"(causes|enables|provides|produces|results\s+in|leads\s+to|prevents|allows)",
]

RELATION_INDICATORS = [
    r"(related\s+to|associated\s+with|connected\s+to|linked\s+to)",
    r"(component|part|element|subsystem|module)",
    r"(application|use|implementation|example)",
    r"(see\s+also|similar|comparable|analogous)",
]

MATH_NOTATION = r"[=<>±∆∇∑∏∫]|\\[a-zA-Z]+"

TECHNICAL_TERM = r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b|[a-z]+-[a-z]+"
CAPITALIZED_PHRASE = r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b"
PARENTHETICAL = r"\(([^)]+)\)"

STOP_WORDS = frozenset(
    {
        "the", "and", "that", "with", "for", "are", "can", "this", "will", "such",
        "may", "also", "been", "have", "has", "was", "were", "from", "they", "these",
        "more", "some", "other", "than", "only", "very", "when", "where", "what",
    }
)


def is_stop_word(term: str) -> bool:
    return term.lower() in STOP_WORDS
