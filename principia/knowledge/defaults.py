"""Built-in engineering concept graph."""

from __future__ import annotations

from ..types import ComponentRelation, PrincipleCategory, RelationKind

_C = PrincipleCategory
_R = RelationKind

HIERARCHIES: dict[str, list[str]] = {
    "uav": [
        "motor",
        "battery",
        "propeller",
        "flight controller",
        "frame",
        "propulsion system",
        "power system",
        "communication system",
        "navigation system",
        "payload system",
    ],
    "propulsion system": [
        "motor",
        "propeller",
        "electronic speed controller",
        "motor mount",
    ],
    "power system": [
        "battery",
        "power distribution board",
        "voltage regulator",
        "charging system",
    ],
    "flight controller": [
        "microprocessor",
        "inertial measurement unit",
        "gyroscope",
        "accelerometer",
        "barometer",
    ],
    "engine": [
        "combustion chamber",
        "piston",
        "crankshaft",
        "valve system",
        "fuel injection system",
        "cooling system",
        "ignition system",
    ],
    "bridge": [
        "foundation",
        "deck",
        "superstructure",
        "support cables",
        "anchoring system",
    ],
}

RELATIONSHIPS: dict[str, list[ComponentRelation]] = {
    "uav": [
        ComponentRelation("motor", _R.PART_OF, 0.95),
        ComponentRelation("battery", _R.REQUIRES, 0.98),
        ComponentRelation("propeller", _R.PART_OF, 0.90),
        ComponentRelation("flight controller", _R.CONTROLS, 0.92),
    ],
    "propulsion system": [
        ComponentRelation("motor", _R.PART_OF, 0.95),
        ComponentRelation("electronic speed controller", _R.CONTROLS, 0.9),
    ],
    "power system": [
        ComponentRelation("battery", _R.CONVERTS, 0.9),
        ComponentRelation("power distribution board", _R.CONNECTS, 0.85),
    ],
    "engine": [
        ComponentRelation("piston", _R.PART_OF, 0.95),
        ComponentRelation("crankshaft", _R.CONVERTS, 0.9),
        ComponentRelation("fuel injection system", _R.REQUIRES, 0.9),
        ComponentRelation("ignition system", _R.CONTROLS, 0.85),
    ],
    "bridge": [
        ComponentRelation("foundation", _R.SUPPORTS, 0.95),
        ComponentRelation("deck", _R.PART_OF, 0.9),
        ComponentRelation("support cables", _R.SUPPORTS, 0.85),
    ],
}

CATEGORIES: dict[str, PrincipleCategory] = {
    "motor": _C.MECHANICAL,
    "battery": _C.ELECTRICAL,
    "propeller": _C.MECHANICAL,
    "flight controller": _C.SYSTEM,
    "frame": _C.STRUCTURAL,
    "electronic speed controller": _C.ELECTRICAL,
    "motor mount": _C.STRUCTURAL,
    "power distribution board": _C.ELECTRICAL,
    "voltage regulator": _C.ELECTRICAL,
    "microprocessor": _C.ELECTRICAL,
    "combustion chamber": _C.THERMAL,
    "piston": _C.MECHANICAL,
    "crankshaft": _C.MECHANICAL,
    "valve system": _C.MECHANICAL,
    "cooling system": _C.THERMAL,
    "ignition system": _C.ELECTRICAL,
    "foundation": _C.STRUCTURAL,
    "deck": _C.STRUCTURAL,
    "superstructure": _C.STRUCTURAL,
    "support cables": _C.STRUCTURAL,
    "anchoring system": _C.STRUCTURAL,
}

SYNONYMS: dict[str, list[str]] = {
    "uav": ["drone", "unmanned aerial vehicle", "quadcopter"],
    "motor": ["engine", "actuator"],
    "battery": ["power source", "energy storage"],
}
